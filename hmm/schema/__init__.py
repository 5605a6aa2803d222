"""Movie-method element definitions."""

from hmm.schema.base import (
    PROP_APPEARANCE,
    PROP_MEANING,
    PROP_COMBINATION,
    PROP_TYPES,
    DEFAULT_ROOM_NAMES,
    Actor,
    ToneRoom,
    MovieSet,
    Prop,
    Scene,
)

__all__ = [
    "PROP_APPEARANCE",
    "PROP_MEANING",
    "PROP_COMBINATION",
    "PROP_TYPES",
    "DEFAULT_ROOM_NAMES",
    "Actor",
    "ToneRoom",
    "MovieSet",
    "Prop",
    "Scene",
]
