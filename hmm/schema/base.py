"""Movie-method element types: actors, sets, tone rooms, props and scenes.

Each type maps to one entry of the user's YAML tables. `from_dict` accepts
the raw mapping (missing keys take defaults, unknown keys are ignored) and
`to_dict` drops empty optional fields so saved files stay short.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from hmm.pinyin.tables import ACTOR_CATEGORIES, TONES


PROP_APPEARANCE = "appearance"  # what the component looks like
PROP_MEANING = "meaning"  # what the component means
PROP_COMBINATION = "combination"  # both
PROP_TYPES = (PROP_APPEARANCE, PROP_MEANING, PROP_COMBINATION)

# Default tone rooms inside every set
DEFAULT_ROOM_NAMES: Dict[int, str] = {
    1: "Outside entrance",
    2: "Kitchen",
    3: "Bedroom",
    4: "Bathroom",
    5: "Roof",
}


def _str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value)


def _compact(data: Dict[str, Any], optional: List[str]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k not in optional or v}


@dataclass
class Actor:
    """A person (real or fictional) standing for an initial."""
    id: str  # "b", "bi", "bu", "nv", "null"
    initial: str
    category: str
    name: str = ""  # e.g. "Brad Pitt"
    description: str = ""
    image_prompt: str = ""

    def __post_init__(self):
        if self.category not in ACTOR_CATEGORIES:
            raise ValueError(f"category must be one of {', '.join(ACTOR_CATEGORIES)}, got '{self.category}'")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Actor":
        # YAML reads an unquoted `null` category as None
        category = data.get("category")
        return cls(
            id=_str(data, "id"),
            initial=_str(data, "initial"),
            category="null" if category is None else str(category),
            name=_str(data, "name"),
            description=_str(data, "description"),
            image_prompt=_str(data, "image_prompt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "id": self.id,
                "initial": self.initial,
                "category": self.category,
                "name": self.name,
                "description": self.description,
                "image_prompt": self.image_prompt,
            },
            ["description", "image_prompt"],
        )


@dataclass
class ToneRoom:
    """An area inside a set that stands for a tone."""
    tone: int
    name: str = ""  # "Kitchen"
    description: str = ""
    image_prompt: str = ""

    def __post_init__(self):
        if self.tone not in TONES:
            raise ValueError(f"tone must be 1-5, got {self.tone!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ToneRoom":
        return cls(
            tone=int(data.get("tone", 0)),
            name=_str(data, "name"),
            description=_str(data, "description"),
            image_prompt=_str(data, "image_prompt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "tone": self.tone,
                "name": self.name,
                "description": self.description,
                "image_prompt": self.image_prompt,
            },
            ["description", "image_prompt"],
        )


@dataclass
class MovieSet:
    """A location (memory palace) standing for a final."""
    id: str  # "a", "ang", "null"
    final: str
    name: str = ""  # "Childhood home"
    link: str = ""  # how the place links to the sound
    description: str = ""
    epoch: str = ""  # life chapter
    rooms: List[ToneRoom] = field(default_factory=list)
    image_prompt: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MovieSet":
        rooms = data.get("rooms") or []
        return cls(
            id=_str(data, "id"),
            final=_str(data, "final"),
            name=_str(data, "name"),
            link=_str(data, "link"),
            description=_str(data, "description"),
            epoch=_str(data, "epoch"),
            rooms=[ToneRoom.from_dict(r) for r in rooms if isinstance(r, dict)],
            image_prompt=_str(data, "image_prompt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "id": self.id,
                "final": self.final,
                "name": self.name,
                "link": self.link,
                "description": self.description,
                "epoch": self.epoch,
                "rooms": [r.to_dict() for r in self.rooms],
                "image_prompt": self.image_prompt,
            },
            ["link", "description", "epoch", "image_prompt"],
        )

    def room_for(self, tone: int) -> Optional[ToneRoom]:
        """The room configured for a tone, if any."""
        for room in self.rooms:
            if room.tone == tone:
                return room
        return None


@dataclass
class Prop:
    """An object standing for a character component."""
    id: str  # the component itself, e.g. "木"
    component: str
    name: str = ""  # "tree"
    type: str = ""  # appearance | meaning | combination
    meaning: str = ""
    description: str = ""
    image_prompt: str = ""

    def __post_init__(self):
        if self.type and self.type not in PROP_TYPES:
            raise ValueError(f"prop type must be one of {', '.join(PROP_TYPES)}, got '{self.type}'")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Prop":
        return cls(
            id=_str(data, "id"),
            component=_str(data, "component"),
            name=_str(data, "name"),
            type=_str(data, "type"),
            meaning=_str(data, "meaning"),
            description=_str(data, "description"),
            image_prompt=_str(data, "image_prompt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "id": self.id,
                "component": self.component,
                "name": self.name,
                "type": self.type,
                "meaning": self.meaning,
                "description": self.description,
                "image_prompt": self.image_prompt,
            },
            ["type", "meaning", "description", "image_prompt"],
        )


@dataclass
class Scene:
    """A complete mnemonic scene for one reading of a character."""
    character: str
    pinyin: str
    initial: str
    final: str
    tone: int
    keyword: str = ""  # the meaning to remember
    actor_id: str = ""
    set_id: str = ""
    prop_ids: List[str] = field(default_factory=list)
    script: str = ""  # the story
    image_prompt: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Scene":
        return cls(
            character=_str(data, "character"),
            pinyin=_str(data, "pinyin"),
            initial=_str(data, "initial"),
            final=_str(data, "final"),
            tone=int(data.get("tone", 5)),
            keyword=_str(data, "keyword"),
            actor_id=_str(data, "actor_id"),
            set_id=_str(data, "set_id"),
            prop_ids=[str(p) for p in data.get("prop_ids") or []],
            script=_str(data, "script"),
            image_prompt=_str(data, "image_prompt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "character": self.character,
            "pinyin": self.pinyin,
            "initial": self.initial,
            "final": self.final,
            "tone": self.tone,
            "keyword": self.keyword,
            "actor_id": self.actor_id,
            "set_id": self.set_id,
            "prop_ids": list(self.prop_ids),
            "script": self.script,
            "image_prompt": self.image_prompt,
        }


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
