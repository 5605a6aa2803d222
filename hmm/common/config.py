"""User configuration for the movie method.

The config directory (default ~/.config/hmm, overridable with HMM_CONFIG_DIR
or --config) holds three YAML tables:
- actors.yaml: one actor per initial (55)
- sets.yaml: one set per final (13), each with five tone rooms
- props.yaml: one prop per character component
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from hmm.pinyin.ids import actor_category, actor_id, set_id
from hmm.pinyin.tables import ALL_INITIALS, CANONICAL_FINALS, TONES
from hmm.schema.base import DEFAULT_ROOM_NAMES, Actor, MovieSet, Prop, ToneRoom


CONFIG_ENV_VAR = "HMM_CONFIG_DIR"
ACTORS_FILENAME = "actors.yaml"
SETS_FILENAME = "sets.yaml"
PROPS_FILENAME = "props.yaml"
CONFIG_FILENAMES = (ACTORS_FILENAME, SETS_FILENAME, PROPS_FILENAME)

# Starter props: basic strokes and common radicals with their meanings
DEFAULT_PROP_MEANINGS = (
    ("一", "one"),
    ("丨", "vertical stroke"),
    ("丿", "slash"),
    ("人", "person"),
    ("口", "mouth"),
    ("日", "sun"),
    ("月", "moon"),
    ("木", "tree"),
    ("水", "water"),
    ("火", "fire"),
    ("土", "earth"),
    ("金", "gold"),
    ("心", "heart"),
    ("手", "hand"),
    ("女", "woman"),
    ("子", "child"),
)


@dataclass
class MovieConfig:
    """All user tables."""
    actors: List[Actor] = field(default_factory=list)
    sets: List[MovieSet] = field(default_factory=list)
    props: List[Prop] = field(default_factory=list)


def get_config_dir(override: Optional[str] = None) -> Path:
    """Resolve the config directory: explicit override, then env, then ~/.config/hmm."""
    if override:
        return Path(override).expanduser()
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".config" / "hmm"


def _load_table(path: Path, key: str) -> List[Dict[str, Any]]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        return []
    items = data.get(key) or []
    return [item for item in items if isinstance(item, dict)]


def _save_table(path: Path, key: str, items: List[Dict[str, Any]]) -> Path:
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump({key: items}, f, allow_unicode=True, sort_keys=False)
    return path


def load_actors(path: Path) -> List[Actor]:
    """Load actors from a YAML file."""
    return [Actor.from_dict(item) for item in _load_table(path, "actors")]


def load_sets(path: Path) -> List[MovieSet]:
    """Load sets from a YAML file."""
    return [MovieSet.from_dict(item) for item in _load_table(path, "sets")]


def load_props(path: Path) -> List[Prop]:
    """Load props from a YAML file."""
    return [Prop.from_dict(item) for item in _load_table(path, "props")]


def save_actors(path: Path, actors: List[Actor]) -> Path:
    """Write actors to a YAML file."""
    return _save_table(path, "actors", [a.to_dict() for a in actors])


def save_sets(path: Path, sets: List[MovieSet]) -> Path:
    """Write sets to a YAML file."""
    return _save_table(path, "sets", [s.to_dict() for s in sets])


def save_props(path: Path, props: List[Prop]) -> Path:
    """Write props to a YAML file."""
    return _save_table(path, "props", [p.to_dict() for p in props])


def load_config(config_dir: Path) -> MovieConfig:
    """Load all three tables. Raises if any file is missing or unreadable."""
    return MovieConfig(
        actors=load_actors(config_dir / ACTORS_FILENAME),
        sets=load_sets(config_dir / SETS_FILENAME),
        props=load_props(config_dir / PROPS_FILENAME),
    )


def load_user_config(config_dir: Path) -> Optional[MovieConfig]:
    """Load the user's tables.

    Returns None if the directory has no actors.yaml yet. Missing sets or
    props files are treated as empty tables.
    """
    actors_path = config_dir / ACTORS_FILENAME
    if not actors_path.exists():
        return None
    sets_path = config_dir / SETS_FILENAME
    props_path = config_dir / PROPS_FILENAME
    return MovieConfig(
        actors=load_actors(actors_path),
        sets=load_sets(sets_path) if sets_path.exists() else [],
        props=load_props(props_path) if props_path.exists() else [],
    )


def default_actors() -> List[Actor]:
    """One unnamed actor per initial."""
    return [
        Actor(id=actor_id(initial), initial=initial, category=actor_category(initial))
        for initial in ALL_INITIALS
    ]


def default_sets() -> List[MovieSet]:
    """One unnamed set per final (null first) with the default tone rooms."""
    finals = ("",) + tuple(sorted(CANONICAL_FINALS, key=len))
    return [
        MovieSet(
            id=set_id(final),
            final=final,
            rooms=[ToneRoom(tone=t, name=DEFAULT_ROOM_NAMES[t]) for t in TONES],
        )
        for final in finals
    ]


def default_props() -> List[Prop]:
    """Starter props for the most common components."""
    return [Prop(id=c, component=c, meaning=m) for c, m in DEFAULT_PROP_MEANINGS]


def write_default_config(config_dir: Path) -> List[Path]:
    """Write template tables into `config_dir`, overwriting existing files."""
    config_dir.mkdir(parents=True, exist_ok=True)
    return [
        save_actors(config_dir / ACTORS_FILENAME, default_actors()),
        save_sets(config_dir / SETS_FILENAME, default_sets()),
        save_props(config_dir / PROPS_FILENAME, default_props()),
    ]


__all__ = [
    "CONFIG_ENV_VAR",
    "ACTORS_FILENAME",
    "SETS_FILENAME",
    "PROPS_FILENAME",
    "CONFIG_FILENAMES",
    "MovieConfig",
    "get_config_dir",
    "load_actors",
    "load_sets",
    "load_props",
    "save_actors",
    "save_sets",
    "save_props",
    "load_config",
    "load_user_config",
    "default_actors",
    "default_sets",
    "default_props",
    "write_default_config",
]
