"""Character dictionary and decomposition from Make Me a Hanzi data.

The dictionary file is JSON lines, one character per line:
    {"character": "好", "definition": "good", "pinyin": ["hǎo"],
     "decomposition": "⿰女子", "radical": "女",
     "etymology": {"type": "ideographic", "hint": "..."}}

Decompositions are IDS strings: an operator such as ⿰ (left-right) followed
by its components. "？" marks an unknown component.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from hmm.common.utils import is_cjk_char


UNKNOWN_MARK = "？"

# IDS operators and the layout they describe
IDS_OPERATORS: Dict[str, str] = {
    "⿰": "left-right",
    "⿱": "top-bottom",
    "⿲": "left-mid-right",
    "⿳": "top-mid-bottom",
    "⿴": "surround",
    "⿵": "surround-top",
    "⿶": "surround-bottom",
    "⿷": "surround-left",
    "⿸": "surround-upper-left",
    "⿹": "surround-upper-right",
    "⿺": "surround-lower-left",
    "⿻": "overlaid",
}

DICTIONARY_FILENAME = "dictionary.jsonl"


@dataclass
class Etymology:
    type: str = ""  # pictophonetic, pictographic, ideographic
    semantic: str = ""  # meaning component
    phonetic: str = ""  # sound component
    hint: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Etymology":
        return cls(
            type=str(data.get("type") or ""),
            semantic=str(data.get("semantic") or ""),
            phonetic=str(data.get("phonetic") or ""),
            hint=str(data.get("hint") or ""),
        )


@dataclass
class DictionaryEntry:
    character: str
    definition: str = ""
    pinyin: List[str] = field(default_factory=list)
    decomposition: str = ""
    radical: str = ""
    etymology: Optional[Etymology] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DictionaryEntry":
        ety = data.get("etymology")
        return cls(
            character=str(data.get("character") or ""),
            definition=str(data.get("definition") or ""),
            pinyin=[str(p) for p in data.get("pinyin") or []],
            decomposition=str(data.get("decomposition") or ""),
            radical=str(data.get("radical") or ""),
            etymology=Etymology.from_dict(ety) if isinstance(ety, dict) else None,
        )

    @property
    def components(self) -> List[str]:
        return extract_components(self.decomposition)


class Dictionary:
    """In-memory character dictionary keyed by character."""

    def __init__(self) -> None:
        self._entries: Dict[str, DictionaryEntry] = {}

    def load_from_file(self, path: Path, verbose: bool = False) -> int:
        """Load entries from a JSONL file. Returns the number of entries read.

        Blank and malformed lines are skipped.
        """
        loaded = 0
        skipped = 0
        with open(path, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    data = json.loads(line)
                except ValueError:
                    skipped += 1
                    continue
                if not isinstance(data, dict) or not data.get("character"):
                    skipped += 1
                    continue
                entry = DictionaryEntry.from_dict(data)
                self._entries[entry.character] = entry
                loaded += 1
        if verbose:
            print(f"[dictionary] [info] Loaded {loaded} entries from {path} ({skipped} skipped)")
        return loaded

    def add(self, entry: DictionaryEntry) -> None:
        self._entries[entry.character] = entry

    def lookup(self, char: str) -> Optional[DictionaryEntry]:
        return self._entries.get(char)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, char: object) -> bool:
        return char in self._entries


def extract_components(decomposition: str) -> List[str]:
    """Component characters of an IDS string, in order."""
    if not decomposition or decomposition == UNKNOWN_MARK:
        return []
    return [
        ch for ch in decomposition
        if ch not in IDS_OPERATORS and ch != UNKNOWN_MARK and is_cjk_char(ch)
    ]


def decomposition_type(decomposition: str) -> str:
    """Layout name of the first IDS operator, "simple" if none, "unknown" if empty."""
    if not decomposition or decomposition == UNKNOWN_MARK:
        return "unknown"
    for ch in decomposition:
        if ch in IDS_OPERATORS:
            return IDS_OPERATORS[ch]
    return "simple"


def component_positions(decomposition: str) -> Dict[str, str]:
    """Where each component sits, e.g. {"女": "left", "子": "right"}.

    Only the outermost layout is considered; nested operators are not
    resolved.
    """
    components = extract_components(decomposition)
    structure = decomposition_type(decomposition)
    positions: Dict[str, str] = {}

    if structure == "left-right" and len(components) >= 2:
        positions[components[0]] = "left"
        positions[components[1]] = "right"
    elif structure == "top-bottom" and len(components) >= 2:
        positions[components[0]] = "top"
        positions[components[1]] = "bottom"
    elif structure == "left-mid-right" and len(components) >= 3:
        positions[components[0]] = "left"
        positions[components[1]] = "middle"
        positions[components[2]] = "right"
    elif structure == "top-mid-bottom" and len(components) >= 3:
        positions[components[0]] = "top"
        positions[components[1]] = "middle"
        positions[components[2]] = "bottom"
    elif structure.startswith("surround") and len(components) >= 2:
        positions[components[0]] = "outer"
        positions[components[1]] = "inner"
    else:
        for i, comp in enumerate(components, start=1):
            positions[comp] = f"component {i}"
    return positions


def format_decomposition(decomposition: str) -> str:
    """Human-readable structure, e.g. "left-right: 女 + 子"."""
    if not decomposition or decomposition == UNKNOWN_MARK:
        return "No decomposition available"
    components = extract_components(decomposition)
    if not components:
        return "No components found"
    return f"{decomposition_type(decomposition)}: {' + '.join(components)}"


def find_dictionary(config_dir: Optional[Path] = None, explicit: Optional[str] = None) -> Optional[Path]:
    """Locate dictionary.jsonl: explicit path, ./data/, then the config dir."""
    candidates: List[Path] = []
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.append(Path("data") / DICTIONARY_FILENAME)
    if config_dir is not None:
        candidates.append(config_dir / DICTIONARY_FILENAME)
    for path in candidates:
        if path.is_file():
            return path
    return None


def load_dictionary(
    config_dir: Optional[Path] = None,
    explicit: Optional[str] = None,
    verbose: bool = False,
) -> Optional[Dictionary]:
    """Load the first dictionary found, or None when there is none."""
    path = find_dictionary(config_dir, explicit)
    if path is None:
        if verbose:
            print("[dictionary] [skip] No dictionary.jsonl found; meanings and props unavailable")
        return None
    d = Dictionary()
    d.load_from_file(path, verbose=verbose)
    return d


__all__ = [
    "UNKNOWN_MARK",
    "IDS_OPERATORS",
    "DICTIONARY_FILENAME",
    "Etymology",
    "DictionaryEntry",
    "Dictionary",
    "extract_components",
    "decomposition_type",
    "component_positions",
    "format_decomposition",
    "find_dictionary",
    "load_dictionary",
]
