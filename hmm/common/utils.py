"""Helpers shared by the library and the command-line tools."""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

from hanziconv import HanziConv


PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Code point ranges treated as Chinese characters (unified ideographs,
# extensions, compatibility ideographs and radicals)
CJK_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x2E80, 0x2EFF),  # CJK radicals supplement
    (0x2F00, 0x2FDF),  # Kangxi radicals
    (0x3400, 0x4DBF),  # extension A
    (0x4E00, 0x9FFF),  # unified ideographs
    (0xF900, 0xFAFF),  # compatibility ideographs
    (0x20000, 0x2EBEF),  # extensions B-F
    (0x30000, 0x3134F),  # extension G
)

_env_loaded = False


def _parse_env_line(raw: str) -> Optional[Tuple[str, str]]:
    """KEY=value from one .env line; None for comments and junk."""
    line = raw.strip()
    if line.startswith("export "):
        line = line[len("export "):].lstrip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = line.split("=", 1)
    key = key.strip()
    if not key:
        return None
    return key, value.strip().strip('"').strip("'")


def _load_env_file() -> None:
    """Load OPENAI_API_KEY etc. from ./.env and <project root>/.env.

    Variables already set in the environment win.
    """
    global _env_loaded
    if _env_loaded:
        return
    _env_loaded = True
    for env_path in (Path.cwd() / ".env", PROJECT_ROOT / ".env"):
        if not env_path.is_file():
            continue
        for raw in env_path.read_text(encoding="utf-8", errors="ignore").splitlines():
            parsed = _parse_env_line(raw)
            if parsed is not None:
                os.environ.setdefault(*parsed)


# Call once on import
_load_env_file()


def is_cjk_char(ch: str) -> bool:
    """True for a single Chinese character or radical (and 〇)."""
    if ch == "〇":
        return True
    code = ord(ch)
    return any(lo <= code <= hi for lo, hi in CJK_RANGES)


def keep_only_cjk(text: str) -> str:
    return "".join(ch for ch in text if is_cjk_char(ch))


def unique_preserve_order(items: Iterable[str]) -> List[str]:
    """Drop repeated items, keeping the first occurrence."""
    seen: Set[str] = set()
    result: List[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def simplified_to_traditional(text: str) -> str:
    """Traditional form of simplified Chinese text (hanziconv)."""
    if not text:
        return text
    return HanziConv.toTraditional(text)


__all__ = [
    "PROJECT_ROOT",
    "CJK_RANGES",
    "_load_env_file",
    "is_cjk_char",
    "keep_only_cjk",
    "unique_preserve_order",
    "simplified_to_traditional",
]
