"""Character readings via pypinyin, decomposed for HMM."""

from typing import List, Tuple

from pypinyin import Style, pinyin

from hmm.common.utils import is_cjk_char, unique_preserve_order
from hmm.pinyin.parser import ParsedSyllable, decompose


def get_readings(char: str) -> List[str]:
    """Return every reading of a character with tone marks (heteronyms included).

    Non-Chinese input returns an empty list.
    """
    if not char:
        return []
    result = pinyin(char, style=Style.TONE, heteronym=True, errors="ignore")
    if not result:
        return []
    return unique_preserve_order(r for r in result[0] if r)


def parse_char(char: str) -> List[ParsedSyllable]:
    """Decompose every reading of a single character."""
    return [decompose(reading) for reading in get_readings(char)]


def parse_text(text: str) -> List[Tuple[str, List[ParsedSyllable]]]:
    """Decompose each Chinese character of `text`, in order.

    Non-CJK characters are skipped.
    """
    return [(ch, parse_char(ch)) for ch in text if is_cjk_char(ch)]


__all__ = [
    "get_readings",
    "parse_char",
    "parse_text",
]
