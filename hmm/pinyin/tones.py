"""Tone extraction from diacritic-marked pinyin."""

import unicodedata
from typing import List, Tuple

from hmm.pinyin.tables import TONE_MARKS, TONE_NEUTRAL, TONE_UNKNOWN


def extract_tone(syllable: str) -> Tuple[int, str]:
    """Strip tone marks from a syllable.

    Returns (tone, stripped) where every marked vowel has been replaced by its
    base vowel. Without any mark the tone is neutral (5). If several marks are
    present the last one wins. Characters outside the tone-mark table pass
    through unchanged. Never raises.
    """
    # Combining marks (a + U+0304) become precomposed vowels first; input
    # without them is left alone so NFC cannot rewrite other codepoints.
    if any(unicodedata.combining(ch) for ch in syllable):
        syllable = unicodedata.normalize("NFC", syllable)

    tone = TONE_UNKNOWN
    out: List[str] = []
    for ch in syllable:
        mark = TONE_MARKS.get(ch)
        if mark is None:
            out.append(ch)
            continue
        base, tone = mark
        out.append(base)

    if tone == TONE_UNKNOWN:
        tone = TONE_NEUTRAL
    return tone, "".join(out)


__all__ = ["extract_tone"]
