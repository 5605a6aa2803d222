"""Pinyin syllable decomposition into HMM initial, final and tone."""

from dataclasses import dataclass

from hmm.pinyin.ids import actor_category, actor_id, set_id
from hmm.pinyin.initials import classify_initial
from hmm.pinyin.tones import extract_tone


@dataclass(frozen=True)
class ParsedSyllable:
    """The HMM-relevant parts of one pinyin syllable."""
    full: str  # input as given, e.g. "hǎo"
    initial: str  # e.g. "h"; "" for a null initial
    final: str  # e.g. "ao"; "" when there is no realized final
    tone: int  # 1-5, 5 is neutral

    @property
    def actor_id(self) -> str:
        return actor_id(self.initial)

    @property
    def set_id(self) -> str:
        return set_id(self.final)

    @property
    def category(self) -> str:
        return actor_category(self.initial)


def decompose(syllable: str) -> ParsedSyllable:
    """Split a pinyin syllable into initial, final and tone.

    Total over arbitrary strings: input that is not pinyin still produces a
    best-effort result instead of raising.
    """
    tone, bare = extract_tone(syllable.lower())
    initial, final = classify_initial(bare)
    return ParsedSyllable(full=syllable, initial=initial, final=final, tone=tone)


__all__ = [
    "ParsedSyllable",
    "decompose",
]
