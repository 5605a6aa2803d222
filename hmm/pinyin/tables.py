"""Fixed lookup tables for pinyin decomposition.

Everything here is built once at import and never mutated.
"""

from types import MappingProxyType
from typing import Dict, Tuple


# Tone numbers. TONE_UNKNOWN only exists inside the tone extractor.
TONE_UNKNOWN = 0
TONE_1 = 1  # high level
TONE_2 = 2  # rising
TONE_3 = 3  # dipping
TONE_4 = 4  # falling
TONE_NEUTRAL = 5

TONES: Tuple[int, ...] = (TONE_1, TONE_2, TONE_3, TONE_4, TONE_NEUTRAL)


def _build_tone_marks() -> Dict[str, Tuple[str, int]]:
    marked = {
        "a": "āáǎà",
        "e": "ēéěè",
        "i": "īíǐì",
        "o": "ōóǒò",
        "u": "ūúǔù",
        "ü": "ǖǘǚǜ",
    }
    table: Dict[str, Tuple[str, int]] = {}
    for base, vowels in marked.items():
        for tone, vowel in enumerate(vowels, start=1):
            table[vowel] = (base, tone)
    return table


# Diacritic vowel -> (base vowel, tone 1-4). 24 entries.
TONE_MARKS = MappingProxyType(_build_tone_marks())

# The 12 realized finals, longest first. The empty "null" final is the 13th set.
CANONICAL_FINALS: Tuple[str, ...] = (
    "ong", "ang", "eng",
    "ai", "ei", "ao", "ou", "an", "en",
    "a", "o", "e",
)

SIBILANT_CLUSTERS: Tuple[str, ...] = ("zh", "ch", "sh")
CONSONANTS = frozenset("bpmfdtnlgkhjqxrzcs")

# j/q/x are always followed by i or ü (written u).
ALWAYS_COMPOUND = frozenset({"j", "q", "x"})

# After these, "i" marks a syllabic consonant rather than a glide.
FAKE_I = frozenset({"zh", "ch", "sh", "r", "z", "c", "s"})

# Residuals left over once a glide has been consumed.
GLIDE_REMNANTS = frozenset({"", "i", "u", "ü"})


# Actor categories
CATEGORY_NULL = "null"
CATEGORY_MALE = "male"
CATEGORY_FEMALE = "female"
CATEGORY_FICTIONAL = "fictional"
CATEGORY_GOD_LEADER = "god_leader"

ACTOR_CATEGORIES: Tuple[str, ...] = (
    CATEGORY_NULL,
    CATEGORY_MALE,
    CATEGORY_FEMALE,
    CATEGORY_FICTIONAL,
    CATEGORY_GOD_LEADER,
)

# The 55 initials, grouped by the kind of actor that plays them.
MALE_INITIALS: Tuple[str, ...] = (
    "b", "p", "m", "f", "d", "t", "n", "l", "g", "k", "h",
    "zh", "ch", "sh", "r", "z", "c", "s",
)
FEMALE_INITIALS: Tuple[str, ...] = (
    "y", "bi", "pi", "mi", "di", "ti", "ni", "li", "ji", "qi", "xi",
)
FICTIONAL_INITIALS: Tuple[str, ...] = (
    "w", "bu", "pu", "mu", "fu", "du", "tu", "nu", "lu", "gu", "ku", "hu",
    "zhu", "chu", "shu", "ru", "zu", "cu", "su",
)
GOD_LEADER_INITIALS: Tuple[str, ...] = ("yu", "nü", "lü", "ju", "qu", "xu")

INITIALS_BY_CATEGORY = MappingProxyType({
    CATEGORY_NULL: ("",),
    CATEGORY_MALE: MALE_INITIALS,
    CATEGORY_FEMALE: FEMALE_INITIALS,
    CATEGORY_FICTIONAL: FICTIONAL_INITIALS,
    CATEGORY_GOD_LEADER: GOD_LEADER_INITIALS,
})

ALL_INITIALS: Tuple[str, ...] = tuple(
    initial for group in INITIALS_BY_CATEGORY.values() for initial in group
)


__all__ = [
    "TONE_UNKNOWN",
    "TONE_1",
    "TONE_2",
    "TONE_3",
    "TONE_4",
    "TONE_NEUTRAL",
    "TONES",
    "TONE_MARKS",
    "CANONICAL_FINALS",
    "SIBILANT_CLUSTERS",
    "CONSONANTS",
    "ALWAYS_COMPOUND",
    "FAKE_I",
    "GLIDE_REMNANTS",
    "CATEGORY_NULL",
    "CATEGORY_MALE",
    "CATEGORY_FEMALE",
    "CATEGORY_FICTIONAL",
    "CATEGORY_GOD_LEADER",
    "ACTOR_CATEGORIES",
    "MALE_INITIALS",
    "FEMALE_INITIALS",
    "FICTIONAL_INITIALS",
    "GOD_LEADER_INITIALS",
    "INITIALS_BY_CATEGORY",
    "ALL_INITIALS",
]
