"""Initial classification using the HMM re-segmentation.

The glides i, u and ü belong to the initial in HMM, not the final, so "lin"
splits into li + (e)n and "zhuang" into zhu + ang. Two ordered rule tables
drive the split:

- INITIAL_RULES picks the onset family (yu, y, w, zh/ch/sh, consonant, none).
- COMPOUND_RULES decides whether a consonant absorbs a following glide.

In both tables the first matching rule wins and no later rule is consulted.
"""

from typing import Callable, Optional, Tuple

from hmm.pinyin.finals import match_final
from hmm.pinyin.tables import ALWAYS_COMPOUND, CONSONANTS, FAKE_I, SIBILANT_CLUSTERS


InitialFinal = Tuple[str, str]
InitialRule = Tuple[str, Callable[[str], bool], Callable[[str], InitialFinal]]
CompoundRule = Tuple[str, Callable[[str, str], bool], str]


def _strip_one(text: str, prefix: str) -> str:
    return text[len(prefix):] if text.startswith(prefix) else text


# --- Compound-initial resolver --------------------------------------------

COMPOUND_RULES: Tuple[CompoundRule, ...] = (
    # j/q/x never take a bare final: u is always ü, i is always i
    ("jqx-u", lambda c, rest: c in ALWAYS_COMPOUND and rest.startswith("u"), "u"),
    ("jqx-i", lambda c, rest: c in ALWAYS_COMPOUND and rest.startswith("i"), "i"),
    ("ü", lambda c, rest: rest.startswith("ü") or rest.startswith("v"), "ü"),
    ("i", lambda c, rest: rest.startswith("i") and c not in FAKE_I, "i"),
    ("u", lambda c, rest: rest.startswith("u") and c not in ALWAYS_COMPOUND, "u"),
)


def matching_compound_rule(consonant: str, rest: str) -> Optional[str]:
    """Return the name of the compound rule that fires, or None for a plain initial."""
    for name, applies, _ in COMPOUND_RULES:
        if applies(consonant, rest):
            return name
    return None


def resolve_compound(consonant: str, rest: str) -> InitialFinal:
    """Split `rest` into an optional glide for `consonant` plus a final."""
    for _, applies, glide in COMPOUND_RULES:
        if applies(consonant, rest):
            # "v" stands in for ü; either way the glide is one letter
            remainder = rest[1:]
            return consonant + glide, match_final(remainder) if remainder else ""
    return consonant, match_final(rest)


# --- Onset families ---------------------------------------------------------

def _take_yu(syllable: str) -> InitialFinal:
    rest = syllable[len("yu"):]
    return "yu", match_final(rest) if rest else ""


def _take_y(syllable: str) -> InitialFinal:
    if syllable in ("y", "yi"):
        return "y", ""
    # yao -> y + ao, yin -> y + (e)n
    rest = _strip_one(syllable[1:], "i")
    return "y", match_final(rest)


def _take_w(syllable: str) -> InitialFinal:
    if syllable in ("w", "wu"):
        return "w", ""
    # wai -> w + ai
    rest = _strip_one(syllable[1:], "u")
    return "w", match_final(rest)


def _sibilant_prefix(syllable: str) -> Optional[str]:
    for cluster in SIBILANT_CLUSTERS:
        if syllable.startswith(cluster):
            return cluster
    return None


def _take_sibilant(syllable: str) -> InitialFinal:
    cluster = syllable[:2]
    return resolve_compound(cluster, syllable[2:])


def _take_consonant(syllable: str) -> InitialFinal:
    return resolve_compound(syllable[0], syllable[1:])


def _take_null(syllable: str) -> InitialFinal:
    return "", match_final(syllable)


INITIAL_RULES: Tuple[InitialRule, ...] = (
    # "yu" must be seen before the generic "y" family
    ("yu", lambda s: s.startswith("yu"), _take_yu),
    ("y", lambda s: s.startswith("y"), _take_y),
    ("w", lambda s: s.startswith("w"), _take_w),
    ("sibilant", lambda s: _sibilant_prefix(s) is not None, _take_sibilant),
    ("consonant", lambda s: bool(s) and s[0] in CONSONANTS, _take_consonant),
    ("null", lambda s: True, _take_null),
)


def matching_initial_rule(syllable: str) -> Optional[str]:
    """Return the name of the onset rule that classifies `syllable`."""
    syllable = syllable.lower()
    for name, applies, _ in INITIAL_RULES:
        if applies(syllable):
            return name
    return None


def classify_initial(syllable: str) -> InitialFinal:
    """Split a toneless syllable into (initial, final).

    The syllable is lower-cased first. Returns ("", final) for syllables that
    start directly with a vowel.
    """
    syllable = syllable.lower()
    # "null" accepts everything
    _, _, action = next(rule for rule in INITIAL_RULES if rule[1](syllable))
    return action(syllable)


__all__ = [
    "COMPOUND_RULES",
    "INITIAL_RULES",
    "classify_initial",
    "matching_compound_rule",
    "matching_initial_rule",
    "resolve_compound",
]
