"""Final matching: map a residual rhyme to one of the HMM sets.

Rules are tried in order; the first predicate that accepts the residual
decides the final.
"""

from typing import Callable, Optional, Tuple

from hmm.pinyin.tables import CANONICAL_FINALS, GLIDE_REMNANTS


FinalRule = Tuple[str, Callable[[str], bool], Callable[[str], str]]


def _ends_with(suffix: str) -> Callable[[str], bool]:
    # str.endswith also covers the exact match
    return lambda rest: rest.endswith(suffix)


FINAL_RULES: Tuple[FinalRule, ...] = (
    ("exact", lambda rest: rest in CANONICAL_FINALS, lambda rest: rest),
    # floating e: (e)ng, (e)n
    ("ing", _ends_with("ing"), lambda rest: "eng"),
    ("in", _ends_with("in"), lambda rest: "en"),
    ("un", _ends_with("un"), lambda rest: "en"),
    ("iong", _ends_with("iong"), lambda rest: "ong"),
    # bare nasal left after a glide strip: li + n, li + ng
    ("n", lambda rest: rest == "n", lambda rest: "en"),
    ("ng", lambda rest: rest == "ng", lambda rest: "eng"),
    ("no-final", lambda rest: rest in GLIDE_REMNANTS, lambda rest: ""),
    ("fallback", lambda rest: True, lambda rest: rest),
)


def matching_final_rule(rest: str) -> Optional[str]:
    """Return the name of the rule that decides `rest`."""
    for name, applies, _ in FINAL_RULES:
        if applies(rest):
            return name
    return None


def match_final(rest: str) -> str:
    """Map a residual string to its canonical final.

    Returns "" when there is no realized final. Residuals no rule covers are
    returned unchanged so the caller always gets an answer.
    """
    # the last rule accepts everything
    _, _, action = next(rule for rule in FINAL_RULES if rule[1](rest))
    return action(rest)


__all__ = [
    "FINAL_RULES",
    "match_final",
    "matching_final_rule",
]
