"""Map HMM initials and finals to actor/set identifiers."""

from hmm.pinyin.tables import (
    ALWAYS_COMPOUND,
    CATEGORY_FEMALE,
    CATEGORY_FICTIONAL,
    CATEGORY_GOD_LEADER,
    CATEGORY_MALE,
    CATEGORY_NULL,
)

NULL_ID = "null"


def actor_id(initial: str) -> str:
    """Actor identifier for an initial ("" -> "null", ü -> v)."""
    if not initial:
        return NULL_ID
    return initial.replace("ü", "v")


def set_id(final: str) -> str:
    """Set identifier for a final ("" -> "null")."""
    if not final:
        return NULL_ID
    return final


def initial_from_actor_id(identifier: str) -> str:
    """Inverse of actor_id."""
    if identifier == NULL_ID:
        return ""
    return identifier.replace("v", "ü")


def actor_category(initial: str) -> str:
    """Which kind of actor plays an initial.

    - male: bare consonants (b, zh, ...)
    - female: consonant + i, and y
    - fictional: consonant + u, and w
    - god_leader: consonant + ü, ju/qu/xu, and yu
    """
    if not initial:
        return CATEGORY_NULL
    if initial == "yu" or initial.endswith("ü") or initial.endswith("v"):
        return CATEGORY_GOD_LEADER
    if initial == "y":
        return CATEGORY_FEMALE
    if initial == "w":
        return CATEGORY_FICTIONAL
    if len(initial) > 1 and initial.endswith("u"):
        if initial[:-1] in ALWAYS_COMPOUND:
            return CATEGORY_GOD_LEADER
        return CATEGORY_FICTIONAL
    if len(initial) > 1 and initial.endswith("i"):
        return CATEGORY_FEMALE
    return CATEGORY_MALE


__all__ = [
    "NULL_ID",
    "actor_id",
    "set_id",
    "initial_from_actor_id",
    "actor_category",
]
