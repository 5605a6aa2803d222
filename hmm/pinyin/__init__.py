"""Pinyin decomposition for the Hanzi Movie Method.

A syllable is split into an initial (actor), a final (set) and a tone
(room). Glides i/u/ü are part of the initial, so there are 55 initials and
13 finals instead of the usual pinyin inventory.
"""

from hmm.pinyin.tables import (
    TONE_UNKNOWN,
    TONE_NEUTRAL,
    TONE_MARKS,
    CANONICAL_FINALS,
    ALL_INITIALS,
    INITIALS_BY_CATEGORY,
    ACTOR_CATEGORIES,
)
from hmm.pinyin.tones import extract_tone
from hmm.pinyin.finals import match_final
from hmm.pinyin.initials import classify_initial, resolve_compound
from hmm.pinyin.ids import (
    NULL_ID,
    actor_id,
    set_id,
    initial_from_actor_id,
    actor_category,
)
from hmm.pinyin.parser import ParsedSyllable, decompose
from hmm.pinyin.readings import get_readings, parse_char, parse_text

__all__ = [
    # tables
    "TONE_UNKNOWN",
    "TONE_NEUTRAL",
    "TONE_MARKS",
    "CANONICAL_FINALS",
    "ALL_INITIALS",
    "INITIALS_BY_CATEGORY",
    "ACTOR_CATEGORIES",
    # stages
    "extract_tone",
    "match_final",
    "classify_initial",
    "resolve_compound",
    # ids
    "NULL_ID",
    "actor_id",
    "set_id",
    "initial_from_actor_id",
    "actor_category",
    # parser
    "ParsedSyllable",
    "decompose",
    # readings
    "get_readings",
    "parse_char",
    "parse_text",
]
