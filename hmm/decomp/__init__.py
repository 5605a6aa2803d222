"""Character decomposition (glyph structure) from Make Me a Hanzi."""

from hmm.decomp.dictionary import (
    Etymology,
    DictionaryEntry,
    Dictionary,
    extract_components,
    decomposition_type,
    component_positions,
    format_decomposition,
    find_dictionary,
    load_dictionary,
)

__all__ = [
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
