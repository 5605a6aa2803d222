#!/usr/bin/env python3
"""Hanzi Movie Method breakdown of Chinese characters.

For each character prints the dictionary data (meaning, structure,
components, etymology, radical, traditional form) and, for every reading,
which actor (initial), set (final) and room (tone) it maps to.

Usage:
    python lookup.py 好
    python lookup.py 中国 --config ~/.config/hmm --dictionary data/dictionary.jsonl --verbose
"""

import argparse
from typing import List, Optional

from hmm.common.config import MovieConfig, get_config_dir, load_user_config
from hmm.common.logging import log_error
from hmm.common.utils import _load_env_file, keep_only_cjk, simplified_to_traditional
from hmm.decomp.dictionary import Dictionary, decomposition_type, load_dictionary
from hmm.pinyin.parser import ParsedSyllable
from hmm.pinyin.readings import get_readings, parse_char
from hmm.schema.base import DEFAULT_ROOM_NAMES


# Load .env on import
_load_env_file()


def describe_reading(reading: ParsedSyllable, config: Optional[MovieConfig]) -> List[str]:
    """Initial/final/tone lines for one reading, with names from the user's tables."""
    actor_name = set_name = room_name = ""
    if config is not None:
        actor = next((a for a in config.actors if a.id == reading.actor_id), None)
        if actor is not None:
            actor_name = actor.name
        movie_set = next((s for s in config.sets if s.id == reading.set_id), None)
        if movie_set is not None:
            set_name = movie_set.name
            room = movie_set.room_for(reading.tone)
            if room is not None:
                room_name = room.name
    if not room_name:
        room_name = DEFAULT_ROOM_NAMES.get(reading.tone, "?")

    initial = reading.initial or "Ø"
    final = reading.final or "Ø"
    return [
        f"  {reading.full}",
        f"    Initial: {initial:<4} → Actor: {actor_name or reading.actor_id} ({reading.category})",
        f"    Final:   {final:<4} → Set:   {set_name or reading.set_id}",
        f"    Tone:    {reading.tone:<4} → Room:  {room_name}",
    ]


def describe_char(char: str, dictionary: Optional[Dictionary], config: Optional[MovieConfig]) -> List[str]:
    lines = [f"=== {char} ==="]
    entry = dictionary.lookup(char) if dictionary is not None else None
    if entry is not None:
        if entry.definition:
            lines.append(f"Meaning:     {entry.definition}")
        if entry.decomposition:
            lines.append(f"Structure:   {decomposition_type(entry.decomposition)} ({entry.decomposition})")
        if entry.components:
            lines.append(f"Components:  {' '.join(entry.components)}")
        if entry.etymology is not None:
            ety = entry.etymology.type
            if entry.etymology.hint:
                ety = f"{ety} ({entry.etymology.hint})" if ety else entry.etymology.hint
            if ety:
                lines.append(f"Etymology:   {ety}")
        if entry.radical:
            lines.append(f"Radical:     {entry.radical}")
    trad = simplified_to_traditional(char)
    if trad and trad != char:
        lines.append(f"Traditional: {trad}")

    readings = parse_char(char)
    if not readings:
        lines.append("  (no readings found)")
    for reading in readings:
        lines.extend(describe_reading(reading, config))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show the Hanzi Movie Method breakdown (actor, set, room, props) of Chinese characters"
    )
    parser.add_argument("text", help="Chinese text; non-Chinese characters are ignored")
    parser.add_argument("--config", help="Config directory (default: $HMM_CONFIG_DIR or ~/.config/hmm)")
    parser.add_argument("--dictionary", help="Path to a Make Me a Hanzi dictionary.jsonl")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    chars = keep_only_cjk(args.text)
    if not chars:
        log_error(f"No Chinese characters in input: {args.text!r}")
        return 2

    config_dir = get_config_dir(args.config)
    try:
        config = load_user_config(config_dir)
        dictionary = load_dictionary(config_dir, args.dictionary, verbose=args.verbose)
    except Exception as e:
        log_error(f"Failed to load configuration: {e}")
        return 2

    if args.verbose:
        if config is None:
            print(f"[lookup] [info] No config in {config_dir}; showing ids instead of names")
        print(f"[lookup] [info] {len(chars)} character(s): {chars}")

    for i, char in enumerate(chars):
        if i:
            print()
        if args.verbose:
            print(f"[lookup] [info] {char}: {len(get_readings(char))} reading(s)")
        print("\n".join(describe_char(char, dictionary, config)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
