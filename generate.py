#!/usr/bin/env python3
"""Image prompt generation for Hanzi Movie Method scenes.

Each character of the input becomes one scene: the actor for its initial,
the set for its final, the room for its tone and the props for its
components. The prompt is rendered from a template (default, midjourney,
dalle, sd or a custom template file), or written by a hosted model with
--llm.

Usage:
    python generate.py 好
    python generate.py 林 --style midjourney
    python generate.py 中 --reading 1 --verbose
    python generate.py 好 --llm --model gpt-4o
"""

import argparse
import os
from pathlib import Path
from typing import List, Optional

from hmm.common.config import MovieConfig, get_config_dir, load_user_config
from hmm.common.logging import log_debug, log_error, log_warn
from hmm.common.utils import _load_env_file, keep_only_cjk
from hmm.decomp.dictionary import Dictionary, load_dictionary
from hmm.output.prompt import PromptGenerator, SceneData
from hmm.output.scene import SceneWriter
from hmm.pinyin.parser import ParsedSyllable
from hmm.pinyin.readings import parse_char


# Load .env on import
_load_env_file()

SCENE_CACHE_DIRNAME = "scenes"


def select_reading(readings: List[ParsedSyllable], index: int) -> ParsedSyllable:
    """The requested reading; out-of-range indexes fall back to the first one."""
    if index < 0 or index >= len(readings):
        index = 0
    return readings[index]


def print_breakdown(data: SceneData, reading: ParsedSyllable) -> None:
    actor = data.actor.name if data.actor is not None and data.actor.name else f"[{reading.actor_id}]"
    movie_set = data.movie_set.name if data.movie_set is not None and data.movie_set.name else f"[{reading.set_id}]"
    print(f"=== {data.character} ({data.pinyin}) ===")
    if data.meaning:
        print(f"Meaning:   {data.meaning}")
    print(f"Actor:     {actor} ({reading.category})")
    print(f"Set:       {movie_set}")
    print(f"Room:      {data.tone_room} (tone {reading.tone})")
    if data.decomposition:
        print(f"Structure: {data.decomposition}")
    if data.components:
        labels = []
        for comp in data.components:
            prop = next((p for p in data.props if p.component == comp or p.id == comp), None)
            labels.append(f"{comp} ({prop.name})" if prop is not None and prop.name else comp)
        print(f"Props:     {', '.join(labels)}")
    print()


def generate_for_text(
    text: str,
    generator: PromptGenerator,
    dictionary: Optional[Dictionary],
    reading_index: int = 0,
    writer: Optional[SceneWriter] = None,
    verbose: bool = False,
    debug: bool = False,
) -> int:
    """Print one prompt per character. Returns the number of prompts generated."""
    generated = 0
    for char in keep_only_cjk(text):
        readings = parse_char(char)
        if not readings:
            log_warn(f"No pinyin found for {char}")
            continue
        reading = select_reading(readings, reading_index)
        log_debug(debug, f"{char}: {len(readings)} reading(s), using {reading.full} -> {reading}")

        entry = dictionary.lookup(char) if dictionary is not None else None
        data = generator.scene_data_for(char, reading, entry)

        if verbose:
            print_breakdown(data, reading)

        if writer is not None:
            scene = writer.write(data, reading)
            print(scene.image_prompt)
            if scene.script:
                print()
                print(f"Script: {scene.script}")
        else:
            print(generator.generate(data))
        print()
        generated += 1
    return generated


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for prompt generation."""
    parser = argparse.ArgumentParser(
        description="Generate an image prompt for each character's movie-method scene"
    )
    parser.add_argument("text", help="Chinese text; one scene per character")
    parser.add_argument(
        "--style", "-s",
        default="default",
        help="Prompt style: default, midjourney (mj), dalle (openai), sd (stable-diffusion)",
    )
    parser.add_argument(
        "--reading", "-r",
        type=int,
        default=0,
        help="Which reading to use for characters with several (0 = first)",
    )
    parser.add_argument(
        "--template",
        help="File with a custom prompt template, e.g. '{actor} in {set}, {tone_room}'",
    )
    parser.add_argument(
        "--llm",
        action="store_true",
        help="Let the hosted model write the prompt and a short script",
    )
    parser.add_argument(
        "--model",
        default=os.environ.get("OPENAI_MODEL"),
        help="OpenAI model name (overrides OPENAI_MODEL)",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Do not read or write cached scenes (with --llm)",
    )
    parser.add_argument("--config", help="Config directory (default: $HMM_CONFIG_DIR or ~/.config/hmm)")
    parser.add_argument("--dictionary", help="Path to a Make Me a Hanzi dictionary.jsonl")
    parser.add_argument("--verbose", action="store_true", help="Show the scene breakdown")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if not keep_only_cjk(args.text):
        log_error(f"No Chinese characters in input: {args.text!r}")
        return 2

    config_dir = get_config_dir(args.config)
    try:
        config = load_user_config(config_dir)
        dictionary = load_dictionary(config_dir, args.dictionary, verbose=args.verbose)
    except Exception as e:
        log_error(f"Failed to load configuration: {e}")
        return 2
    if config is None:
        log_warn(f"Config not found at {config_dir}. Run 'python scripts/init_config.py' to create it.")
        log_warn("Generating prompt with placeholder values...")
        config = MovieConfig()
    if dictionary is None:
        log_warn("No dictionary found; meanings and props will be missing")

    generator = PromptGenerator(config.actors, config.sets, config.props)
    try:
        generator.use_template(args.style)
        if args.template:
            generator.set_custom_template(Path(args.template).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log_error(str(e))
        return 2
    log_debug(args.debug, f"template={generator.template_name} style={generator.style}")

    writer: Optional[SceneWriter] = None
    if args.llm:
        cache_dir = None if args.no_cache else config_dir / SCENE_CACHE_DIRNAME
        try:
            writer = SceneWriter(model=args.model, cache_dir=cache_dir, verbose=args.verbose)
        except RuntimeError as e:
            log_error(str(e))
            return 2

    try:
        count = generate_for_text(
            args.text,
            generator,
            dictionary,
            reading_index=args.reading,
            writer=writer,
            verbose=args.verbose,
            debug=args.debug,
        )
    except Exception as e:
        log_error(f"Scene generation failed: {e}")
        return 2

    if args.verbose:
        print(f"[generate] [info] {count} prompt(s) generated")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
