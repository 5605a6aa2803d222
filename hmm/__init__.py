"""Hanzi Movie Method library.

Subpackages:
- hmm.pinyin: Syllable decomposition into initial (actor), final (set), tone (room)
- hmm.common: Shared utilities (utils, logging, config, cache, openai client)
- hmm.schema: Actor, set, room, prop and scene definitions
- hmm.decomp: Character dictionary and component extraction (props)
- hmm.output: Image prompt templates and model-written scenes
"""
