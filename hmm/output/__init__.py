"""Output generation: image prompts and model-written scenes."""

from hmm.output.prompt import (
    PromptStyle,
    default_style,
    DEFAULT_TONE_ROOMS,
    SceneData,
    TEMPLATE_FIELDS,
    TEMPLATES,
    resolve_template_name,
    PromptGenerator,
)
from hmm.output.scene import (
    SceneElements,
    build_scene_prompt,
    SceneWriter,
)

__all__ = [
    # prompt
    "PromptStyle",
    "default_style",
    "DEFAULT_TONE_ROOMS",
    "SceneData",
    "TEMPLATE_FIELDS",
    "TEMPLATES",
    "resolve_template_name",
    "PromptGenerator",
    # scene
    "SceneElements",
    "build_scene_prompt",
    "SceneWriter",
]
