"""Scene writing with a hosted language model.

The model receives the character, its reading and the resolved actor, set,
room and props, and returns an image prompt plus a short story (script).
Results can be cached per character reading.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from hmm.common.cache import SceneCache
from hmm.common.logging import log_warn
from hmm.common.openai import SCENE_SCHEMA, OpenAIClient
from hmm.output.prompt import SceneData
from hmm.pinyin.parser import ParsedSyllable
from hmm.schema.base import Scene

LOG_PREFIX = "scene"

SYSTEM_PROMPT = (
    "You help create memorable mnemonic images for learning Chinese characters "
    "with the Hanzi Movie Method. Return ONLY JSON matching the schema."
)


@dataclass
class SceneElements:
    """Resolved scene elements sent to the model."""
    character: str
    pinyin: str
    meaning: str = ""
    actor_name: str = ""
    actor_desc: str = ""
    set_name: str = ""
    set_desc: str = ""
    tone_room: str = ""
    tone_room_desc: str = ""
    props: List[str] = field(default_factory=list)
    prop_descs: List[str] = field(default_factory=list)

    @classmethod
    def from_scene_data(cls, data: SceneData) -> "SceneElements":
        actor = data.actor
        movie_set = data.movie_set
        room_desc = ""
        if movie_set is not None:
            room = movie_set.room_for(data.tone)
            if room is not None and room.description and room.description != data.tone_room:
                room_desc = room.description
        props = data.props
        return cls(
            character=data.character,
            pinyin=data.pinyin,
            meaning=data.meaning,
            actor_name=actor.name if actor is not None and actor.name else "a person",
            actor_desc=actor.description if actor is not None else "",
            set_name=movie_set.name if movie_set is not None and movie_set.name else "an unnamed place",
            set_desc=movie_set.description if movie_set is not None else "",
            tone_room=data.tone_room,
            tone_room_desc=room_desc,
            props=[p.name or p.component for p in props],
            prop_descs=[p.description or p.meaning for p in props],
        )


def build_scene_prompt(e: SceneElements) -> str:
    """Instruction text for one scene."""
    lines = [
        "The system works like this:",
        "- Each character becomes a vivid SCENE in a specific LOCATION",
        "- An ACTOR (real or fictional person) performs an action",
        "- PROPS represent the character's components",
        "- The scene should be bizarre, emotional, and unforgettable",
        "",
        "=== CHARACTER INFO ===",
        f"Character: {e.character}",
        f"Pronunciation: {e.pinyin}",
    ]
    if e.meaning:
        lines.append(f"Meaning: {e.meaning}")

    lines += ["", "=== SCENE ELEMENTS ==="]
    lines.append(f"Actor: {e.actor_name}" + (f" ({e.actor_desc})" if e.actor_desc else ""))
    lines.append(f"Location: {e.set_name}" + (f" - {e.set_desc}" if e.set_desc else ""))
    lines.append(
        f"Specific area within location: {e.tone_room}"
        + (f" - {e.tone_room_desc}" if e.tone_room_desc else "")
    )

    if e.props:
        lines += ["", "Props (must appear in scene):"]
        for i, prop in enumerate(e.props):
            desc = e.prop_descs[i] if i < len(e.prop_descs) else ""
            lines.append(f"- {prop}" + (f": {desc}" if desc else ""))

    lines += [
        "",
        "=== YOUR TASK ===",
        "Write an image prompt for an AI image generator (DALL-E, Midjourney, Stable Diffusion) and a short script.",
        "",
        "Requirements:",
        "1. The actor must be clearly recognizable and doing something memorable",
        "2. The location must be clearly the specified place and area",
        "3. ALL props must be prominently featured and interacting with the actor",
        "4. The scene should be slightly absurd or exaggerated to be memorable",
        "5. End the image prompt with visual style keywords (e.g. 'digital art, cinematic lighting, detailed')",
        "",
        "image_prompt: 2-4 sentences maximum. script: 2-3 sentences telling what happens.",
    ]
    return "\n".join(lines)


class SceneWriter:
    """Asks the model for a scene and wraps the answer in a Scene."""

    def __init__(
        self,
        client: Optional[Any] = None,
        model: Optional[str] = None,
        cache_dir: Optional[Path] = None,
        verbose: bool = False,
    ) -> None:
        self.client = client if client is not None else OpenAIClient(model=model)
        self.cache = SceneCache(cache_dir, verbose=verbose, log_prefix=LOG_PREFIX) if cache_dir is not None else None
        self.verbose = verbose

    def write(self, data: SceneData, reading: ParsedSyllable) -> Scene:
        """Generate (or load from cache) the scene for one reading."""
        if self.cache is not None:
            cached = self.cache.load(data.character, reading.full, required_fields=("image_prompt", "script"))
            if cached is not None:
                return Scene.from_dict(cached)

        if self.verbose:
            print(f"[{LOG_PREFIX}] [api] Requesting scene for {data.character} ({reading.full})")
        user = build_scene_prompt(SceneElements.from_scene_data(data))
        result = self.client.complete_structured(system=SYSTEM_PROMPT, user=user, schema=SCENE_SCHEMA)
        if not isinstance(result, dict):
            result = {}

        scene = Scene(
            character=data.character,
            pinyin=reading.full,
            initial=reading.initial,
            final=reading.final,
            tone=reading.tone,
            keyword=data.meaning,
            actor_id=reading.actor_id,
            set_id=reading.set_id,
            prop_ids=[p.id for p in data.props],
            script=str(result.get("script") or "").strip(),
            image_prompt=str(result.get("image_prompt") or "").strip(),
        )
        if not scene.image_prompt:
            log_warn(f"Empty image prompt for {data.character} ({reading.full}); not cached")
        elif self.cache is not None:
            self.cache.save(data.character, reading.full, scene.to_dict())
        return scene


__all__ = [
    "SYSTEM_PROMPT",
    "SceneElements",
    "build_scene_prompt",
    "SceneWriter",
]
