"""Image prompt generation for movie-method scenes.

A scene combines the actor (initial), the set (final), the room inside the
set (tone) and the props (components). Each named template renders that
scene for a particular image generator and comes with a matching style
preset:

- default: plain descriptive prompt
- midjourney (mj): comma-separated with --ar / --v flags
- dalle (openai): full sentences
- sd (stable-diffusion): weighted tokens

Custom templates are `str.format` strings over the flat fields listed in
TEMPLATE_FIELDS, e.g. "{actor} in {set}, {tone_room}: {meaning}".
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Optional, Tuple

from hmm.decomp.dictionary import DictionaryEntry, format_decomposition
from hmm.pinyin.parser import ParsedSyllable
from hmm.schema.base import Actor, MovieSet, Prop


@dataclass
class PromptStyle:
    """Image generation style settings."""
    name: str  # "photorealistic", "anime", "watercolor"
    aspect_ratio: str = ""  # "16:9", "1:1"
    quality: str = ""  # "hd", "standard"
    suffix: str = ""  # appended to every prompt
    negative: str = ""  # negative prompt (Stable Diffusion)


def default_style() -> PromptStyle:
    return PromptStyle(
        name="cinematic digital art",
        aspect_ratio="16:9",
        quality="hd",
        suffix="dramatic lighting, detailed, memorable scene, mnemonic visualization",
    )


# Where the scene takes place when the set has no room for the tone
DEFAULT_TONE_ROOMS: Dict[int, str] = {
    1: "outside the entrance",
    2: "in the kitchen",
    3: "in the bedroom",
    4: "in the bathroom",
    5: "on the roof",
}


@dataclass
class SceneData:
    """Everything a template needs for one character reading."""
    character: str
    pinyin: str
    tone: int
    meaning: str = ""
    tone_room: str = ""
    actor: Optional[Actor] = None
    movie_set: Optional[MovieSet] = None
    props: List[Prop] = field(default_factory=list)
    components: List[str] = field(default_factory=list)
    etymology: str = ""
    decomposition: str = ""
    style: PromptStyle = field(default_factory=default_style)

    def fields(self) -> Dict[str, str]:
        """Flat string fields for custom templates."""
        return {
            "character": self.character,
            "pinyin": self.pinyin,
            "tone": str(self.tone),
            "meaning": self.meaning,
            "tone_room": self.tone_room,
            "actor": _actor_name(self, "a person"),
            "set": _set_name(self),
            "props": " and ".join(_prop_label(p) for p in self.props),
            "components": ", ".join(self.components),
            "etymology": self.etymology,
            "decomposition": self.decomposition,
            "style": self.style.name,
            "suffix": self.style.suffix,
            "aspect_ratio": self.style.aspect_ratio,
            "quality": self.style.quality,
            "negative": self.style.negative,
        }


def _actor_name(data: SceneData, fallback: str) -> str:
    if data.actor is not None and data.actor.name:
        return data.actor.name
    return fallback


def _set_name(data: SceneData) -> str:
    if data.movie_set is not None and data.movie_set.name:
        return data.movie_set.name
    return ""


def _prop_label(prop: Prop) -> str:
    return prop.name or prop.component


def _join_nonempty(*parts: str) -> str:
    return ", ".join(p for p in parts if p)


TEMPLATE_FIELDS: Tuple[str, ...] = tuple(SceneData(character="", pinyin="", tone=5).fields())


def render_default(data: SceneData) -> str:
    line = _actor_name(data, "A person")
    if _set_name(data):
        line += f" at {_set_name(data)}"
    if data.tone_room:
        line += f" ({data.tone_room})"
    if data.props:
        line += ", interacting with " + " and ".join(_prop_label(p) for p in data.props)
    if data.meaning:
        line += f', scene represents "{data.meaning}"'
    if data.etymology:
        line += f", etymology: {data.etymology}"
    return f"{line}.\n{_join_nonempty(data.style.name, data.style.suffix)}"


def render_midjourney(data: SceneData) -> str:
    line = _actor_name(data, "person")
    if _set_name(data):
        line += f" in {_set_name(data)}"
    if data.tone_room:
        line += f", {data.tone_room} area"
    if data.props:
        line += ", holding " + ", ".join(_prop_label(p) for p in data.props)
    if data.meaning:
        line += f", representing {data.meaning}"
    flags = "--v 6 --style raw"
    if data.style.aspect_ratio:
        flags = f"--ar {data.style.aspect_ratio} {flags}"
    return f"{line}\n{flags}"


def render_dalle(data: SceneData) -> str:
    line = f"A {data.style.name} scene: {_actor_name(data, 'a person')}"
    if _set_name(data):
        line += f" inside {_set_name(data)}"
    if data.tone_room:
        line += f", specifically {data.tone_room}"
    if data.props:
        labels = [f"a {p.name}" if p.name else p.component for p in data.props]
        line += ". They are interacting with " + " and ".join(labels)
    if data.meaning:
        line += f'. The scene symbolizes "{data.meaning}"'
    return f"{line}.\n{data.style.suffix}"


def render_stable_diffusion(data: SceneData) -> str:
    tokens = [f"({data.actor.name}:1.2)" if data.actor and data.actor.name else "(person:1.1)"]
    if _set_name(data):
        tokens.append(f"({_set_name(data)} interior:1.1)")
    if data.tone_room:
        tokens.append(data.tone_room)
    tokens.extend(f"({_prop_label(p)}:1.1)" for p in data.props)
    tail = _join_nonempty(data.style.name, data.style.suffix, "masterpiece, best quality")
    return f"{', '.join(tokens)}\n{tail}"


Renderer = Callable[[SceneData], str]

# name -> (renderer, style preset)
TEMPLATES: Dict[str, Tuple[Renderer, PromptStyle]] = {
    "default": (render_default, default_style()),
    "midjourney": (render_midjourney, PromptStyle(name="cinematic", aspect_ratio="16:9")),
    "dalle": (render_dalle, PromptStyle(name="digital art", suffix="highly detailed, dramatic lighting")),
    "sd": (render_stable_diffusion, PromptStyle(name="cinematic lighting", suffix="8k uhd, detailed")),
}

TEMPLATE_ALIASES: Dict[str, str] = {
    "mj": "midjourney",
    "openai": "dalle",
    "stable-diffusion": "sd",
}


def resolve_template_name(name: str) -> str:
    """Canonical template name; raises ValueError for unknown names."""
    key = (name or "default").strip().lower()
    key = TEMPLATE_ALIASES.get(key, key)
    if key not in TEMPLATES:
        choices = ", ".join(list(TEMPLATES) + list(TEMPLATE_ALIASES))
        raise ValueError(f"Unknown prompt style '{name}' (choose from: {choices})")
    return key


class PromptGenerator:
    """Builds image prompts from the user's actor, set and prop tables."""

    def __init__(
        self,
        actors: Optional[List[Actor]] = None,
        sets: Optional[List[MovieSet]] = None,
        props: Optional[List[Prop]] = None,
    ) -> None:
        self.actors: Dict[str, Actor] = {a.id: a for a in actors or []}
        self.sets: Dict[str, MovieSet] = {s.id: s for s in sets or []}
        self.props: Dict[str, Prop] = {p.id: p for p in props or []}
        self.style = default_style()
        self.template_name = "default"
        self._render: Renderer = render_default

    def use_template(self, name: str) -> None:
        """Switch to a named template and its style preset."""
        key = resolve_template_name(name)
        renderer, preset = TEMPLATES[key]
        self.template_name = key
        self._render = renderer
        self.style = replace(preset)

    def set_style(self, style: PromptStyle) -> None:
        self.style = style

    def set_custom_template(self, text: str) -> None:
        """Use a `str.format` template over TEMPLATE_FIELDS.

        Raises ValueError if the template references unknown fields or is
        malformed.
        """
        sample = SceneData(character="", pinyin="", tone=5).fields()
        try:
            text.format_map(sample)
        except (KeyError, IndexError, AttributeError, ValueError) as e:
            raise ValueError(f"Invalid prompt template: {e!r} (fields: {', '.join(TEMPLATE_FIELDS)})") from e
        self.template_name = "custom"
        self._render = lambda data: text.format_map(data.fields())

    def get_actor(self, actor_id: str) -> Optional[Actor]:
        return self.actors.get(actor_id)

    def get_set(self, set_id: str) -> Optional[MovieSet]:
        return self.sets.get(set_id)

    def get_prop(self, component: str) -> Optional[Prop]:
        return self.props.get(component)

    def tone_room(self, movie_set: Optional[MovieSet], tone: int) -> str:
        """The room description (or name) for a tone, falling back to the defaults."""
        if movie_set is not None:
            room = movie_set.room_for(tone)
            if room is not None and (room.description or room.name):
                return room.description or room.name
        return DEFAULT_TONE_ROOMS.get(tone, "inside")

    def build_scene_data(
        self,
        character: str,
        pinyin: str,
        actor_id: str,
        set_id: str,
        tone: int,
        components: Optional[List[str]] = None,
        meaning: str = "",
        etymology: str = "",
        decomposition: str = "",
    ) -> SceneData:
        movie_set = self.get_set(set_id)
        components = list(components or [])
        props = [p for p in (self.get_prop(c) for c in components) if p is not None]
        return SceneData(
            character=character,
            pinyin=pinyin,
            tone=tone,
            meaning=meaning,
            tone_room=self.tone_room(movie_set, tone),
            actor=self.get_actor(actor_id),
            movie_set=movie_set,
            props=props,
            components=components,
            etymology=etymology,
            decomposition=decomposition,
        )

    def scene_data_for(
        self,
        character: str,
        reading: ParsedSyllable,
        entry: Optional[DictionaryEntry] = None,
    ) -> SceneData:
        """Scene data for one decomposed reading, enriched from a dictionary entry."""
        meaning = etymology = decomposition = ""
        components: List[str] = []
        if entry is not None:
            meaning = entry.definition
            if entry.etymology is not None:
                etymology = entry.etymology.hint or entry.etymology.type
            decomposition = format_decomposition(entry.decomposition)
            components = entry.components
        return self.build_scene_data(
            character,
            reading.full,
            reading.actor_id,
            reading.set_id,
            reading.tone,
            components=components,
            meaning=meaning,
            etymology=etymology,
            decomposition=decomposition,
        )

    def generate(self, data: SceneData) -> str:
        """Render the current template for a scene."""
        data.style = self.style
        return self._render(data).strip()

    def generate_simple(self, data: SceneData) -> str:
        """One-line description without templates."""
        parts = [_actor_name(data, "A person")]
        if _set_name(data):
            parts.append(f"at {_set_name(data)}")
        if data.tone_room:
            parts.append(f"({data.tone_room})")
        names = [p.name for p in data.props if p.name]
        if names:
            parts.append("with " + " and ".join(names))
        if data.meaning:
            parts.append(f"representing '{data.meaning}'")
        prompt = " ".join(parts)
        if self.style.suffix:
            prompt += ", " + self.style.suffix
        return prompt


__all__ = [
    "PromptStyle",
    "default_style",
    "DEFAULT_TONE_ROOMS",
    "SceneData",
    "TEMPLATE_FIELDS",
    "TEMPLATES",
    "TEMPLATE_ALIASES",
    "resolve_template_name",
    "render_default",
    "render_midjourney",
    "render_dalle",
    "render_stable_diffusion",
    "PromptGenerator",
]
