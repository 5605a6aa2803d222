"""Prompt template tests."""
import pytest

from hmm.common.config import load_config
from hmm.decomp.dictionary import Dictionary
from hmm.output.prompt import (
    TEMPLATE_FIELDS,
    PromptGenerator,
    PromptStyle,
    SceneData,
    resolve_template_name,
)
from hmm.pinyin.parser import decompose
from hmm.schema.base import MovieSet, ToneRoom


@pytest.fixture
def generator(config_dir) -> PromptGenerator:
    config = load_config(config_dir)
    return PromptGenerator(config.actors, config.sets, config.props)


@pytest.fixture
def hao_data(generator, dictionary_path) -> SceneData:
    d = Dictionary()
    d.load_from_file(dictionary_path)
    return generator.scene_data_for("好", decompose("hǎo"), d.lookup("好"))


class TestSceneData:

    @pytest.mark.unit
    def test_scene_data_for(self, hao_data):
        assert hao_data.actor.name == "Hugh Jackman"
        assert hao_data.movie_set.name == "Grandma's house"
        assert hao_data.tone_room == "Bedroom"
        assert [p.name for p in hao_data.props] == ["queen", "baby"]
        assert hao_data.components == ["女", "子"]
        assert hao_data.decomposition == "left-right: 女 + 子"
        assert hao_data.etymology == "A woman 女 with a son 子"
        assert hao_data.meaning.startswith("good")

    @pytest.mark.unit
    def test_without_dictionary_entry(self, generator):
        data = generator.scene_data_for("好", decompose("hǎo"))
        assert data.meaning == ""
        assert data.props == []

    @pytest.mark.unit
    def test_missing_prop_is_skipped(self, generator):
        data = generator.build_scene_data("x", "hǎo", "h", "ao", 3, components=["女", "龘"])
        assert [p.id for p in data.props] == ["女"]
        assert data.components == ["女", "龘"]

    @pytest.mark.unit
    def test_fields_cover_template_fields(self, hao_data):
        fields = hao_data.fields()
        assert tuple(fields) == TEMPLATE_FIELDS
        assert fields["props"] == "queen and baby"


class TestToneRoom:

    @pytest.mark.unit
    def test_description_then_name_then_default(self):
        gen = PromptGenerator()
        movie_set = MovieSet(id="en", final="en", rooms=[
            ToneRoom(tone=1, name="Porch", description="on the porch swing"),
            ToneRoom(tone=2, name="Kitchen"),
        ])
        assert gen.tone_room(movie_set, 1) == "on the porch swing"
        assert gen.tone_room(movie_set, 2) == "Kitchen"
        assert gen.tone_room(movie_set, 5) == "on the roof"
        assert gen.tone_room(None, 3) == "in the bedroom"

    @pytest.mark.unit
    def test_room_description_from_config(self, generator):
        data = generator.scene_data_for("林", decompose("lín"))
        assert data.tone_room == "by the blackboard"
        assert data.actor.name == "Lisa Simpson"


class TestTemplates:

    @pytest.mark.unit
    @pytest.mark.parametrize("name,expected", [
        ("default", "default"),
        ("MJ", "midjourney"),
        ("openai", "dalle"),
        ("stable-diffusion", "sd"),
        ("", "default"),
    ])
    def test_resolve_template_name(self, name, expected):
        assert resolve_template_name(name) == expected

    @pytest.mark.unit
    def test_unknown_template(self, generator):
        with pytest.raises(ValueError):
            generator.use_template("picasso")

    @pytest.mark.unit
    def test_default(self, generator, hao_data):
        prompt = generator.generate(hao_data)
        first, second = prompt.split("\n")
        assert first.startswith("Hugh Jackman at Grandma's house (Bedroom), interacting with queen and baby")
        assert second == "cinematic digital art, dramatic lighting, detailed, memorable scene, mnemonic visualization"

    @pytest.mark.unit
    def test_midjourney(self, generator, hao_data):
        generator.use_template("mj")
        prompt = generator.generate(hao_data)
        assert prompt.startswith("Hugh Jackman in Grandma's house, Bedroom area, holding queen, baby")
        assert prompt.endswith("--ar 16:9 --v 6 --style raw")

    @pytest.mark.unit
    def test_dalle(self, generator, hao_data):
        generator.use_template("dalle")
        prompt = generator.generate(hao_data)
        assert prompt.startswith("A digital art scene: Hugh Jackman inside Grandma's house")
        assert "interacting with a queen and a baby" in prompt
        assert prompt.endswith("highly detailed, dramatic lighting")

    @pytest.mark.unit
    def test_stable_diffusion(self, generator, hao_data):
        generator.use_template("sd")
        prompt = generator.generate(hao_data)
        assert prompt.startswith("(Hugh Jackman:1.2), (Grandma's house interior:1.1), Bedroom, (queen:1.1), (baby:1.1)")
        assert prompt.endswith("masterpiece, best quality")

    @pytest.mark.unit
    def test_placeholders_without_config(self):
        gen = PromptGenerator()
        data = gen.build_scene_data("好", "hǎo", "h", "ao", 3)
        assert gen.generate(data).startswith("A person (in the bedroom).")

    @pytest.mark.unit
    def test_custom_template(self, generator, hao_data):
        generator.set_custom_template("{character} {pinyin}: {actor} | {set} | {tone_room} | {props}")
        assert generator.template_name == "custom"
        assert generator.generate(hao_data) == "好 hǎo: Hugh Jackman | Grandma's house | Bedroom | queen and baby"

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["{nope}", "{actor", "{0}"])
    def test_invalid_custom_template(self, generator, text):
        with pytest.raises(ValueError):
            generator.set_custom_template(text)

    @pytest.mark.unit
    def test_generate_simple(self, generator, hao_data):
        generator.set_style(PromptStyle(name="ink", suffix="ink wash painting"))
        prompt = generator.generate_simple(hao_data)
        assert prompt.startswith("Hugh Jackman at Grandma's house (Bedroom) with queen and baby representing 'good")
        assert prompt.endswith(", ink wash painting")
