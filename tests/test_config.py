"""User config (YAML tables) and schema tests."""
import pytest

from hmm.common.config import (
    ACTORS_FILENAME,
    CONFIG_FILENAMES,
    SETS_FILENAME,
    default_actors,
    default_props,
    default_sets,
    get_config_dir,
    load_actors,
    load_config,
    load_sets,
    load_user_config,
    write_default_config,
)
from hmm.schema.base import Actor, MovieSet, Prop, Scene, ToneRoom


class TestConfigDir:

    @pytest.mark.unit
    def test_default_is_home_config(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / ".config" / "hmm"

    @pytest.mark.unit
    def test_env_and_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HMM_CONFIG_DIR", str(tmp_path / "env"))
        assert get_config_dir() == tmp_path / "env"
        assert get_config_dir(str(tmp_path / "flag")) == tmp_path / "flag"


class TestTables:

    @pytest.mark.unit
    def test_default_tables(self):
        actors = default_actors()
        sets = default_sets()
        assert len(actors) == 55
        assert actors[0].id == "null"
        assert actors[0].category == "null"
        assert len(sets) == 13
        assert sets[0].id == "null"
        assert all(len(s.rooms) == 5 for s in sets)
        assert sets[0].room_for(2).name == "Kitchen"
        assert [p.id for p in default_props()][:2] == ["一", "丨"]

    @pytest.mark.unit
    def test_round_trip(self, tmp_path):
        written = write_default_config(tmp_path)
        assert [p.name for p in written] == list(CONFIG_FILENAMES)

        config = load_config(tmp_path)
        assert config.actors == default_actors()
        assert config.sets == default_sets()
        assert config.props == default_props()

    @pytest.mark.unit
    def test_yaml_is_readable_unicode(self, tmp_path):
        write_default_config(tmp_path)
        text = (tmp_path / "props.yaml").read_text(encoding="utf-8")
        assert "木" in text
        assert text.startswith("props:")

    @pytest.mark.unit
    def test_load_user_config_without_actors(self, tmp_path):
        assert load_user_config(tmp_path) is None

    @pytest.mark.unit
    def test_load_user_config_with_only_actors(self, tmp_path):
        write_default_config(tmp_path)
        (tmp_path / SETS_FILENAME).unlink()
        config = load_user_config(tmp_path)
        assert len(config.actors) == 55
        assert config.sets == []

    @pytest.mark.unit
    def test_load_config_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            load_config(tmp_path)

    @pytest.mark.unit
    def test_non_mapping_file_is_empty(self, tmp_path):
        path = tmp_path / ACTORS_FILENAME
        path.write_text("- a\n- b\n", encoding="utf-8")
        assert load_actors(path) == []

    @pytest.mark.unit
    def test_unquoted_null_category(self, tmp_path):
        path = tmp_path / ACTORS_FILENAME
        path.write_text("actors:\n- id: 'null'\n  initial: ''\n  category: null\n  name: Mr. Nobody\n", encoding="utf-8")
        actors = load_actors(path)
        assert actors == [Actor(id="null", initial="", category="null", name="Mr. Nobody")]

    @pytest.mark.unit
    def test_sets_with_rooms(self, tmp_path):
        path = tmp_path / SETS_FILENAME
        path.write_text(
            "sets:\n"
            "- id: ang\n"
            "  final: ang\n"
            "  name: Beach house\n"
            "  rooms:\n"
            "  - tone: 3\n"
            "    name: Bedroom\n"
            "    description: under the hammock\n",
            encoding="utf-8",
        )
        (movie_set,) = load_sets(path)
        assert movie_set.name == "Beach house"
        assert movie_set.room_for(3).description == "under the hammock"
        assert movie_set.room_for(1) is None


class TestSchema:

    @pytest.mark.unit
    def test_validation(self):
        with pytest.raises(ValueError):
            Actor(id="h", initial="h", category="villain")
        with pytest.raises(ValueError):
            ToneRoom(tone=7)
        with pytest.raises(ValueError):
            Prop(id="木", component="木", type="smell")

    @pytest.mark.unit
    def test_to_dict_drops_empty_optionals(self):
        data = MovieSet(id="a", final="a", name="Park").to_dict()
        assert data == {"id": "a", "final": "a", "name": "Park", "rooms": []}

    @pytest.mark.unit
    def test_scene_round_trip(self):
        scene = Scene(
            character="好", pinyin="hǎo", initial="h", final="ao", tone=3,
            keyword="good", actor_id="h", set_id="ao", prop_ids=["女", "子"],
            script="A story.", image_prompt="A picture.",
        )
        assert Scene.from_dict(scene.to_dict()) == scene
