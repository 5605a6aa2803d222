import json
from pathlib import Path

import pytest

from hmm.common.config import (
    ACTORS_FILENAME,
    PROPS_FILENAME,
    SETS_FILENAME,
    default_actors,
    default_props,
    default_sets,
    save_actors,
    save_props,
    save_sets,
)


DICTIONARY_ENTRIES = [
    {
        "character": "好",
        "definition": "good, well; proper",
        "pinyin": ["hǎo", "hào"],
        "decomposition": "⿰女子",
        "radical": "女",
        "etymology": {"type": "ideographic", "hint": "A woman 女 with a son 子"},
    },
    {
        "character": "林",
        "definition": "forest, grove",
        "pinyin": ["lín"],
        "decomposition": "⿰木木",
        "radical": "木",
        "etymology": {"type": "ideographic", "hint": "Two trees 木 make a forest"},
    },
    {
        "character": "中",
        "definition": "middle, center",
        "pinyin": ["zhōng", "zhòng"],
        "decomposition": "⿻口丨",
        "radical": "丨",
    },
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the real config dir, .env keys and ./data."""
    monkeypatch.delenv("HMM_CONFIG_DIR", raising=False)
    monkeypatch.delenv("OPENAI_MODEL", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def dictionary_path(tmp_path) -> Path:
    path = tmp_path / "dictionary.jsonl"
    lines = [json.dumps(e, ensure_ascii=False) for e in DICTIONARY_ENTRIES]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def config_dir(tmp_path) -> Path:
    """A config dir with a few named actors, sets and props."""
    path = tmp_path / "config"
    path.mkdir()

    actors = default_actors()
    names = {"h": "Hugh Jackman", "li": "Lisa Simpson", "zh": "Zhang Yimou"}
    for actor in actors:
        actor.name = names.get(actor.id, "")

    sets = default_sets()
    set_names = {"ao": "Grandma's house", "en": "Primary school", "ong": "Old office"}
    for movie_set in sets:
        movie_set.name = set_names.get(movie_set.id, "")
        if movie_set.id == "en":
            movie_set.rooms[1].description = "by the blackboard"

    props = default_props()
    prop_names = {"女": "queen", "子": "baby", "木": "tree"}
    for prop in props:
        prop.name = prop_names.get(prop.id, "")

    save_actors(path / ACTORS_FILENAME, actors)
    save_sets(path / SETS_FILENAME, sets)
    save_props(path / PROPS_FILENAME, props)
    return path


class StubClient:
    """Stands in for OpenAIClient; records every request."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result if result is not None else {
            "image_prompt": "Hugh Jackman cradles a baby in Grandma's bedroom. digital art, cinematic lighting",
            "script": "Hugh sings a lullaby while the queen watches. Everything is good.",
        }

    def complete_structured(self, system, user, schema, max_tokens=1024):
        self.calls.append({"system": system, "user": user, "schema": schema})
        return self.result


@pytest.fixture
def stub_client() -> StubClient:
    return StubClient()
