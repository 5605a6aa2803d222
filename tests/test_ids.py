"""Actor/set identifier and actor category tests."""
import pytest

from hmm.pinyin.ids import actor_category, actor_id, initial_from_actor_id, set_id
from hmm.pinyin.tables import ALL_INITIALS, INITIALS_BY_CATEGORY


class TestIdentifiers:

    @pytest.mark.unit
    @pytest.mark.parametrize("initial,expected", [
        ("", "null"),
        ("h", "h"),
        ("zhu", "zhu"),
        ("nü", "nv"),
        ("lü", "lv"),
        ("yu", "yu"),
    ])
    def test_actor_id(self, initial, expected):
        assert actor_id(initial) == expected

    @pytest.mark.unit
    def test_set_id(self):
        assert set_id("") == "null"
        assert set_id("ang") == "ang"

    @pytest.mark.unit
    @pytest.mark.parametrize("initial", ALL_INITIALS)
    def test_actor_id_round_trip(self, initial):
        assert initial_from_actor_id(actor_id(initial)) == initial


class TestActorCategories:

    @pytest.mark.unit
    def test_there_are_55_initials(self):
        assert len(ALL_INITIALS) == 55
        assert len(set(ALL_INITIALS)) == 55
        assert ALL_INITIALS[0] == ""

    @pytest.mark.unit
    @pytest.mark.parametrize("category,initial", [
        (category, initial)
        for category, initials in INITIALS_BY_CATEGORY.items()
        for initial in initials
    ])
    def test_category_of_every_initial(self, category, initial):
        assert actor_category(initial) == category

    @pytest.mark.unit
    def test_group_sizes(self):
        sizes = {category: len(initials) for category, initials in INITIALS_BY_CATEGORY.items()}
        assert sizes == {"null": 1, "male": 18, "female": 11, "fictional": 19, "god_leader": 6}
