"""Character readings (pypinyin) tests."""
import pytest

from hmm.pinyin.readings import get_readings, parse_char, parse_text


class TestReadings:

    @pytest.mark.unit
    def test_heteronyms_with_tone_marks(self):
        readings = get_readings("好")
        assert "hǎo" in readings
        assert len(readings) == len(set(readings))

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "a", "?", "1"])
    def test_non_chinese_has_no_readings(self, text):
        assert get_readings(text) == []
        assert parse_char(text) == []

    @pytest.mark.unit
    def test_parse_char(self):
        readings = parse_char("中")
        first = [r for r in readings if r.full == "zhōng"][0]
        assert (first.initial, first.final, first.tone) == ("zh", "ong", 1)

    @pytest.mark.unit
    def test_parse_text_skips_non_cjk(self):
        result = parse_text("好 a 林!")
        assert [char for char, _ in result] == ["好", "林"]
        lin = result[1][1][0]
        assert (lin.initial, lin.final, lin.tone) == ("li", "en", 2)
