"""Tone extraction tests."""
import pytest

from hmm.pinyin.tables import TONE_MARKS, TONES
from hmm.pinyin.tones import extract_tone


class TestExtractTone:

    @pytest.mark.unit
    @pytest.mark.parametrize("syllable,tone,bare", [
        ("mā", 1, "ma"),
        ("má", 2, "ma"),
        ("mǎ", 3, "ma"),
        ("mà", 4, "ma"),
        ("ma", 5, "ma"),
        ("hǎo", 3, "hao"),
        ("zhōng", 1, "zhong"),
        ("lǜ", 4, "lü"),
        ("nǚ", 3, "nü"),
        ("lüè", 4, "lüe"),
        ("nv", 5, "nv"),
        ("", 5, ""),
    ])
    def test_marks(self, syllable, tone, bare):
        assert extract_tone(syllable) == (tone, bare)

    @pytest.mark.unit
    def test_combining_marks_are_normalized(self):
        # "a" + combining caron
        assert extract_tone("ha\u030co") == (3, "hao")
        assert extract_tone("zho\u0304ng") == (1, "zhong")

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["\uf900", "\u212b", "\u2126m"])
    def test_other_codepoints_pass_through(self, text):
        # NFC would rewrite these compatibility/singleton codepoints
        assert extract_tone(text) == (5, text)

    @pytest.mark.unit
    def test_last_mark_wins(self):
        assert extract_tone("hǎò") == (4, "hao")

    @pytest.mark.unit
    def test_non_pinyin_is_neutral(self):
        assert extract_tone("xyz123") == (5, "xyz123")

    @pytest.mark.unit
    def test_tone_mark_table(self):
        assert len(TONE_MARKS) == 24
        assert {tone for _, tone in TONE_MARKS.values()} == {1, 2, 3, 4}
        assert set(TONES) == {1, 2, 3, 4, 5}
        with pytest.raises(TypeError):
            TONE_MARKS["x"] = ("x", 1)
