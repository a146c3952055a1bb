"""Tests for sort strategies and collation."""

import pytest

from textscan.analyzer.models import SortMode, WordCount
from textscan.analyzer.sorting import SORT_KEYS, collation_key, sort_word_counts


def words_of(items: tuple[WordCount, ...]) -> list[str]:
    return [item.word for item in items]


class TestCollationKey:
    """Tests for collation_key function."""

    def test_case_insensitive(self) -> None:
        """Test that case does not affect the key."""
        assert collation_key("Kot") == collation_key("kot")
        assert collation_key("ŁÓDŹ") == collation_key("łódź")

    def test_accented_letter_after_base(self) -> None:
        """Test that accented letters sort right after their base letter."""
        assert collation_key("a") < collation_key("ą") < collation_key("b")
        assert collation_key("e") < collation_key("ę") < collation_key("f")
        assert collation_key("z") < collation_key("ź")
        assert collation_key("z") < collation_key("ż")

    def test_stroked_l_after_l(self) -> None:
        """Test that ł sorts between l and m."""
        assert collation_key("l") < collation_key("ł") < collation_key("m")

    def test_polish_word_order(self) -> None:
        """Test ordering of Polish words with diacritics."""
        words = ["żaba", "łąka", "zebra", "ćma", "lampa", "cma", "ala", "ąb", "mama"]
        assert sorted(words, key=collation_key) == [
            "ala",
            "ąb",
            "cma",
            "ćma",
            "lampa",
            "łąka",
            "mama",
            "zebra",
            "żaba",
        ]

    def test_prefix_first(self) -> None:
        """Test that a prefix sorts before longer words."""
        assert collation_key("kot") < collation_key("kota")

    def test_polish_letter_is_primary(self) -> None:
        """Test a Polish letter outranks anything after its base letter."""
        assert collation_key("az") < collation_key("ąb")
        assert collation_key("oz") < collation_key("óa")

    def test_other_accents_are_secondary(self) -> None:
        """Test non-Polish accents group with their base letter."""
        assert collation_key("éa") < collation_key("eb")
        assert collation_key("ea") < collation_key("éa")
        assert collation_key("e") < collation_key("é")

    def test_decomposed_input(self) -> None:
        """Test decomposed and precomposed spellings give the same key."""
        assert collation_key("a\u0328b") == collation_key("\u0105b")


class TestSortKeys:
    """Tests for the SORT_KEYS dispatch table."""

    def test_every_mode_has_a_key(self) -> None:
        """Test each SortMode maps to a key function."""
        assert set(SORT_KEYS) == set(SortMode)


class TestSortWordCounts:
    """Tests for sort_word_counts function."""

    def test_frequency_desc_ties_alphabetic(self, sample_word_counts: list[WordCount]) -> None:
        """Test ties in FREQUENCY_DESC are broken alphabetically."""
        result = sort_word_counts(sample_word_counts, SortMode.FREQUENCY_DESC)
        assert [(wc.word, wc.count) for wc in result] == [("a", 2), ("b", 2), ("c", 1)]

    def test_frequency_asc_ties_alphabetic(self, sample_word_counts: list[WordCount]) -> None:
        """Test ties in FREQUENCY_ASC are broken alphabetically."""
        result = sort_word_counts(sample_word_counts, SortMode.FREQUENCY_ASC)
        assert [(wc.word, wc.count) for wc in result] == [("c", 1), ("a", 2), ("b", 2)]

    def test_alphabetic(self, sample_word_counts: list[WordCount]) -> None:
        """Test alphabetic ordering ignores counts."""
        result = sort_word_counts(sample_word_counts, SortMode.ALPHABETIC)
        assert words_of(result) == ["a", "b", "c"]

    def test_default_mode_is_frequency_desc(self, sample_word_counts: list[WordCount]) -> None:
        """Test that the default mode is FREQUENCY_DESC."""
        assert sort_word_counts(sample_word_counts) == sort_word_counts(
            sample_word_counts, SortMode.FREQUENCY_DESC
        )

    def test_tie_break_uses_collation(self) -> None:
        """Test tie-breaks place accented words next to their base letter."""
        items = [
            WordCount(word="być", count=1),
            WordCount(word="ćma", count=1),
            WordCount(word="cel", count=1),
        ]
        result = sort_word_counts(items, SortMode.FREQUENCY_DESC)
        assert words_of(result) == ["być", "cel", "ćma"]

    def test_accepts_mode_value(self, sample_word_counts: list[WordCount]) -> None:
        """Test that the plain string value of a mode is accepted."""
        result = sort_word_counts(sample_word_counts, "alphabetic")  # type: ignore[arg-type]
        assert words_of(result) == ["a", "b", "c"]

    def test_empty(self) -> None:
        """Test sorting nothing."""
        assert sort_word_counts([], SortMode.ALPHABETIC) == ()

    def test_unknown_mode(self, sample_word_counts: list[WordCount]) -> None:
        """Test an unknown mode value is rejected."""
        with pytest.raises(ValueError):
            sort_word_counts(sample_word_counts, "random")  # type: ignore[arg-type]
