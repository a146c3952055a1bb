"""Tests for analyzer filters."""

from textscan.analyzer.filters import (
    apply_filters,
    clamp_min_word_length,
    filter_by_length,
    filter_stop_words,
)


class TestFilterStopWords:
    """Tests for filter_stop_words function."""

    def test_removes_stop_words(self) -> None:
        """Test that stop words are removed."""
        tokens = ["ala", "i", "kot", "w", "domu"]
        result = filter_stop_words(tokens, {"i", "w"})
        assert result == ["ala", "kot", "domu"]

    def test_none_disables_filtering(self) -> None:
        """Test that None keeps all tokens."""
        tokens = ["ala", "i", "kot"]
        assert filter_stop_words(tokens, None) == tokens

    def test_empty_set_disables_filtering(self) -> None:
        """Test that an empty set keeps all tokens."""
        tokens = ["ala", "i", "kot"]
        assert filter_stop_words(tokens, set()) == tokens

    def test_preserves_duplicates(self) -> None:
        """Test that repeated non-stop words are kept."""
        assert filter_stop_words(["kot", "i", "kot"], {"i"}) == ["kot", "kot"]


class TestFilterByLength:
    """Tests for filter_by_length function."""

    def test_filters_short_words(self) -> None:
        """Test that words shorter than the minimum are removed."""
        tokens = ["a", "ab", "abc", "abcd"]
        assert filter_by_length(tokens, 3) == ["abc", "abcd"]

    def test_min_length_one_keeps_all(self) -> None:
        """Test minimum length 1 keeps every word."""
        tokens = ["a", "ab"]
        assert filter_by_length(tokens, 1) == tokens

    def test_zero_clamped_to_one(self) -> None:
        """Test that 0 behaves like 1."""
        assert filter_by_length(["a", "ab"], 0) == ["a", "ab"]

    def test_negative_clamped_to_one(self) -> None:
        """Test that negative values behave like 1."""
        assert filter_by_length(["a", "ab"], -5) == ["a", "ab"]

    def test_counts_characters_not_bytes(self) -> None:
        """Test that accented letters count as one character."""
        assert filter_by_length(["żó", "łąka"], 3) == ["łąka"]


class TestClampMinWordLength:
    """Tests for clamp_min_word_length function."""

    def test_clamps(self) -> None:
        """Test values below 1 become 1 and others pass through."""
        assert clamp_min_word_length(-1) == 1
        assert clamp_min_word_length(0) == 1
        assert clamp_min_word_length(4) == 4


class TestApplyFilters:
    """Tests for apply_filters function."""

    def test_length_and_stop_words(self) -> None:
        """Test both filters together."""
        result = apply_filters(["a", "ab", "abc", "abcd"], {"a"}, 3)
        assert result == ["abc", "abcd"]

    def test_stop_word_longer_than_minimum(self) -> None:
        """Test a stop word passing the length filter is still removed."""
        result = apply_filters(["tylko", "kot", "tylko"], {"tylko"}, 2)
        assert result == ["kot"]

    def test_defaults_keep_everything(self) -> None:
        """Test default arguments keep all tokens."""
        tokens = ["a", "b", "c"]
        assert apply_filters(tokens) == tokens
