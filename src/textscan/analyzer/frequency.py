"""Word frequency counting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping

from textscan.analyzer.models import SortMode, WordCount
from textscan.analyzer.sorting import sort_word_counts


def count_frequencies(tokens: list[str]) -> Counter[str]:
    """Count word frequencies in token list.

    Args:
        tokens: List of word tokens.

    Returns:
        Counter with word frequencies, keyed in order of first appearance.
    """
    return Counter(tokens)


def create_word_counts(
    frequencies: Mapping[str, int],
    sort_mode: SortMode = SortMode.FREQUENCY_DESC,
) -> tuple[WordCount, ...]:
    """Convert a frequency mapping to a sorted tuple of WordCount objects.

    Args:
        frequencies: Mapping of word to occurrence count.
        sort_mode: Ordering of the result.

    Returns:
        Tuple of WordCount objects sorted by the given mode.
    """
    counts = (
        WordCount(word=word, count=count) for word, count in frequencies.items() if count > 0
    )
    return sort_word_counts(counts, sort_mode)


def clamp_top_n(top_n: int) -> int:
    """Clamp a top-N limit to at least 1."""
    return max(1, top_n)
