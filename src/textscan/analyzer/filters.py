"""Word filtering for frequency analysis."""

from __future__ import annotations

from collections.abc import Collection


def clamp_min_word_length(min_word_length: int) -> int:
    """Clamp a minimum word length to at least 1."""
    return max(1, min_word_length)


def filter_stop_words(tokens: list[str], stop_words: Collection[str] | None = None) -> list[str]:
    """Remove stop words from token list.

    Args:
        tokens: List of normalized word tokens.
        stop_words: Words to exclude. None or an empty collection disables
            filtering.

    Returns:
        Filtered list of tokens with stop words removed.
    """
    if not stop_words:
        return tokens
    return [token for token in tokens if token not in stop_words]


def filter_by_length(tokens: list[str], min_word_length: int = 1) -> list[str]:
    """Filter tokens by minimum length.

    Args:
        tokens: List of word tokens.
        min_word_length: Minimum length to keep; values below 1 count as 1.

    Returns:
        Filtered list of tokens meeting minimum length requirement.
    """
    threshold = clamp_min_word_length(min_word_length)
    return [token for token in tokens if len(token) >= threshold]


def apply_filters(
    tokens: list[str],
    stop_words: Collection[str] | None = None,
    min_word_length: int = 1,
) -> list[str]:
    """Apply length and stop-word filters to token list.

    Filter order:
    1. Filter by minimum length
    2. Remove stop words

    Args:
        tokens: List of word tokens.
        stop_words: Words to exclude, or None to keep all.
        min_word_length: Minimum word length to keep.

    Returns:
        Filtered list of tokens.
    """
    filtered = filter_by_length(tokens, min_word_length)
    return filter_stop_words(filtered, stop_words)
