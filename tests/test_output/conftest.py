"""Shared fixtures for output tests."""

import pytest

from textscan.analyzer.models import TextStats, WordCount


@pytest.fixture
def sample_stats() -> TextStats:
    """Statistics of a short text."""
    return TextStats(chars_with_spaces=41, chars_without_spaces=32, words=10, sentences=3)


@pytest.fixture
def sample_frequency() -> tuple[WordCount, ...]:
    """Word counts in display order, including characters needing escaping."""
    return (
        WordCount(word="kot", count=3),
        WordCount(word="alę", count=2),
        WordCount(word='a,"b"<&>', count=1),
    )
