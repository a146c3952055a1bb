"""Shared test fixtures for analyzer tests."""

import pytest

from textscan.analyzer.core import TextAnalyzer, create_analyzer
from textscan.analyzer.models import AnalysisConfig, WordCount


@pytest.fixture
def analyzer() -> TextAnalyzer:
    """Analyzer with the default strategies."""
    return create_analyzer()


@pytest.fixture
def polish_text() -> str:
    """Short Polish text with punctuation and a line break."""
    return "Ala, ma kota! A kot ma Alę.\nTo jest test."


@pytest.fixture
def repeated_text() -> str:
    """Text with repeated words and mixed case."""
    return "Kot ma kota. Kot, kot i pies! Pies ma kota?"


@pytest.fixture
def default_config() -> AnalysisConfig:
    """Default session configuration."""
    return AnalysisConfig()


@pytest.fixture
def sample_word_counts() -> list[WordCount]:
    """Sample word counts in no particular order."""
    return [
        WordCount(word="b", count=2),
        WordCount(word="c", count=1),
        WordCount(word="a", count=2),
    ]
