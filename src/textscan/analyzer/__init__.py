"""Text analysis module: normalization, tokenization and word frequencies."""

from textscan.analyzer.core import TextAnalyzer, create_analyzer
from textscan.analyzer.filters import apply_filters, filter_by_length, filter_stop_words
from textscan.analyzer.frequency import count_frequencies, create_word_counts
from textscan.analyzer.models import AnalysisConfig, SortMode, TextStats, WordCount
from textscan.analyzer.normalizer import DefaultNormalizer, Normalizer
from textscan.analyzer.sorting import collation_key, sort_word_counts
from textscan.analyzer.stopwords_pl import get_polish_stop_words
from textscan.analyzer.tokenizer import (
    DefaultSentenceTokenizer,
    SentenceTokenizer,
    Tokenizer,
    WhitespaceTokenizer,
)

__all__ = [
    # Models
    "AnalysisConfig",
    "SortMode",
    "TextStats",
    "WordCount",
    # Strategies
    "Normalizer",
    "DefaultNormalizer",
    "Tokenizer",
    "WhitespaceTokenizer",
    "SentenceTokenizer",
    "DefaultSentenceTokenizer",
    # Analyzer
    "TextAnalyzer",
    "create_analyzer",
    # Filters
    "filter_stop_words",
    "filter_by_length",
    "apply_filters",
    "get_polish_stop_words",
    # Frequency and sorting
    "count_frequencies",
    "create_word_counts",
    "collation_key",
    "sort_word_counts",
]
