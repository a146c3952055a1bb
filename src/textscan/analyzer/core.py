"""Text analyzer composing normalization, tokenization and frequency counting."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Callable, Collection
from pathlib import Path
from typing import Final

from textscan.analyzer.filters import apply_filters
from textscan.analyzer.frequency import clamp_top_n, count_frequencies, create_word_counts
from textscan.analyzer.models import SortMode, TextStats, WordCount
from textscan.analyzer.normalizer import DefaultNormalizer, Normalizer
from textscan.analyzer.tokenizer import (
    DefaultSentenceTokenizer,
    SentenceTokenizer,
    Tokenizer,
    WhitespaceTokenizer,
)
from textscan.exceptions import AnalyzerValidationError
from textscan.logging import get_logger
from textscan.reader import read_file_to_text

logger = get_logger("analyzer.core")

WHITESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s+")

FileReader = Callable[[str | Path], str]


class TextAnalyzer:
    """Computes text statistics and word frequencies.

    The three strategies are injected so that alternative normalization or
    tokenization can be swapped in without touching the analyzer. File-based
    operations read through ``reader`` and let its FileReadError propagate.
    """

    def __init__(
        self,
        normalizer: Normalizer | None,
        tokenizer: Tokenizer | None,
        sentence_tokenizer: SentenceTokenizer | None,
        reader: FileReader = read_file_to_text,
    ) -> None:
        """
        Initialize the analyzer.

        Args:
            normalizer: Strategy preparing text for word tokenization.
            tokenizer: Strategy splitting normalized text into words.
            sentence_tokenizer: Strategy splitting raw text into sentences.
            reader: Callable reading a file path into text.

        Raises:
            AnalyzerValidationError: If any strategy is None.
        """
        if normalizer is None:
            raise AnalyzerValidationError("normalizer must not be None", strategy="normalizer")
        if tokenizer is None:
            raise AnalyzerValidationError("tokenizer must not be None", strategy="tokenizer")
        if sentence_tokenizer is None:
            raise AnalyzerValidationError(
                "sentence_tokenizer must not be None", strategy="sentence_tokenizer"
            )
        self.normalizer = normalizer
        self.tokenizer = tokenizer
        self.sentence_tokenizer = sentence_tokenizer
        self.reader = reader

    def words(self, text: str | None) -> list[str]:
        """Normalize and tokenize text into words."""
        return self.tokenizer.words(self.normalizer.normalize(text or ""))

    def sentences(self, text: str | None) -> list[str]:
        """Split raw text into sentences."""
        return self.sentence_tokenizer.sentences(text or "")

    def analyze(self, text: str | None) -> TextStats:
        """Compute character, word and sentence counts.

        Args:
            text: Raw text. None is treated as an empty string.

        Returns:
            TextStats for the text.
        """
        original = text or ""
        stats = TextStats(
            chars_with_spaces=len(original),
            chars_without_spaces=len(WHITESPACE_PATTERN.sub("", original)),
            words=len(self.words(original)),
            sentences=len(self.sentences(original)),
        )
        logger.debug("Analyzed %d characters: %s", stats.chars_with_spaces, stats)
        return stats

    def word_frequency(
        self,
        text: str | None,
        stop_words: Collection[str] | None = None,
        min_word_length: int = 1,
    ) -> Counter[str]:
        """Count occurrences of each word that passes the filters.

        Args:
            text: Raw text. None is treated as an empty string.
            stop_words: Words to exclude. None or empty disables filtering.
            min_word_length: Minimum word length; values below 1 count as 1.

        Returns:
            Counter mapping word to count.
        """
        tokens = apply_filters(self.words(text), stop_words, min_word_length)
        frequencies = count_frequencies(tokens)
        logger.debug(
            "Counted %d distinct words (%d after filtering)", len(frequencies), len(tokens)
        )
        return frequencies

    def all_words_sorted(
        self,
        text: str | None,
        stop_words: Collection[str] | None = None,
        min_word_length: int = 1,
        sort_mode: SortMode = SortMode.FREQUENCY_DESC,
    ) -> tuple[WordCount, ...]:
        """Return every distinct filtered word, sorted.

        Args:
            text: Raw text. None is treated as an empty string.
            stop_words: Words to exclude. None or empty disables filtering.
            min_word_length: Minimum word length; values below 1 count as 1.
            sort_mode: Ordering of the result.

        Returns:
            Tuple of WordCount items.
        """
        frequencies = self.word_frequency(text, stop_words, min_word_length)
        return create_word_counts(frequencies, sort_mode)

    def top_words(
        self,
        text: str | None,
        top_n: int,
        stop_words: Collection[str] | None = None,
        min_word_length: int = 1,
        sort_mode: SortMode = SortMode.FREQUENCY_DESC,
    ) -> tuple[WordCount, ...]:
        """Return the first top_n words of the sorted listing.

        Args:
            text: Raw text. None is treated as an empty string.
            top_n: Number of entries; values below 1 count as 1.
            stop_words: Words to exclude. None or empty disables filtering.
            min_word_length: Minimum word length; values below 1 count as 1.
            sort_mode: Ordering of the result.

        Returns:
            Tuple of at most top_n WordCount items.
        """
        ranked = self.all_words_sorted(text, stop_words, min_word_length, sort_mode)
        return ranked[: clamp_top_n(top_n)]

    # File-based variants

    def analyze_file(self, path: str | Path) -> TextStats:
        """Read a file and compute its TextStats.

        Raises:
            FileReadError: If the file cannot be read.
        """
        return self.analyze(self.reader(path))

    def word_frequency_from_file(
        self,
        path: str | Path,
        stop_words: Collection[str] | None = None,
        min_word_length: int = 1,
    ) -> Counter[str]:
        """Read a file and count its word frequencies.

        Raises:
            FileReadError: If the file cannot be read.
        """
        return self.word_frequency(self.reader(path), stop_words, min_word_length)

    def all_words_sorted_from_file(
        self,
        path: str | Path,
        stop_words: Collection[str] | None = None,
        min_word_length: int = 1,
        sort_mode: SortMode = SortMode.FREQUENCY_DESC,
    ) -> tuple[WordCount, ...]:
        """Read a file and return every distinct filtered word, sorted.

        Raises:
            FileReadError: If the file cannot be read.
        """
        return self.all_words_sorted(self.reader(path), stop_words, min_word_length, sort_mode)

    def top_words_from_file(
        self,
        path: str | Path,
        top_n: int,
        stop_words: Collection[str] | None = None,
        min_word_length: int = 1,
        sort_mode: SortMode = SortMode.FREQUENCY_DESC,
    ) -> tuple[WordCount, ...]:
        """Read a file and return its top words.

        Raises:
            FileReadError: If the file cannot be read.
        """
        return self.top_words(self.reader(path), top_n, stop_words, min_word_length, sort_mode)


def create_analyzer(reader: FileReader = read_file_to_text) -> TextAnalyzer:
    """Build an analyzer with the default strategies.

    Args:
        reader: Callable reading a file path into text.

    Returns:
        A TextAnalyzer using DefaultNormalizer, WhitespaceTokenizer and
        DefaultSentenceTokenizer.
    """
    return TextAnalyzer(
        normalizer=DefaultNormalizer(),
        tokenizer=WhitespaceTokenizer(),
        sentence_tokenizer=DefaultSentenceTokenizer(),
        reader=reader,
    )
