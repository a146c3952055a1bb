"""Pydantic models for text analysis."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from textscan.analyzer.stopwords_pl import get_polish_stop_words


class SortMode(StrEnum):
    """Ordering of word count listings."""

    ALPHABETIC = "alphabetic"
    FREQUENCY_DESC = "frequency_desc"
    FREQUENCY_ASC = "frequency_asc"


class TextStats(BaseModel, frozen=True):
    """Aggregate statistics of a single text.

    Attributes:
        chars_with_spaces: Number of all characters in the raw text.
        chars_without_spaces: Number of characters once whitespace is removed.
        words: Number of words after normalization and tokenization.
        sentences: Number of sentences in the raw text.
    """

    chars_with_spaces: int = Field(..., ge=0, description="Characters including whitespace")
    chars_without_spaces: int = Field(..., ge=0, description="Characters excluding whitespace")
    words: int = Field(..., ge=0, description="Word count")
    sentences: int = Field(..., ge=0, description="Sentence count")


class WordCount(BaseModel, frozen=True):
    """A single word and its occurrence count.

    Attributes:
        word: The normalized word.
        count: Number of occurrences.
    """

    word: str = Field(..., min_length=1, description="The normalized word")
    count: int = Field(..., ge=1, description="Number of occurrences")


class AnalysisConfig(BaseModel):
    """Session configuration passed into analyzer calls.

    Unlike the other models this one is mutable: the interactive session
    changes it between calls.

    Attributes:
        stop_words: Lowercased words excluded from frequency counting.
            An empty set disables filtering.
        min_word_length: Minimum word length to include.
        sort_mode: Ordering used for word listings.
        top_n: Number of entries shown by top-N listings.
    """

    model_config = ConfigDict(validate_assignment=True)

    stop_words: set[str] = Field(
        default_factory=lambda: set(get_polish_stop_words()),
        description="Words excluded from frequency counting",
    )
    min_word_length: int = Field(default=2, ge=1, description="Minimum word length to include")
    sort_mode: SortMode = Field(default=SortMode.FREQUENCY_DESC, description="Listing order")
    top_n: int = Field(default=20, ge=1, description="Number of top words to show")

    @field_validator("stop_words")
    @classmethod
    def lowercase_stop_words(cls, v: set[str]) -> set[str]:
        """Store stop words in the same case as normalized words."""
        return {word.strip().lower() for word in v if word.strip()}

    @property
    def stop_words_enabled(self) -> bool:
        """Whether stop-word filtering is active."""
        return bool(self.stop_words)

    def active_stop_words(self) -> set[str] | None:
        """Return the stop-word set, or None when filtering is disabled."""
        return self.stop_words if self.stop_words_enabled else None

    def toggle_stop_words(self) -> bool:
        """Switch stop-word filtering on or off.

        Disabling clears the set in place; enabling refills it with the
        default list.

        Returns:
            True if filtering is enabled after the call.
        """
        if self.stop_words_enabled:
            self.stop_words.clear()
            return False
        self.stop_words.update(get_polish_stop_words())
        return True
