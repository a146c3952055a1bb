"""Word and sentence tokenizers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Final

from nltk.tokenize import RegexpTokenizer
from nltk.tokenize import WhitespaceTokenizer as NLTKWhitespaceTokenizer

# Runs of terminal punctuation separate sentences
SENTENCE_BOUNDARY_PATTERN: Final[str] = r"[.!?]+"


class Tokenizer(ABC):
    """Abstract base class for word tokenizers."""

    @abstractmethod
    def words(self, normalized_text: str | None) -> list[str]:
        """Split normalized text into words.

        Args:
            normalized_text: Text already passed through a normalizer.

        Returns:
            A list of words in order of appearance.
        """


class SentenceTokenizer(ABC):
    """Abstract base class for sentence tokenizers."""

    @abstractmethod
    def sentences(self, text: str | None) -> list[str]:
        """Split raw text into sentences.

        Args:
            text: The original, unnormalized text.

        Returns:
            A list of sentences in order of appearance.
        """


class WhitespaceTokenizer(Tokenizer):
    """Splits text on runs of whitespace using NLTK."""

    def __init__(self) -> None:
        self._tokenizer = NLTKWhitespaceTokenizer()

    def words(self, normalized_text: str | None) -> list[str]:
        """Split text on whitespace runs.

        Args:
            normalized_text: Text already passed through a normalizer.

        Returns:
            A list of non-empty words. Blank input gives an empty list.
        """
        if not normalized_text or not normalized_text.strip():
            return []
        tokens: list[str] = self._tokenizer.tokenize(normalized_text.strip())
        return [token for token in tokens if token]


class DefaultSentenceTokenizer(SentenceTokenizer):
    """Splits text on runs of '.', '!' and '?'."""

    def __init__(self) -> None:
        self._tokenizer = RegexpTokenizer(SENTENCE_BOUNDARY_PATTERN, gaps=True)

    def sentences(self, text: str | None) -> list[str]:
        """Split text into trimmed, non-empty sentences.

        Text without terminal punctuation is a single sentence.

        Args:
            text: The original, unnormalized text.

        Returns:
            A list of sentences. Blank input gives an empty list.
        """
        if not text or not text.strip():
            return []
        fragments: list[str] = self._tokenizer.tokenize(text.strip())
        return [fragment.strip() for fragment in fragments if fragment.strip()]
