"""Text normalization applied before word tokenization."""

from __future__ import annotations

import re
import string
from abc import ABC, abstractmethod
from typing import Final

# ASCII punctuation plus Polish/French quotation marks
PUNCTUATION_CHARS: Final[str] = string.punctuation + "„”»«"

PUNCTUATION_PATTERN: Final[re.Pattern[str]] = re.compile(f"[{re.escape(PUNCTUATION_CHARS)}]")


class Normalizer(ABC):
    """Abstract base class for text normalizers."""

    @abstractmethod
    def normalize(self, text: str | None) -> str:
        """Prepare raw text for word tokenization.

        Args:
            text: The raw text. None is treated as an empty string.

        Returns:
            The normalized text.
        """


class DefaultNormalizer(Normalizer):
    """Lowercases text and replaces punctuation with spaces."""

    def normalize(self, text: str | None) -> str:
        """Normalize text: trim, lowercase, punctuation to spaces, trim again.

        The result is stripped once more after substitution so that
        normalizing an already normalized text is a no-op.

        Args:
            text: The raw text. None is treated as an empty string.

        Returns:
            Normalized text, or an empty string for blank input.
        """
        stripped = (text or "").strip()
        if not stripped:
            return ""
        return PUNCTUATION_PATTERN.sub(" ", stripped.lower()).strip()
