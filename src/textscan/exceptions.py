"""Custom exceptions for TextScan."""

from pathlib import Path
from typing import Any


class TextScanError(Exception):
    """Base exception for TextScan.

    Attributes:
        message: Human-readable error message
        context: Additional context information
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class AnalyzerError(TextScanError):
    """Base exception for analyzer errors."""


class AnalyzerValidationError(AnalyzerError):
    """Analyzer was constructed with a missing strategy.

    Attributes:
        strategy: Name of the missing strategy argument
    """

    def __init__(self, message: str, strategy: str | None = None) -> None:
        super().__init__(message, strategy=strategy)
        self.strategy = strategy


class FileReadError(TextScanError):
    """Input file is missing, unreadable or cannot be decoded.

    Attributes:
        path: The offending file path
    """

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message, path=str(path) if path is not None else None)
        self.path = path


class ReportWriteError(TextScanError):
    """Report could not be written to its destination.

    Attributes:
        path: Destination path of the report
    """

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message, path=str(path) if path is not None else None)
        self.path = path
