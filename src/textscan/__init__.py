"""TextScan - text statistics and word frequency analyzer."""

from textscan.config import Settings, settings
from textscan.exceptions import (
    AnalyzerError,
    AnalyzerValidationError,
    FileReadError,
    ReportWriteError,
    TextScanError,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "settings",
    # Exceptions
    "AnalyzerError",
    "AnalyzerValidationError",
    "FileReadError",
    "ReportWriteError",
    "TextScanError",
]
