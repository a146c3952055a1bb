"""File reading for text analysis."""

from __future__ import annotations

from pathlib import Path

from textscan.exceptions import FileReadError
from textscan.logging import get_logger

logger = get_logger("reader")

DEFAULT_ENCODING = "utf-8"


def read_file_to_text(path: str | Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read a whole text file into a string.

    The file is decoded with an explicit encoding (UTF-8 unless overridden),
    so accented characters are read correctly.

    Args:
        path: Path to the text file.
        encoding: Character encoding used to decode the file.

    Returns:
        The file contents.

    Raises:
        FileReadError: If the file does not exist, cannot be read or
            cannot be decoded with the given encoding.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise FileReadError(f"File not found: {file_path}", path=file_path) from e
    except UnicodeDecodeError as e:
        raise FileReadError(
            f"Cannot decode {file_path} as {encoding}: {e.reason}", path=file_path
        ) from e
    except OSError as e:
        raise FileReadError(f"Cannot read {file_path}: {e.strerror or e}", path=file_path) from e

    logger.debug("Read %d characters from %s", len(text), file_path)
    return text
