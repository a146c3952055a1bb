"""Shared fixtures for CLI tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def reports_dir(tmp_path: Path) -> Path:
    """Temporary directory for reports."""
    return tmp_path / "reports"


@pytest.fixture
def mock_settings(reports_dir: Path):
    """Mock Settings object for testing."""
    from textscan.config import Settings

    return Settings(
        _env_file=None,
        encoding="utf-8",
        output_dir=reports_dir,
        default_top_words=20,
        default_min_word_length=2,
        frequency_preview_limit=50,
    )


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """Text file with a short Polish text."""
    path = tmp_path / "tekst.txt"
    path.write_text("Ala, ma kota! A kot ma Alę.\nTo jest test.", encoding="utf-8")
    return path


@pytest.fixture
def repeated_file(tmp_path: Path) -> Path:
    """Text file with repeated words."""
    path = tmp_path / "powtorzenia.txt"
    path.write_text("Kot ma kota. Kot, kot i pies! Pies ma kota? Oraz oraz oraz.", encoding="utf-8")
    return path
