"""Configuration management using Pydantic Settings."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from textscan.analyzer.models import SortMode


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TEXTSCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    encoding: str = "utf-8"
    output_dir: Path = Path("reports")
    default_extension: str = ".txt"
    default_top_words: int = 20
    default_min_word_length: int = 2
    default_sort_mode: SortMode = SortMode.FREQUENCY_DESC
    frequency_preview_limit: int = 50

    @field_validator("default_top_words")
    @classmethod
    def validate_default_top_words(cls, v: int) -> int:
        """Validate default_top_words is at least 1."""
        if v < 1:
            raise ValueError("default_top_words must be at least 1")
        return v

    @field_validator("default_min_word_length")
    @classmethod
    def validate_default_min_word_length(cls, v: int) -> int:
        """Validate default_min_word_length is at least 1."""
        if v < 1:
            raise ValueError("default_min_word_length must be at least 1")
        return v

    @field_validator("frequency_preview_limit")
    @classmethod
    def validate_frequency_preview_limit(cls, v: int) -> int:
        """Validate frequency_preview_limit is at least 1."""
        if v < 1:
            raise ValueError("frequency_preview_limit must be at least 1")
        return v

    @field_validator("default_extension")
    @classmethod
    def validate_default_extension(cls, v: str) -> str:
        """Ensure the extension starts with a dot."""
        v = v.strip()
        if not v:
            raise ValueError("default_extension must not be empty")
        return v if v.startswith(".") else f".{v}"

    def resolve_input_path(self, base_name: str) -> Path:
        """Build an input path from a base name, appending the default extension."""
        path = Path(base_name.strip())
        if not path.name.endswith(self.default_extension):
            path = path.with_name(path.name + self.default_extension)
        return path


settings = Settings()
