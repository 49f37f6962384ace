"""Configuration management for blame-lens."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Placeholders used when a porcelain record carries incomplete metadata
UNKNOWN_AUTHOR = "Unknown"
UNKNOWN_DATE = "unknown"

# Backend defaults
DEFAULT_GIT_EXECUTABLE = "git"
DEFAULT_GIT_TIMEOUT_SECONDS = 30.0
DEFAULT_ATTRIBUTION_CACHE_SIZE = 128


class Settings(BaseSettings):
    """Application settings.

    Values are read from ``BLAME_LENS_*`` environment variables or a local
    ``.env`` file; the CLI overrides individual fields from its options.
    """

    model_config = SettingsConfigDict(
        env_prefix="BLAME_LENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage base directory (debug logs only)
    data_dir: Path = Field(default_factory=lambda: Path.home() / ".blame-lens")

    # Backend settings
    git_executable: str = DEFAULT_GIT_EXECUTABLE
    git_timeout_seconds: float = DEFAULT_GIT_TIMEOUT_SECONDS

    # Cache settings
    attribution_cache_size: int = DEFAULT_ATTRIBUTION_CACHE_SIZE

    # Parse degradation placeholders
    unknown_author: str = UNKNOWN_AUTHOR
    unknown_date: str = UNKNOWN_DATE

    # Debug settings
    debug: bool = False

    @field_validator("attribution_cache_size")
    @classmethod
    def validate_cache_size(cls, v: int) -> int:
        """Validate that the attribution cache holds at least one entry."""
        if v < 1:
            raise ValueError(f"attribution_cache_size must be at least 1, got {v}")
        return v

    @field_validator("git_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate that the backend timeout is positive."""
        if v <= 0:
            raise ValueError(f"git_timeout_seconds must be positive, got {v}")
        return v

    @property
    def debug_log_dir(self) -> Path:
        """Get the debug log directory."""
        return self.data_dir / "logs"
