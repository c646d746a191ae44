"""
Toolkit configuration and environment settings.
"""

import re
from pathlib import Path
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

# "## Chapter 2: Creating and Destroying Objects", "# Chapter 2.Intro", "## 2. ..."
DEFAULT_CHAPTER_PATTERN = r'^#{1,2}\s+(?:(?i:chapter)\s+)?(\d+)(?:\s*[.:\-–—]|\s|$)\s*(.*?)(?:\s*(?<!\S)#+)?\s*$'

# "### Item 1: Consider static factory methods ...", "### Item 2:Equals", "### 1. ..."
DEFAULT_ITEM_PATTERN = r'^###\s+(?:(?i:item)\s+)?(\d+)(?:\s*[.:\-–—]|\s|$)\s*(.*?)(?:\s*(?<!\S)#+)?\s*$'


class Settings(BaseSettings):
    """Toolkit settings loaded from environment variables (prefix NOTES_)."""

    # Heading patterns: group 1 is the number, group 2 the (optional) title
    chapter_pattern: str = DEFAULT_CHAPTER_PATTERN
    item_pattern: str = DEFAULT_ITEM_PATTERN

    # Default location of notes files for directory-level commands
    notes_dir: Path = Path("./notes")

    log_level: str = "WARNING"

    @field_validator("chapter_pattern", "item_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            compiled = re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid heading pattern {value!r}: {e}") from e
        if compiled.groups < 2:
            raise ValueError(
                f"heading pattern {value!r} needs two groups (number, title)"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return value

    class Config:
        env_prefix = "NOTES_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached toolkit settings."""
    return Settings()
