"""
Tests for toolkit settings.

Run with: pytest tests/test_config.py -v
"""

import pytest
from pydantic import ValidationError

from outline_notes.config import DEFAULT_CHAPTER_PATTERN, DEFAULT_ITEM_PATTERN, Settings


class TestSettings:
    """Settings defaults, environment overrides and validation."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("NOTES_CHAPTER_PATTERN", raising=False)
        settings = Settings(_env_file=None)

        assert settings.chapter_pattern == DEFAULT_CHAPTER_PATTERN
        assert settings.item_pattern == DEFAULT_ITEM_PATTERN
        assert settings.log_level == "WARNING"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("NOTES_LOG_LEVEL", "debug")
        monkeypatch.setenv("NOTES_NOTES_DIR", "/tmp/notes")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert str(settings.notes_dir) == "/tmp/notes"

    def test_invalid_regex_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, chapter_pattern="(")

    def test_pattern_needs_two_groups(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, item_pattern=r"^### (\d+)$")

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")
