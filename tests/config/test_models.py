"""Tests for config/models.py module.

Covers:
- LogOutputConfig model
- LoggingConfig model
- RegistryConfig model
- LangPackConfig root model
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from langpack.config.models import (
    LangPackConfig,
    LoggingConfig,
    LogOutputConfig,
    RegistryConfig,
)


class TestLogOutputConfig:
    """Tests for LogOutputConfig model."""

    def test_defaults(self) -> None:
        """Default values."""
        config = LogOutputConfig()
        assert config.format == "console"
        assert config.destination == "stderr"
        assert config.level is None

    def test_stdout_destination(self) -> None:
        """stdout is valid destination."""
        assert LogOutputConfig(destination="stdout").destination == "stdout"

    def test_absolute_path_destination(self) -> None:
        """Absolute path is valid destination."""
        config = LogOutputConfig(destination="/var/log/langpack.log")
        assert config.destination == "/var/log/langpack.log"

    def test_relative_path_fails(self) -> None:
        """Relative path is rejected."""
        with pytest.raises(ValidationError, match="absolute path"):
            LogOutputConfig(destination="logs/app.log")

    def test_invalid_format_fails(self) -> None:
        """Only json and console formats exist."""
        with pytest.raises(ValidationError):
            LogOutputConfig(format="xml")  # type: ignore[arg-type]


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self) -> None:
        """Default values."""
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert len(config.outputs) == 1

    def test_invalid_level_fails(self) -> None:
        """Unknown level is rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")  # type: ignore[arg-type]


class TestRegistryConfig:
    """Tests for RegistryConfig model."""

    def test_defaults(self) -> None:
        """Default values."""
        config = RegistryConfig()
        assert config.languages_dirs == []
        assert config.include_builtin is True
        assert config.include_hidden is False

    def test_expands_user_in_dirs(self) -> None:
        """Home-relative directories are expanded."""
        config = RegistryConfig(languages_dirs=["~/langs"])
        assert config.languages_dirs == [str(Path("~/langs").expanduser())]


class TestLangPackConfig:
    """Tests for LangPackConfig root model."""

    def test_defaults(self) -> None:
        """All sections have defaults."""
        config = LangPackConfig()
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.registry, RegistryConfig)

    def test_nested_dict_input(self) -> None:
        """Sections accept plain dicts."""
        config = LangPackConfig.model_validate(
            {"logging": {"level": "DEBUG"}, "registry": {"include_builtin": False}}
        )
        assert config.logging.level == "DEBUG"
        assert config.registry.include_builtin is False
