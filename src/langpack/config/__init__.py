"""Config module exports."""

from langpack.config.loader import load_config
from langpack.config.models import (
    LangPackConfig,
    LoggingConfig,
    LogOutputConfig,
    RegistryConfig,
)

__all__ = [
    "load_config",
    "LangPackConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "RegistryConfig",
]
