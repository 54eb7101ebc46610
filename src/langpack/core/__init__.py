"""Core module exports."""

from langpack.core.errors import (
    ConfigError,
    ErrorCode,
    LangPackError,
)
from langpack.core.logging import (
    configure_logging,
    get_log_file_path,
    get_logger,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "LangPackError",
    # Logging
    "configure_logging",
    "get_log_file_path",
    "get_logger",
]
