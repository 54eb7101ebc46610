"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (LANGPACK__SECTION__KEY)
3. Repo YAML (.langpack/config.yaml)
4. Global YAML (~/.config/langpack/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    LANGPACK__<SECTION>__<KEY>=<VALUE>

Examples:
    LANGPACK__LOGGING__LEVEL=DEBUG
    LANGPACK__REGISTRY__INCLUDE_BUILTIN=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        LANGPACK__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO reports every descriptor load.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RegistryConfig(BaseModel):
    """Language registry configuration.

    Env vars:
        LANGPACK__REGISTRY__INCLUDE_BUILTIN: Register bundled descriptors
        LANGPACK__REGISTRY__INCLUDE_HIDDEN: Show hidden languages in listings
    """

    languages_dirs: list[str] = Field(
        default_factory=list,
        description="Extra directories holding <name>/config.toml descriptors. "
        "Registered after the bundled descriptors, in the order given.",
    )
    include_builtin: bool = Field(
        default=True,
        description="Register the descriptors shipped with langpack.",
    )
    include_hidden: bool = Field(
        default=False,
        description="List languages marked hidden = true.",
    )

    @field_validator("languages_dirs")
    @classmethod
    def expand_dirs(cls, v: list[str]) -> list[str]:
        return [str(Path(d).expanduser()) for d in v]


class LangPackConfig(BaseModel):
    """Root configuration for langpack.

    All settings can be configured via:
    1. Environment variables: LANGPACK__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
