"""Reading and writing descriptor files.

Descriptors are stored as TOML (``<language>/config.toml``). Reading uses
the stdlib ``tomllib``; writing uses ``tomli_w``. Every failure is reported
as a ``ConfigError`` so callers see one error type regardless of whether the
file was unreadable, syntactically broken, or violated the schema.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from langpack.core.errors import ConfigError
from langpack.core.logging import get_logger
from langpack.descriptor.models import LanguageDescriptor

log = get_logger(__name__)


def _validation_error_to_config_error(e: ValidationError, source: str) -> ConfigError:
    err = e.errors()[0]
    field = ".".join(str(loc) for loc in err["loc"])
    if err["type"] == "missing":
        return ConfigError.missing_required(field)
    if err["type"] == "extra_forbidden":
        return ConfigError.invalid_value(field, err.get("input"), f"unknown key in {source}")
    return ConfigError.invalid_value(field, err.get("input"), err["msg"])


def parse_descriptor(text: str, source: str = "<string>") -> LanguageDescriptor:
    """Parse TOML text into a descriptor.

    Raises:
        ConfigError: parse_error on TOML syntax errors (including duplicate
            keys), missing_required / invalid_value on schema violations.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        log.warning("descriptor_parse_failed", source=source, error=str(e))
        raise ConfigError.parse_error(source, str(e)) from e

    try:
        descriptor = LanguageDescriptor.model_validate(data)
    except ValidationError as e:
        log.warning("descriptor_invalid", source=source, errors=e.error_count())
        raise _validation_error_to_config_error(e, source) from e

    log.debug("descriptor_loaded", source=source, language=descriptor.name)
    return descriptor


def load_descriptor(path: Path) -> LanguageDescriptor:
    """Load a descriptor from a ``config.toml`` file."""
    if not path.is_file():
        raise ConfigError.file_not_found(str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    return parse_descriptor(text, source=str(path))


def _plain(value: Any) -> Any:
    """Convert model_dump output to TOML/JSON/YAML friendly values.

    Sets become sorted lists, tuples become lists.
    """
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted(_plain(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def descriptor_to_dict(
    descriptor: LanguageDescriptor,
    *,
    exclude_defaults: bool = False,
) -> dict[str, Any]:
    """Plain dict form of a descriptor, keys in file order.

    With ``exclude_defaults`` the result holds only what a hand-written file
    would need. ``None`` values are dropped when defaults are excluded, since
    every optional field defaults to ``None``.
    """
    data = descriptor.model_dump(
        exclude_defaults=exclude_defaults,
        exclude_none=exclude_defaults,
    )
    result: dict[str, Any] = _plain(data)
    return result


def dump_descriptor(descriptor: LanguageDescriptor) -> str:
    """Serialize a descriptor to TOML.

    Fields at their default value are omitted, so
    ``parse_descriptor(dump_descriptor(d)) == d``.
    """
    return tomli_w.dumps(descriptor_to_dict(descriptor, exclude_defaults=True))


def write_descriptor(path: Path, descriptor: LanguageDescriptor) -> None:
    """Write a descriptor to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_descriptor(descriptor), encoding="utf-8")
    log.info("descriptor_written", path=str(path), language=descriptor.name)
