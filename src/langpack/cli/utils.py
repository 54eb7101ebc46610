"""CLI utilities."""

from pathlib import Path

import click

from langpack.config.models import LangPackConfig
from langpack.core.errors import ConfigError
from langpack.core.logging import get_log_file_path
from langpack.registry import LanguageRegistry, build_registry


def config_error_exception(error: ConfigError) -> click.ClickException:
    """Turn a ConfigError into a CLI error, pointing at the log file if one is configured."""
    message = str(error)
    if (log_path := get_log_file_path()) is not None:
        message += f"\nDetails in log: {log_path}"
    return click.ClickException(message)


def get_registry(ctx: click.Context) -> LanguageRegistry:
    """Build the registry for this invocation.

    Uses the loaded configuration plus any ``--languages-dir`` options given
    on the command line, which are registered last.

    Raises:
        click.ClickException: If any descriptor fails to load
    """
    obj = ctx.find_root().obj or {}
    config: LangPackConfig = obj.get("config") or LangPackConfig()
    extra_dirs: list[Path] = obj.get("languages_dirs", [])

    registry_config = config.registry.model_copy(
        update={"languages_dirs": [*config.registry.languages_dirs, *map(str, extra_dirs)]}
    )
    try:
        return build_registry(registry_config)
    except ConfigError as e:
        raise config_error_exception(e) from e


def expand_descriptor_paths(paths: tuple[Path, ...]) -> list[Path]:
    """Expand directories into the descriptor files they hold.

    A directory containing ``config.toml`` stands for that file; any other
    directory stands for every ``<name>/config.toml`` beneath it.
    """
    result: list[Path] = []
    for path in paths:
        if path.is_dir():
            if (path / "config.toml").is_file():
                result.append(path / "config.toml")
            else:
                result.extend(sorted(path.glob("*/config.toml")))
        else:
            result.append(path)
    return result


def read_first_line(path: Path) -> str | None:
    """First line of *path* without its newline, or None if unreadable."""
    try:
        with path.open(encoding="utf-8", errors="replace") as f:
            return f.readline().rstrip("\r\n")
    except OSError:
        return None
