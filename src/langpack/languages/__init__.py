"""Descriptors bundled with langpack, one ``<name>/config.toml`` per language."""

from pathlib import Path

BUILTIN_LANGUAGES_DIR = Path(__file__).parent


def builtin_descriptor_paths() -> list[Path]:
    """Paths of the bundled descriptor files, sorted by directory name."""
    return sorted(BUILTIN_LANGUAGES_DIR.glob("*/config.toml"))


__all__ = ["BUILTIN_LANGUAGES_DIR", "builtin_descriptor_paths"]
