"""Language registry.

Holds loaded descriptors keyed by name and answers "which language is this
file?" the way an editor does on open:

1. Path suffix match. The longest matching suffix wins (``tar.gz`` beats
   ``gz``); among equal lengths the language registered last wins, so user
   descriptors override bundled ones.
2. First-line pattern, only when no suffix matched, tried in registration
   order.

Names are case-insensitive keys but keep their original spelling.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path, PurePath

from langpack.config.models import RegistryConfig
from langpack.core.errors import ConfigError
from langpack.core.logging import get_logger
from langpack.descriptor.codec import load_descriptor
from langpack.descriptor.models import LanguageDescriptor
from langpack.languages import builtin_descriptor_paths

log = get_logger(__name__)


class LanguageRegistry:
    """Registry of language descriptors."""

    def __init__(self, descriptors: Iterable[LanguageDescriptor] = ()) -> None:
        self._by_key: dict[str, LanguageDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: LanguageDescriptor, *, source: str | None = None) -> None:
        key = descriptor.name.casefold()
        if key in self._by_key:
            raise ConfigError.duplicate_language(descriptor.name, source)
        self._by_key[key] = descriptor
        log.debug(
            "language_registered",
            language=descriptor.name,
            suffixes=sorted(descriptor.path_suffixes),
            source=source,
        )

    def unregister(self, name: str) -> LanguageDescriptor | None:
        return self._by_key.pop(name.casefold(), None)

    def get(self, name: str) -> LanguageDescriptor | None:
        return self._by_key.get(name.casefold())

    def names(self) -> list[str]:
        return [d.name for d in self._by_key.values()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._by_key

    def __iter__(self) -> Iterator[LanguageDescriptor]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)

    # -------------------------------------------------------------------------
    # Detection
    # -------------------------------------------------------------------------

    def for_suffix(self, path: str | PurePath) -> LanguageDescriptor | None:
        best: LanguageDescriptor | None = None
        best_len = -1
        for descriptor in self._by_key.values():
            matched = descriptor.matching_suffix(path)
            if matched is not None and len(matched) >= best_len:
                best, best_len = descriptor, len(matched)
        return best

    def for_first_line(self, line: str) -> LanguageDescriptor | None:
        for descriptor in self._by_key.values():
            if descriptor.matches_first_line(line):
                return descriptor
        return None

    def for_path(
        self,
        path: str | PurePath,
        first_line: str | None = None,
    ) -> LanguageDescriptor | None:
        """Detect the language of *path*, falling back to its first line."""
        if (descriptor := self.for_suffix(path)) is not None:
            return descriptor
        if first_line is not None:
            return self.for_first_line(first_line)
        return None

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load_file(self, path: Path) -> LanguageDescriptor:
        descriptor = load_descriptor(path)
        self.register(descriptor, source=str(path))
        return descriptor

    def load_directory(self, root: Path) -> list[LanguageDescriptor]:
        """Register every ``<name>/config.toml`` under *root*, sorted by name."""
        if not root.is_dir():
            raise ConfigError.file_not_found(str(root))
        loaded = [self.load_file(path) for path in sorted(root.glob("*/config.toml"))]
        log.info("languages_loaded", root=str(root), count=len(loaded))
        return loaded


def load_builtin_registry() -> LanguageRegistry:
    """Registry holding only the descriptors bundled with langpack."""
    registry = LanguageRegistry()
    for path in builtin_descriptor_paths():
        registry.load_file(path)
    return registry


def build_registry(config: RegistryConfig | None = None) -> LanguageRegistry:
    """Registry built from configuration: bundled first, then extra directories."""
    config = config or RegistryConfig()
    registry = load_builtin_registry() if config.include_builtin else LanguageRegistry()
    for directory in config.languages_dirs:
        registry.load_directory(Path(directory))
    return registry
