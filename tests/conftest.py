"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of langpack modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("langpack"):
        del sys.modules[module_name]


MINIMAL_DESCRIPTOR = """\
name = "Toy"
grammar = "toy"
path_suffixes = ["toy"]
line_comments = ["// "]
brackets = [
    { start = "{", end = "}", close = true, newline = true },
]
"""


@pytest.fixture
def minimal_descriptor_text() -> str:
    return MINIMAL_DESCRIPTOR


@pytest.fixture
def languages_dir(tmp_path: Path) -> Path:
    """A directory holding one user descriptor, toy/config.toml."""
    root = tmp_path / "languages"
    (root / "toy").mkdir(parents=True)
    (root / "toy" / "config.toml").write_text(MINIMAL_DESCRIPTOR)
    return root
