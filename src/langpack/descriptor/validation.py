"""Cross-field checks for descriptors.

Field validators on the models reject anything malformed. The checks here
look at the descriptor as a whole and report problems that still load but
are almost certainly mistakes. They return messages instead of raising so a
caller can report every problem in a file at once.
"""

from __future__ import annotations

from pathlib import Path

from langpack.core.errors import ConfigError
from langpack.descriptor.codec import load_descriptor
from langpack.descriptor.models import LanguageDescriptor

# Block-opening keywords per grammar. Indent rules may only be gated on these.
BLOCK_KEYWORDS: dict[str, frozenset[str]] = {
    "python": frozenset(
        {
            "if",
            "elif",
            "else",
            "for",
            "while",
            "try",
            "except",
            "finally",
            "with",
            "def",
            "class",
            "match",
            "case",
        }
    ),
}


def get_block_keywords(grammar: str | None) -> frozenset[str] | None:
    """Known block keywords for *grammar*, or None if the grammar has no table."""
    if grammar is None:
        return None
    return BLOCK_KEYWORDS.get(grammar)


def check_descriptor(descriptor: LanguageDescriptor) -> list[str]:
    """Return problems found in *descriptor* (empty list if clean)."""
    problems: list[str] = []

    keywords = get_block_keywords(descriptor.grammar)
    if keywords is not None:
        for i, rule in enumerate(descriptor.decrease_indent_patterns):
            unknown = sorted((rule.valid_after or frozenset()) - keywords)
            if unknown:
                problems.append(
                    f"decrease_indent_patterns[{i}]: valid_after has keywords "
                    f"not known for grammar '{descriptor.grammar}': {unknown}"
                )

    first_index: dict[str, int] = {}
    for i, bracket in enumerate(descriptor.brackets):
        if bracket.start in first_index:
            problems.append(
                f"brackets[{i}]: start {bracket.start!r} is shadowed by "
                f"brackets[{first_index[bracket.start]}]"
            )
        else:
            first_index[bracket.start] = i

    if any(ch.isspace() for ch in descriptor.autoclose_before):
        problems.append("autoclose_before: must not contain whitespace")

    if descriptor.decrease_indent_patterns and descriptor.increase_indent_pattern is None:
        problems.append(
            "decrease_indent_patterns: set without increase_indent_pattern"
        )

    return problems


def check_file(path: Path) -> list[str]:
    """Load and check a descriptor file, reporting load errors as problems."""
    try:
        descriptor = load_descriptor(path)
    except ConfigError as e:
        return [str(e)]
    return check_descriptor(descriptor)
