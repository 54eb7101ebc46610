"""Language descriptor models.

A descriptor is the editor-level metadata for one language, read from a
``config.toml`` file:

- File detection (path suffixes, first-line pattern)
- Comment syntax (line comments, block comment)
- Bracket auto-closing rules
- Indentation heuristics (increase pattern, gated decrease rules)
- Debugger adapters

Descriptors are frozen after construction. Field validators enforce the
schema invariants, so an instance that exists is always well formed.
"""

from __future__ import annotations

import re
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


def _compile_pattern(pattern: str) -> str:
    try:
        re.compile(pattern)
    except re.error as e:
        raise ValueError(f"invalid regular expression {pattern!r}: {e}") from e
    return pattern


def _non_empty_strings(values: frozenset[str], what: str) -> frozenset[str]:
    if any(not v for v in values):
        raise ValueError(f"{what} entries must be non-empty strings")
    return values


class BracketRule(BaseModel):
    """An auto-closing delimiter pair.

    ``not_in`` lists lexical scopes (e.g. "string", "comment") in which the
    pair is not auto-closed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    start: str = Field(min_length=1)
    end: str = Field(min_length=1)
    close: bool = True
    newline: bool = True
    surround: bool = True
    not_in: frozenset[str] | None = None

    @field_validator("not_in")
    @classmethod
    def validate_not_in(cls, v: frozenset[str] | None) -> frozenset[str] | None:
        if v is None:
            return v
        return _non_empty_strings(v, "not_in")

    def applies_in(self, scope: str | None) -> bool:
        """True if the rule is active inside *scope* (None = top level)."""
        return scope is None or not self.not_in or scope not in self.not_in


class IndentRule(BaseModel):
    """A decrease-indent pattern gated by the keyword of the enclosing block."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pattern: str = Field(min_length=1)
    valid_after: frozenset[str] | None = None

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        return _compile_pattern(v)

    @field_validator("valid_after")
    @classmethod
    def validate_valid_after(cls, v: frozenset[str] | None) -> frozenset[str] | None:
        if v is None:
            return v
        if not v:
            raise ValueError("valid_after must list at least one keyword when given")
        return _non_empty_strings(v, "valid_after")


class LanguageDescriptor(BaseModel):
    """Editor metadata for one language.

    Attributes:
        name: Display name, also the registry key (e.g. "Python")
        grammar: Grammar identifier, or None for plain text
        path_suffixes: Extensions without a leading dot, or full filenames
        first_line_pattern: Regex tried against line 1 when no suffix matches
        line_comments: Line comment prefixes, preferred first
        block_comment: (start, end) delimiters, if the language has them
        autoclose_before: Characters after which brackets still auto-close
        brackets: Bracket rules, in priority order
        auto_indent_using_last_non_empty_line: Indent from the last non-blank line
        debuggers: Debug adapter names
        increase_indent_pattern: Regex; a match indents the following line
        decrease_indent_patterns: Outdent rules, in priority order
        word_characters: Extra characters treated as part of a word
        tab_size: Preferred indent width
        hard_tabs: Indent with tabs
        hidden: Registered but not offered in language pickers
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    grammar: str | None = None
    path_suffixes: frozenset[str] = frozenset()
    first_line_pattern: str | None = None
    line_comments: tuple[str, ...] = ()
    block_comment: tuple[str, str] | None = None
    autoclose_before: str = ""
    brackets: tuple[BracketRule, ...] = ()
    auto_indent_using_last_non_empty_line: bool = True
    debuggers: frozenset[str] = frozenset()
    increase_indent_pattern: str | None = None
    decrease_indent_patterns: tuple[IndentRule, ...] = ()
    word_characters: frozenset[str] = frozenset()
    tab_size: PositiveInt | None = None
    hard_tabs: bool | None = None
    hidden: bool = False

    @field_validator("path_suffixes", mode="before")
    @classmethod
    def validate_path_suffixes(cls, v: object) -> object:
        if isinstance(v, str):
            raise ValueError("path_suffixes must be a list of strings")
        # Non-string entries are left for the frozenset[str] type check to reject
        if isinstance(v, (list, tuple)) and all(isinstance(s, str) for s in v):
            seen: set[str] = set()
            for suffix in v:
                if suffix in seen:
                    raise ValueError(f"duplicate path suffix {suffix!r}")
                seen.add(suffix)
        return v

    @field_validator("path_suffixes")
    @classmethod
    def validate_suffix_shape(cls, v: frozenset[str]) -> frozenset[str]:
        for suffix in v:
            if not suffix:
                raise ValueError("path suffixes must be non-empty")
            if suffix.startswith("."):
                raise ValueError(f"path suffix {suffix!r} must not start with '.'")
        return v

    @field_validator("first_line_pattern", "increase_indent_pattern")
    @classmethod
    def validate_patterns(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _compile_pattern(v)

    @field_validator("line_comments")
    @classmethod
    def validate_line_comments(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if any(not prefix.strip() for prefix in v):
            raise ValueError("line comment prefixes must contain a non-space character")
        return v

    @field_validator("block_comment")
    @classmethod
    def validate_block_comment(cls, v: tuple[str, str] | None) -> tuple[str, str] | None:
        if v is not None and not all(v):
            raise ValueError("block comment delimiters must be non-empty")
        return v

    @field_validator("debuggers")
    @classmethod
    def validate_debuggers(cls, v: frozenset[str]) -> frozenset[str]:
        return _non_empty_strings(v, "debuggers")

    @field_validator("word_characters")
    @classmethod
    def validate_word_characters(cls, v: frozenset[str]) -> frozenset[str]:
        for ch in v:
            if len(ch) != 1:
                raise ValueError(f"word character {ch!r} must be a single character")
        return v

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def compiled_first_line(self) -> re.Pattern[str] | None:
        if self.first_line_pattern is None:
            return None
        return re.compile(self.first_line_pattern)

    def matching_suffix(self, path: str | PurePath) -> str | None:
        """Return the longest declared suffix that matches *path*, if any.

        The full filename is tried first (a dotfile such as ``.bashrc`` also
        matches ``bashrc``), then compound suffixes from the longest down
        (``a.tar.gz`` tries ``tar.gz`` before ``gz``). Matching is
        case-sensitive.
        """
        p = PurePath(path)
        if p.name in self.path_suffixes:
            return p.name
        if p.name.startswith(".") and p.name[1:] in self.path_suffixes:
            return p.name[1:]
        suffixes = p.suffixes
        for i in range(len(suffixes)):
            candidate = "".join(suffixes[i:])[1:]
            if candidate in self.path_suffixes:
                return candidate
        return None

    def matches_suffix(self, path: str | PurePath) -> bool:
        return self.matching_suffix(path) is not None

    def matches_first_line(self, line: str) -> bool:
        pattern = self.compiled_first_line()
        return pattern is not None and pattern.search(line) is not None

    def bracket_pairs(self) -> tuple[tuple[str, str], ...]:
        return tuple((rule.start, rule.end) for rule in self.brackets)

    def line_comment_prefix(self) -> str | None:
        """Preferred prefix to insert when commenting a line."""
        return self.line_comments[0] if self.line_comments else None
