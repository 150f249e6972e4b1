"""How paths are gathered (run modes) and how names are rewritten (replace modes)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

from unidecode import unidecode


@dataclass
class SimpleMode:
    """Rename exactly the given paths."""

    paths: list[str] = field(default_factory=list)


@dataclass
class RecursiveMode:
    """Walk the given paths recursively."""

    paths: list[str] = field(default_factory=list)
    max_depth: int | None = None
    hidden: bool = False


@dataclass
class FromFileMode:
    """Read operations from a dump file, optionally undoing them."""

    path: str
    undo: bool = False


RunMode = Union[SimpleMode, RecursiveMode, FromFileMode]


_REFERENCE = re.compile(r"\$(?:(\$)|\{([^}]+)\}|([_0-9A-Za-z]+))")


def _expand(template: str, match: re.Match) -> str:
    """Expand ``$1``, ``$name``, ``${name}`` and ``$$`` in a replacement."""

    def reference(ref: re.Match) -> str:
        if ref.group(1):
            return "$"
        name = ref.group(2) or ref.group(3)
        key: int | str = int(name) if name.isascii() and name.isdigit() else name
        try:
            value = match.group(key)
        except IndexError:
            return ""
        return value or ""

    return _REFERENCE.sub(reference, template)


@dataclass
class RegexReplace:
    """Replace up to ``limit`` matches of a regex; a limit of 0 means all."""

    expression: re.Pattern
    replacement: str
    limit: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.expression, str):
            self.expression = re.compile(self.expression)
        if self.limit < 0:
            raise ValueError("limit must not be negative")

    def replace(self, name: str) -> str:
        """Return ``name`` with matches replaced."""
        return self.expression.sub(
            lambda match: _expand(self.replacement, match), name, count=self.limit
        )


@dataclass
class AsciiReplace:
    """Replace non-ASCII characters with an ASCII representation."""

    def replace(self, name: str) -> str:
        """Return the ASCII transliteration of ``name``."""
        return unidecode(name)


ReplaceMode = Union[RegexReplace, AsciiReplace]