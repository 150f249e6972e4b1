"""Console output: plain, coloured or silent."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import RenameError
from .text_diff import DiffKind, calculate_text_diff


class PrinterMode(Enum):
    SILENT = "silent"
    NO_COLOR = "no-color"
    COLOR = "color"


@dataclass(frozen=True)
class _Style:
    """An ANSI text style; a style without codes paints nothing."""

    codes: tuple[str, ...] = ()

    def paint(self, text: object) -> str:
        if not self.codes:
            return str(text)
        return f"\x1b[{';'.join(self.codes)}m{text}\x1b[0m"


_PLAIN = _Style()


@dataclass(frozen=True)
class Colors:
    """Styles used for the different parts of the output."""

    info: _Style = _PLAIN
    warn: _Style = _PLAIN
    error: _Style = _PLAIN
    source: _Style = _PLAIN
    target: _Style = _PLAIN
    highlight: _Style = _PLAIN


def _join(parent: Path, name: str) -> str:
    shown = str(parent)
    if shown in ("", "."):
        return name
    return os.path.join(shown, name)


def _name_of(path: Path) -> str:
    if not path.name:
        raise ValueError(f"path has no file name: {path}")
    return path.name


@dataclass(frozen=True)
class Printer:
    """Writes messages and rename operations according to its mode."""

    colors: Colors
    mode: PrinterMode

    @classmethod
    def color(cls) -> Printer:
        return cls(
            Colors(
                info=_Style(("1",)),
                warn=_Style(("33",)),
                error=_Style(("31",)),
                source=_Style(("38;5;8",)),
                target=_Style(("32",)),
                highlight=_Style(("1", "31")),
            ),
            PrinterMode.COLOR,
        )

    @classmethod
    def no_color(cls) -> Printer:
        return cls(Colors(), PrinterMode.NO_COLOR)

    @classmethod
    def silent(cls) -> Printer:
        return cls(Colors(), PrinterMode.SILENT)

    def print(self, message: str) -> None:
        """Write a line to standard output unless silent."""
        if self.mode is not PrinterMode.SILENT:
            print(message, file=sys.stdout)

    def eprint(self, message: str) -> None:
        """Write a line to standard error unless silent."""
        if self.mode is not PrinterMode.SILENT:
            print(message, file=sys.stderr)

    def print_error(self, error: RenameError) -> None:
        """Report an error on standard error."""
        value = error.value or ""
        self.eprint(
            f"{self.colors.error.paint('Error:')}{error.description()}"
            f"{self.colors.error.paint(value)}"
        )

    def print_operation(self, source: str | os.PathLike, target: str | os.PathLike) -> None:
        """Show a rename, highlighting what changes in the new name."""
        if self.mode is PrinterMode.SILENT:
            return
        source, target = Path(source), Path(target)
        source_name = _name_of(source)
        target_name = _name_of(target)
        if self.mode is PrinterMode.COLOR:
            target_name = self._string_diff(source_name, target_name)
        source_name = self.colors.source.paint(source_name)
        self.print(f"{_join(source.parent, source_name)} -> {_join(target.parent, target_name)}")

    def _string_diff(self, original: str, changed: str) -> str:
        painted = []
        for diff in calculate_text_diff(original, changed):
            if diff.kind is DiffKind.UNCHANGED:
                painted.append(self.colors.target.paint(diff.text))
            elif diff.kind is DiffKind.NEW:
                painted.append(self.colors.highlight.paint(diff.text))
        return "".join(painted)