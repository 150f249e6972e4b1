"""Turning command-line arguments into a run configuration."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from .cli import FROM_FILE_SUBCOMMAND, TO_ASCII_SUBCOMMAND, parse_args
from .modes import (
    AsciiReplace,
    FromFileMode,
    RecursiveMode,
    RegexReplace,
    ReplaceMode,
    RunMode,
    SimpleMode,
)
from .output import Printer


class AppCommand(Enum):
    """The command the user invoked."""

    ROOT = ""
    FROM_FILE = FROM_FILE_SUBCOMMAND
    TO_ASCII = TO_ASCII_SUBCOMMAND

    @classmethod
    def from_name(cls, name: str) -> AppCommand:
        """Look up a command by its name; the empty name is the main command."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Non-registred subcommand '{name}'") from None


def detect_output_color() -> Printer:
    """A coloured printer when standard output is a terminal, a plain one otherwise."""
    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is not None and isatty():
        return Printer.color()
    return Printer.no_color()


def _printer_for(silent: bool, color: str) -> Printer:
    if silent:
        return Printer.silent()
    if color == "always":
        return Printer.color()
    if color == "never":
        return Printer.no_color()
    return detect_output_color()


def _run_mode(command: AppCommand, args) -> RunMode:
    if command is AppCommand.FROM_FILE:
        return FromFileMode(path=args.dumpfile or "", undo=bool(args.undo))
    paths = list(args.paths or [])
    if args.recursive:
        return RecursiveMode(paths=paths, max_depth=args.max_depth, hidden=bool(args.hidden))
    return SimpleMode(paths)


def _replace_mode(command: AppCommand, args, printer: Printer) -> ReplaceMode:
    if command is AppCommand.TO_ASCII:
        return AsciiReplace()
    try:
        expression = re.compile(args.expression or "")
    except re.error as err:
        paint = printer.colors.error.paint
        raise ValueError(
            f"{paint('Error: ')} Bad Expression provided\n\n {paint(str(err))}"
        ) from err
    limit = args.replace_limit if args.replace_limit is not None else 0
    return RegexReplace(expression, args.replacement or "", limit)


@dataclass
class Config:
    """Everything a run needs to know."""

    run_mode: RunMode = field(default_factory=SimpleMode)
    replace_mode: ReplaceMode = field(default_factory=AsciiReplace)
    printer: Printer = field(default_factory=Printer.silent)
    force: bool = False
    backup: bool = False
    dump: bool = False
    interactive: bool = False

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> Config:
        """Build a configuration from command-line arguments.

        Raises ValueError when the expression is not a valid regex.
        """
        args = parse_args(argv)
        command = AppCommand.from_name(args.command)
        dump = not args.no_dump if args.force else bool(args.dump)
        printer = _printer_for(args.silent, args.color)
        run_mode = _run_mode(command, args)
        replace_mode = _replace_mode(command, args, printer)
        return cls(
            run_mode=run_mode,
            replace_mode=replace_mode,
            printer=printer,
            force=bool(args.force),
            backup=bool(args.backup),
            dump=dump,
            interactive=bool(args.interactive),
        )