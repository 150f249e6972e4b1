"""Command-line parsing."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Sequence

FROM_FILE_SUBCOMMAND = "from-file"
TO_ASCII_SUBCOMMAND = "to-ascii"

_PROG = "rx-renamer"
_VERSION = "0.1.0"
_ABOUT = "Rename your files and directories"

_DEFAULTS = {
    "expression": None,
    "replacement": None,
    "replace_limit": None,
    "paths": [],
    "include_dirs": False,
    "recursive": False,
    "max_depth": None,
    "hidden": False,
    "dumpfile": None,
    "undo": False,
}


def _integer(value: str) -> int:
    if not re.fullmatch(r"\+?[0-9]+", value):
        raise argparse.ArgumentTypeError("Value provided is not an integer")
    return int(value)


def _utf8(value: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise argparse.ArgumentTypeError("Value provided is not a valid UTF-8 string") from None
    return value


def _add_common(parser: argparse.ArgumentParser) -> None:
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-n", "--dry-run", action="store_true",
        help="Only show what would be done (default mode)",
    )
    mode.add_argument("-f", "--force", action="store_true", help="Make actual changes to files")
    parser.add_argument(
        "-b", "--backup", action="store_true", help="Generate file backups before renaming"
    )
    parser.add_argument("-s", "--silent", action="store_true", help="Do not print any information")
    parser.add_argument(
        "--color", choices=("always", "auto", "never"), default="auto",
        help="Set color output mode",
    )
    dump = parser.add_mutually_exclusive_group()
    dump.add_argument(
        "--dump", action="store_true",
        help="Force dumping operations into a file even in dry-run mode",
    )
    dump.add_argument("--no-dump", action="store_true", help="Do not dump operations into a file")
    parser.add_argument(
        "-i", "--interactive", action="store_true",
        help="Rename file(s) interactively using an Editor",
    )


def _add_path_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("paths", nargs="+", type=_utf8, metavar="PATH(S)", help="Target paths")
    parser.add_argument(
        "-D", "--include-dirs", action="store_true", help="Rename matching directories"
    )
    parser.add_argument("-r", "--recursive", action="store_true", help="Recursive mode")
    parser.add_argument(
        "-d", "--max-depth", type=_integer, metavar="LEVEL",
        help="Set max depth in recursive mode",
    )
    parser.add_argument(
        "-x", "--hidden", action="store_true", help="Include hidden files and directories"
    )


def create_parser() -> argparse.ArgumentParser:
    """Build the parser for the main command."""
    parser = argparse.ArgumentParser(
        prog=_PROG,
        description=_ABOUT,
        epilog=(
            f"subcommands:\n  {FROM_FILE_SUBCOMMAND}  Read operations from a dump file\n"
            f"  {TO_ASCII_SUBCOMMAND}   Replace file name UTF-8 chars with ASCII chars "
            "representation."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-V", "--version", action="version", version=f"{_PROG} {_VERSION}")
    parser.add_argument(
        "expression", type=_utf8, metavar="EXPRESSION", help="Expression to match (can be a regex)"
    )
    parser.add_argument(
        "replacement", type=_utf8, metavar="REPLACEMENT", help="Expression replacement"
    )
    parser.add_argument(
        "-l", "--replace-limit", type=_integer, default=1, metavar="LIMIT",
        help="Limit of replacements, all matches if set to 0",
    )
    _add_common(parser)
    _add_path_args(parser)
    return parser


def _from_file_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{_PROG} {FROM_FILE_SUBCOMMAND}", description="Read operations from a dump file"
    )
    _add_common(parser)
    parser.add_argument("dumpfile", type=_utf8, metavar="DUMPFILE")
    parser.add_argument(
        "-u", "--undo", action="store_true", help="Undo the operations from the dump file"
    )
    return parser


def _to_ascii_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"{_PROG} {TO_ASCII_SUBCOMMAND}",
        description="Replace file name UTF-8 chars with ASCII chars representation.",
    )
    _add_common(parser)
    _add_path_args(parser)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line; ``command`` is empty for the main command."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == FROM_FILE_SUBCOMMAND:
        parser, command, rest = _from_file_parser(), FROM_FILE_SUBCOMMAND, args[1:]
    elif args and args[0] == TO_ASCII_SUBCOMMAND:
        parser, command, rest = _to_ascii_parser(), TO_ASCII_SUBCOMMAND, args[1:]
    else:
        parser, command, rest = create_parser(), "", args

    namespace = parser.parse_args(rest)
    if getattr(namespace, "max_depth", None) is not None and not namespace.recursive:
        parser.error("argument -d/--max-depth requires -r/--recursive")
    if getattr(namespace, "hidden", False) and not namespace.recursive:
        parser.error("argument -x/--hidden requires -r/--recursive")

    for key, value in _DEFAULTS.items():
        if not hasattr(namespace, key):
            setattr(namespace, key, list(value) if isinstance(value, list) else value)
    namespace.command = command
    return namespace