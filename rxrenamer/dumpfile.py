"""Saving rename operations to a JSON dump file and reading them back."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable

from .errors import ErrorKind, RenameError


@dataclass(frozen=True)
class Operation:
    """A single rename from ``source`` to ``target``."""

    source: Path
    target: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", Path(self.source))
        object.__setattr__(self, "target", Path(self.target))


def dump_to_file(operations: Iterable[Operation]) -> Path:
    """Write operations to ``rx-<timestamp>.json`` in the working directory."""
    now = datetime.now()
    dump = {
        "date": now.strftime("%Y-%m-%d %H:%M:%S"),
        "operations": [
            {"source": os.fspath(op.source), "target": os.fspath(op.target)}
            for op in operations
        ],
    }
    filename = f"rx-{now.strftime('%Y-%m-%d_%H%M%S')}.json"
    try:
        handle = open(filename, "w", encoding="utf-8")
    except OSError as exc:
        raise RenameError(ErrorKind.CREATE_FILE, filename) from exc
    with handle:
        try:
            json.dump(dump, handle, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise RenameError(ErrorKind.JSON_PARSE, filename) from exc
    return Path(filename)


def _parse_operation(item: object) -> Operation:
    if not isinstance(item, dict):
        raise ValueError("operation is not an object")
    source, target = item["source"], item["target"]
    if not isinstance(source, str) or not isinstance(target, str):
        raise ValueError("paths must be strings")
    return Operation(Path(source), Path(target))


def read_from_file(filepath: str | os.PathLike) -> list[Operation]:
    """Read the operations stored in a dump file."""
    shown = os.fspath(filepath)
    try:
        with open(filepath, "r", encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise RenameError(ErrorKind.READ_FILE, shown) from exc
    except UnicodeDecodeError as exc:
        raise RenameError(ErrorKind.JSON_PARSE, shown) from exc
    try:
        dump = json.loads(text)
        if not isinstance(dump, dict) or not isinstance(dump["date"], str):
            raise ValueError("malformed dump")
        entries = dump["operations"]
        if not isinstance(entries, list):
            raise ValueError("operations must be a list")
        return [_parse_operation(item) for item in entries]
    except (ValueError, KeyError, TypeError) as exc:
        raise RenameError(ErrorKind.JSON_PARSE, shown) from exc