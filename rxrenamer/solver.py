"""Ordering rename operations so that no rename clobbers another."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Mapping

from .dumpfile import Operation
from .errors import ErrorKind, RenameError
from .fileutils import is_same_file


def _depth(path: Path) -> int:
    return len(path.parts)


def solve_rename_order(rename_map: Mapping[Path, Path]) -> list[Operation]:
    """Turn a target-to-source map into operations in a safe order.

    Deeper paths go first; within a level, targets that do not exist yet come
    before targets that are themselves about to be renamed away.
    """
    renames = {Path(target): Path(source) for target, source in rename_map.items()}
    levels = sorted({_depth(source) for source in renames.values()}, reverse=True)

    order: list[Path] = []
    for level in levels:
        targets = [target for target in renames if _depth(target) == level]
        existing = _existing_targets(targets, renames)
        order.extend(target for target in targets if target not in existing)
        order.extend(_sort_existing_targets(renames, existing))

    return [Operation(renames[target], target) for target in order]


def revert_operations(operations: Iterable[Operation]) -> list[Operation]:
    """Return the operations that undo ``operations``, in reverse order."""
    return [Operation(op.target, op.source) for op in reversed(list(operations))]


def _existing_targets(targets: list[Path], renames: dict[Path, Path]) -> list[Path]:
    sources = set(renames.values())
    existing: list[Path] = []
    for target in targets:
        if not os.path.lexists(target):
            continue
        if target not in sources:
            source = renames[target]
            if is_same_file(source, target):
                continue
            raise RenameError(ErrorKind.EXISTING_PATH, f"{source} -> {target}")
        existing.append(target)
    return existing


def _sort_existing_targets(renames: dict[Path, Path], existing: list[Path]) -> list[Path]:
    pending = list(existing)
    ordered: list[Path] = []
    while pending:
        sources = {os.path.abspath(renames[target]) for target in pending}
        index = next(
            (i for i, target in enumerate(pending) if os.path.abspath(target) not in sources),
            None,
        )
        if index is None:
            raise RenameError(ErrorKind.SOLVE_ORDER)
        pending[index], pending[-1] = pending[-1], pending[index]
        ordered.append(pending.pop())
    return ordered