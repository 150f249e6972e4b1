"""Gathering paths and file-system helpers used while renaming."""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path
from typing import Iterable, Iterator

from .errors import ErrorKind, RenameError
from .modes import RecursiveMode, RunMode, SimpleMode


def _is_visible(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return not name.startswith(".")


def _walk_children(
    directory: Path, depth: int, max_depth: int | None, hidden: bool
) -> Iterator[Path]:
    try:
        with os.scandir(directory) as scan:
            entries = sorted(scan, key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        if not hidden and not _is_visible(entry.name):
            continue
        path = directory / entry.name
        yield path
        try:
            descend = entry.is_dir(follow_symlinks=False)
        except OSError:
            descend = False
        if descend and (max_depth is None or depth < max_depth):
            yield from _walk_children(path, depth + 1, max_depth, hidden)


def _walk(root: Path, max_depth: int | None, hidden: bool) -> Iterator[Path]:
    if not os.path.lexists(root):
        return
    yield root
    if max_depth is not None and max_depth < 1:
        return
    if root.is_dir():
        yield from _walk_children(root, 1, max_depth, hidden)


def get_paths(mode: RunMode) -> list[Path]:
    """Return the paths a run mode selects; empty for modes without paths."""
    if isinstance(mode, RecursiveMode):
        return [
            path
            for root in mode.paths
            for path in _walk(Path(root), mode.max_depth, mode.hidden)
        ]
    if isinstance(mode, SimpleMode):
        return [Path(path) for path in mode.paths]
    return []


def get_unique_filename(path: str | os.PathLike, suffix: str) -> Path:
    """Return a sibling of ``path`` named ``"<name> <suffix>"`` that does not exist yet."""
    path = Path(path)
    if not path.name:
        raise ValueError(f"path has no file name: {path}")
    base_name = f"{path.name} {suffix}"
    unique = path.with_name(base_name)
    index = 0
    while os.path.lexists(unique):
        index += 1
        unique = path.with_name(f"{base_name}.{index}")
    return unique


def create_backup(path: str | os.PathLike) -> Path:
    """Copy ``path`` to a unique backup next to it and return the backup path."""
    path = Path(path)
    backup = get_unique_filename(path, ".rx")
    try:
        shutil.copy(path, backup)
    except OSError as exc:
        raise RenameError(ErrorKind.CREATE_BACKUP, str(path)) from exc
    return backup


def is_same_file(source: str | os.PathLike, target: str | os.PathLike) -> bool:
    """Whether two paths differ only in letter case and point at identical files."""
    source_stat = os.stat(source)
    target_stat = os.stat(target)
    return (
        os.fspath(source).lower() == os.fspath(target).lower()
        and stat.S_IFMT(source_stat.st_mode) == stat.S_IFMT(target_stat.st_mode)
        and source_stat.st_size == target_stat.st_size
        and source_stat.st_mtime_ns == target_stat.st_mtime_ns
    )


def create_symlink(source: str | os.PathLike, symlink_file: str | os.PathLike) -> None:
    """Create ``symlink_file`` pointing at ``source``."""
    try:
        os.symlink(source, symlink_file)
    except OSError as exc:
        raise RenameError(ErrorKind.CREATE_SYMLINK, os.fspath(symlink_file)) from exc


def cleanup_paths(paths: Iterable[Path], keep_dirs: bool) -> list[Path]:
    """Drop missing paths, directories unless kept, and duplicates of one absolute path."""
    unique: dict[str, Path] = {}
    for path in paths:
        path = Path(path)
        if not os.path.lexists(path):
            continue
        if path.is_dir() and not (keep_dirs and path.name not in ("", "..")):
            continue
        unique[os.path.abspath(path)] = path
    return list(unique.values())