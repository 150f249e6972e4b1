"""Planning and performing renames according to a configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from . import dumpfile, solver
from .config import Config
from .dumpfile import Operation
from .errors import ErrorKind, RenameError
from .fileutils import create_backup, get_paths
from .interactive import InteractiveMode
from .modes import FromFileMode


@dataclass
class Renamer:
    """Works out rename operations and carries them out."""

    config: Config
    interactive: InteractiveMode | None = None

    @classmethod
    def with_interactive_mode(cls, config: Config) -> Renamer:
        """A renamer that lets the user review operations in an editor."""
        return cls(config, InteractiveMode())

    def process(self) -> list[Operation]:
        """Return the operations to perform, dumping them to a file if configured."""
        mode = self.config.run_mode
        if isinstance(mode, FromFileMode):
            operations = dumpfile.read_from_file(Path(mode.path))
            if mode.undo:
                operations = solver.revert_operations(operations)
        else:
            rename_map = self._rename_map(get_paths(mode))
            operations = solver.solve_rename_order(rename_map)

        if self.config.dump:
            dumpfile.dump_to_file(operations)
        return operations

    def batch_rename(self, operations: Iterable[Operation]) -> None:
        """Perform the operations in order, stopping at the first failure."""
        for operation in operations:
            self._rename(operation)

    def _replace_match(self, path: Path) -> Path:
        name = path.name
        if not name:
            raise RenameError(ErrorKind.READ_FILE, "No file name found")
        return path.parent / self.config.replace_mode.replace(name)

    def _rename(self, operation: Operation) -> None:
        printer = self.config.printer
        colors = printer.colors
        if self.config.force:
            if self.config.backup:
                backup = create_backup(operation.source)
                printer.print(
                    f"{colors.info.paint('Info: ')} Backup created - "
                    f"{colors.source.paint(f'{operation.source} -> {backup}')}"
                )
            try:
                os.rename(operation.source, operation.target)
            except OSError as err:
                raise RenameError(
                    ErrorKind.RENAME,
                    f"{operation.source} -> {operation.target}\n{err}",
                ) from err
        printer.print_operation(operation.source, operation.target)

    def _rename_map(self, paths: Iterable[Path]) -> dict[Path, Path]:
        paint = self.config.printer.colors.error.paint
        rename_map: dict[Path, Path] = {}
        conflicts: list[str] = []
        for path in paths:
            target = self._replace_match(path)
            if target == path:
                continue
            previous = rename_map.get(target)
            rename_map[target] = path
            if previous is not None:
                conflicts.append(paint(f"\n{previous}->{target}\n{path}->{target}\n"))
        if conflicts:
            raise RenameError(ErrorKind.SAME_FILENAME, "".join(conflicts))
        return rename_map