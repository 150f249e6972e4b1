"""Reviewing planned renames in a text editor before applying them."""

from __future__ import annotations

import json
import os
import subprocess
import sys
import tempfile
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable


class Editor(Enum):
    """An external editor, by the command that starts it."""

    VIM = "vim"
    NOTEPAD = "notepad"

    @classmethod
    def from_name(cls, name: str) -> Editor | None:
        """Look up an editor by name, ignoring case."""
        try:
            return cls(name.lower())
        except ValueError:
            return None

    @classmethod
    def default(cls) -> Editor:
        """The editor for the current platform."""
        return cls.NOTEPAD if sys.platform == "win32" else cls.VIM

    def edit_file(self, file_path: str | os.PathLike) -> None:
        """Open ``file_path`` in the editor and wait for it to close."""
        result = subprocess.run([self.value, os.fspath(file_path)])
        if result.returncode != 0:
            raise RuntimeError(
                f"Failed to open editor {self.value}: exit status {result.returncode}"
            )


@dataclass
class RenameOperation:
    """A rename the user can accept by setting ``status``."""

    old_name: str
    new_name: str
    status: bool = False


def _parse_operations(text: str) -> list[RenameOperation]:
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("expected a list of operations")
    operations = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError("operation is not an object")
        old_name, new_name, status = item["old_name"], item["new_name"], item["status"]
        if not (isinstance(old_name, str) and isinstance(new_name, str)):
            raise ValueError("names must be strings")
        if not isinstance(status, bool):
            raise ValueError("status must be a boolean")
        operations.append(RenameOperation(old_name, new_name, status))
    return operations


@dataclass
class InteractiveMode:
    """Lets the user edit and confirm renames as JSON in an editor."""

    editor: Editor = field(default_factory=Editor.default)

    def process_operations(
        self, operations: Iterable[RenameOperation]
    ) -> list[RenameOperation]:
        """Hand the operations to the editor and return what the user saved."""
        with tempfile.NamedTemporaryFile(
            "w", suffix=".json", delete=False, encoding="utf-8"
        ) as handle:
            json.dump([asdict(op) for op in operations], handle, indent=2, ensure_ascii=False)
            path = Path(handle.name)
        try:
            self.editor.edit_file(path)
            text = path.read_text(encoding="utf-8")
        finally:
            path.unlink(missing_ok=True)
        try:
            return _parse_operations(text)
        except (KeyError, TypeError) as exc:
            raise ValueError(f"malformed operations: {exc}") from exc

    def apply_rename_operations(self, operations: Iterable[RenameOperation]) -> None:
        """Perform every operation whose status is set."""
        for op in operations:
            if op.status:
                os.rename(op.old_name, op.new_name)