"""Error kinds raised while planning or performing renames."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """The kind of failure; each value is its human readable description."""

    CREATE_BACKUP = "Cannot create a backup of"
    CREATE_FILE = "Cannot create file"
    CREATE_SYMLINK = "Cannot create symlink"
    EXISTING_PATH = "Conflict with existing path"
    JSON_PARSE = "Cannot parse JSON  file"
    READ_FILE = "Cannot open/read file"
    RENAME = "Cannot Rename"
    SAME_FILENAME = "Files will have the same name"
    SOLVE_ORDER = "Cannot solve sorting problem"


class RenameError(Exception):
    """An error of a given kind, with an optional value naming what failed."""

    def __init__(self, kind: ErrorKind, value: str | None = None) -> None:
        self.kind = kind
        self.value = value
        super().__init__(self._message())

    def description(self) -> str:
        """Return the human readable description of the error kind."""
        return self.kind.value

    def _message(self) -> str:
        if self.value:
            return f"{self.description()} {self.value}"
        return self.description()

    def __str__(self) -> str:
        return self._message()