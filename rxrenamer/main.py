"""Command entry point."""

from __future__ import annotations

import sys
from typing import Sequence

from .config import Config
from .errors import ErrorKind, RenameError
from .interactive import RenameOperation
from .renamer import Renamer


def main(argv: Sequence[str] | None = None) -> int:
    """Run the renamer and return the process exit status."""
    try:
        config = Config.from_args(argv)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1

    renamer = Renamer.with_interactive_mode(config) if config.interactive else Renamer(config)

    try:
        operations = renamer.process()
    except RenameError as err:
        config.printer.print_error(err)
        return 1

    if config.interactive:
        if renamer.interactive is not None:
            pending = [
                RenameOperation(str(op.source), str(op.target), False) for op in operations
            ]
            try:
                edited = renamer.interactive.process_operations(pending)
                renamer.interactive.apply_rename_operations(edited)
            except (OSError, RuntimeError, ValueError) as err:
                config.printer.print_error(RenameError(ErrorKind.RENAME, str(err)))
                return 1
    elif config.force:
        try:
            renamer.batch_rename(operations)
        except RenameError as err:
            config.printer.print_error(err)
            return 1
    else:
        for op in operations:
            config.printer.print_operation(op.source, op.target)

    print("File(s) renamed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())