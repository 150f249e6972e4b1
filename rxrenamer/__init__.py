"""Rename files and directories by regular expression or to ASCII, with dump files to replay or undo."""

__version__ = "0.1.0"