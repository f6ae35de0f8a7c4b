"""Exceptions raised by the viewer."""

from pathlib import Path


class FileAccessError(Exception):
    """The input file is missing, is not a regular file, or cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        """Store the offending path and a short reason."""
        super().__init__(f"can't read file {path}: {reason}")
        self.path = path
        self.reason = reason
