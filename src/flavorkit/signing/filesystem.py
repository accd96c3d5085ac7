"""Filesystem access used during signing resolution.

Resolution only needs two read operations, so they are injected as a small
capability instead of reaching for the real filesystem directly.
"""

import typing as t
from pathlib import Path


class FileSystem(t.Protocol):
    """Read-only filesystem capability."""

    def is_file(self, path: Path) -> bool:
        """Whether ``path`` exists and is a regular file."""
        ...

    def read_text(self, path: Path, encoding: str) -> str:
        """Read the whole file decoded with ``encoding``."""
        ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def read_text(self, path: Path, encoding: str) -> str:
        return path.read_text(encoding=encoding)
