"""Filesystem access capability used by the listing engine.

Every host call the engine makes goes through a ``FileSystem`` object so a
test double can stand in for the real disk.
"""

from __future__ import annotations

import os
from pathlib import Path


class FileSystem:
    """Host filesystem operations needed to enumerate and describe entries."""

    def list_names(self, directory: Path) -> list[str]:
        """Return child names of ``directory`` in enumeration order."""
        with os.scandir(directory) as entries:
            return [entry.name for entry in entries]

    def lstat(self, path: Path) -> os.stat_result:
        """Return metadata for ``path`` itself, never following a final symlink."""
        return os.lstat(path)

    def readlink(self, path: Path) -> str:
        """Return the stored target text of the symlink at ``path``."""
        return os.readlink(path)

    def is_executable(self, path: Path) -> bool:
        """Return whether the current user may execute ``path``."""
        return os.access(path, os.X_OK)


__all__ = ["FileSystem"]
