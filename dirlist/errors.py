"""Exception taxonomy for listing failures.

Only ``DirectoryUnreadable`` is fatal for a listing target. Per-entry
``MetadataUnavailable`` errors are recovered by the engine.
"""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base class for errors raised while producing a listing."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DirectoryUnreadable(ListingError):
    """Raised when a target is missing, not a directory, or not readable"""

    pass


class MetadataUnavailable(ListingError):
    """Raised when one entry's metadata cannot be read (e.g. removed mid-listing)"""

    pass


def describe_os_error(exc: OSError) -> str:
    """Return the human-readable part of an ``OSError``."""
    return exc.strerror or str(exc)
