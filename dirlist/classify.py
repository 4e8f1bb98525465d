"""Entry classification into icon, color, and link destination.

Checks run in a fixed order: directory, symbolic link, executable, plain
file. The first match wins.
"""

from __future__ import annotations

from dataclasses import dataclass

from .entry import EntryMetadata

BLUE = "\033[0;34m"
YELLOW = "\033[0;33m"
RED = "\033[0;31m"
WHITE = "\033[0;37m"
RESET = "\033[0;0m"

DIRECTORY_ICON = "📁"
LINK_ICON = "🔗"
EXECUTABLE_ICON = "⚙️"
DOCUMENT_ICON = "📄"


@dataclass(frozen=True)
class EntryRepresentation:
    """How one entry is drawn: glyph, color token, and optional link target."""

    icon: str
    color: str
    symlink_target: str | None = None


def classify(entry: EntryMetadata) -> EntryRepresentation:
    """Return the representation for ``entry`` from already-read metadata."""
    if entry.is_dir:
        return EntryRepresentation(icon=DIRECTORY_ICON, color=BLUE)
    if entry.is_symlink:
        return EntryRepresentation(icon=LINK_ICON, color=YELLOW, symlink_target=entry.link_target or None)
    if entry.executable:
        return EntryRepresentation(icon=EXECUTABLE_ICON, color=RED)
    return EntryRepresentation(icon=DOCUMENT_ICON, color=WHITE)


__all__ = [
    "BLUE",
    "YELLOW",
    "RED",
    "WHITE",
    "RESET",
    "DIRECTORY_ICON",
    "LINK_ICON",
    "EXECUTABLE_ICON",
    "DOCUMENT_ICON",
    "EntryRepresentation",
    "classify",
]
