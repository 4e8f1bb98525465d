"""Render one entry as a listing line.

Fields are assembled in a fixed order and only when enabled: icon, long-form
attributes, color, name, classify indicator, link target, color reset, and
the terminator (newline for long/one-line output, two spaces otherwise).
"""

from __future__ import annotations

import stat
from datetime import datetime

from .classify import RESET, classify
from .entry import EntryMetadata
from .options import DisplayOptions

BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB")
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
GRID_SEPARATOR = "  "


def format_size(size: int, human_readable: bool) -> str:
    """Return ``size`` as a raw byte count or a binary-prefixed string.

    Human-readable values below 1024 keep a ``B`` suffix; larger values use
    one decimal and the largest unit that keeps the number below 1024.
    """
    if not human_readable:
        return str(size)
    if size < 1024:
        return f"{size}B"
    value = float(size)
    for unit in BINARY_UNITS:
        value /= 1024.0
        if value < 1024.0:
            break
    return f"{value:.1f}{unit}"


def format_permissions(mode: int) -> str:
    return stat.filemode(mode)


def format_timestamp(mtime: float) -> str:
    return datetime.fromtimestamp(mtime).strftime(TIMESTAMP_FORMAT)


def _long_fields(entry: EntryMetadata, options: DisplayOptions) -> list[str]:
    """Collect available long-form fields; missing ones are skipped entirely."""
    fields = [format_permissions(entry.mode)]
    if entry.owner is not None:
        fields.append(entry.owner)
    if entry.group is not None:
        fields.append(entry.group)
    if entry.nlink is not None:
        fields.append(f"{entry.nlink:<2d}")
    fields.append(format_size(entry.size, options.human_readable))
    if entry.mtime is not None:
        fields.append(format_timestamp(entry.mtime))
    return fields


def classify_indicator(entry: EntryMetadata) -> str:
    """Return ``/`` for directories, ``*`` for executables, else nothing."""
    if entry.is_dir:
        return "/"
    if entry.executable:
        return "*"
    return ""


def format_entry(entry: EntryMetadata, options: DisplayOptions) -> str:
    """Render ``entry`` according to ``options``."""
    representation = classify(entry)
    parts: list[str] = []

    if options.icons:
        parts.append(f"{representation.icon} ")

    if options.long:
        parts.extend(f"{field} " for field in _long_fields(entry, options))

    if options.color:
        parts.append(representation.color)

    parts.append(entry.name)
    if options.classify:
        parts.append(classify_indicator(entry))

    if representation.symlink_target:
        parts.append(f" -> {representation.symlink_target}")

    if options.color:
        parts.append(RESET)

    parts.append("\n" if options.newline_terminated else GRID_SEPARATOR)
    return "".join(parts)


__all__ = [
    "format_size",
    "format_permissions",
    "format_timestamp",
    "classify_indicator",
    "format_entry",
]
