"""Ordering and line packing for rendered entries.

Sorting is stable for equal keys so enumeration order breaks ties. Compact
grid packing is greedy and ragged-right; an entry is never split.
"""

from __future__ import annotations

import locale
import shutil
from collections.abc import Iterable

from .ansi import visible_width
from .entry import EntryMetadata
from .options import SortKey

DEFAULT_TERMINAL_WIDTH = 80


def terminal_width() -> int:
    """Resolve the current terminal column count, falling back to 80."""
    term = shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24))
    if term.columns <= 0:
        return DEFAULT_TERMINAL_WIDTH
    return term.columns


def _mtime_key(entry: EntryMetadata) -> tuple[bool, float]:
    # Unknown timestamps sort after every known one when reversed.
    if entry.mtime is None:
        return (False, 0.0)
    return (True, entry.mtime)


def _name_key(entry: EntryMetadata) -> tuple[str, str]:
    # Case-folded collation decides; exact text orders names differing only in case.
    return (locale.strxfrm(entry.name.casefold()), locale.strxfrm(entry.name))


def sort_entries(entries: Iterable[EntryMetadata], sort_key: SortKey) -> list[EntryMetadata]:
    """Return ``entries`` ordered by ``sort_key``.

    Names ascend case-insensitively under the active collation locale; time
    and size descend.
    Python's sort is stable in both directions, so ties keep input order.
    """
    if sort_key is SortKey.TIME:
        return sorted(entries, key=_mtime_key, reverse=True)
    if sort_key is SortKey.SIZE:
        return sorted(entries, key=lambda entry: entry.sort_size, reverse=True)
    return sorted(entries, key=_name_key)


def pack_compact(rendered: Iterable[str], width: int) -> str:
    """Greedily pack rendered entries left to right, wrapping at ``width``.

    A newline is inserted before an entry that would overflow a non-empty
    line. Widths are measured with escape sequences stripped.
    """
    out: list[str] = []
    line_width = 0
    for text in rendered:
        text_width = visible_width(text)
        if line_width > 0 and line_width + text_width > width:
            out.append("\n")
            line_width = 0
        out.append(text)
        line_width += text_width
    return "".join(out)


__all__ = [
    "DEFAULT_TERMINAL_WIDTH",
    "terminal_width",
    "sort_entries",
    "pack_compact",
]
