"""ANSI-aware text measurement.

Escape sequences are zero-width; layout code measures rendered entries with
:func:`visible_width` so color codes never count toward the terminal width.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def strip_ansi(text: str) -> str:
    """Return ``text`` with every CSI escape sequence removed."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks and newlines consume
    no columns, and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if ch in "\r\n":
        return 0
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def visible_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies once escapes are stripped."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col
