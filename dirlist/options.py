"""Immutable display options for one listing invocation.

A ``DisplayOptions`` value is never mutated during traversal; descending into
a subdirectory produces a copy that differs only in ``location``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path


class SortKey(str, Enum):
    """Ordering applied to the children of a listed directory."""

    NAME = "name"
    TIME = "time"
    SIZE = "size"

    @classmethod
    def parse(cls, value: object) -> "SortKey | None":
        """Return the matching key for ``value`` or ``None`` when unknown."""
        if isinstance(value, SortKey):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


# Persisted/CLI flag name -> DisplayOptions field name.
BOOLEAN_FLAG_FIELDS: dict[str, str] = {
    "all": "show_hidden",
    "long": "long",
    "recurse": "recurse",
    "color": "color",
    "icons": "icons",
    "one_line": "one_line",
    "human_readable": "human_readable",
    "directory": "directory_only",
    "classify": "classify",
}


@dataclass(frozen=True)
class DisplayOptions:
    """Display preferences plus the location being listed."""

    location: Path | None = None
    show_hidden: bool = False
    long: bool = False
    recurse: bool = False
    color: bool = False
    icons: bool = False
    one_line: bool = False
    human_readable: bool = False
    directory_only: bool = False
    classify: bool = False
    sort_key: SortKey = SortKey.NAME

    @property
    def newline_terminated(self) -> bool:
        """Whether each rendered entry ends with a newline instead of padding."""
        return self.long or self.one_line

    def target(self) -> Path:
        """Return the configured location, defaulting to the working directory."""
        if self.location is None:
            return Path(os.curdir)
        return Path(self.location)

    def with_location(self, location: Path) -> "DisplayOptions":
        """Return a copy listing ``location`` with every other field unchanged."""
        return replace(self, location=Path(location))

    @classmethod
    def from_mapping(cls, values: Mapping[str, object], location: Path | None = None) -> "DisplayOptions":
        """Build options from flag-name keys (``all``, ``long``, ``sort`` ...).

        Non-boolean flag values and unknown sort names are ignored.
        """
        fields: dict[str, object] = {}
        for flag, field_name in BOOLEAN_FLAG_FIELDS.items():
            value = values.get(flag)
            if isinstance(value, bool):
                fields[field_name] = value
        sort_key = SortKey.parse(values.get("sort"))
        if sort_key is not None:
            fields["sort_key"] = sort_key
        return cls(location=location, **fields)
