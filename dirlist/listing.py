"""Directory listing engine.

Enumerates a location, filters hidden names, sorts, renders each entry, lays
the entries out, and recurses depth-first into true subdirectories. Each
recursive step receives its own copy of the options with a new location.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from .entry import EntryMetadata, read_entry
from .errors import DirectoryUnreadable, MetadataUnavailable, describe_os_error
from .filesystem import FileSystem
from .formatting import format_entry
from .layout import pack_compact, sort_entries, terminal_width
from .options import DisplayOptions

logger = logging.getLogger(__name__)


class DirectoryLister:
    """Render listings through an injected filesystem and width provider."""

    def __init__(
        self,
        filesystem: FileSystem | None = None,
        width_provider: Callable[[], int] | None = None,
    ) -> None:
        self.filesystem = filesystem if filesystem is not None else FileSystem()
        self.width_provider = width_provider if width_provider is not None else terminal_width

    def read_children(self, directory: Path, show_hidden: bool) -> list[EntryMetadata]:
        """Return metadata for visible children of ``directory`` in enumeration order.

        Raises ``DirectoryUnreadable`` when the directory cannot be enumerated.
        Children whose metadata vanished or is unreadable are skipped.
        """
        try:
            names = self.filesystem.list_names(directory)
        except OSError as exc:
            raise DirectoryUnreadable(directory, describe_os_error(exc)) from exc

        children: list[EntryMetadata] = []
        for name in names:
            if not show_hidden and name.startswith("."):
                continue
            try:
                children.append(read_entry(directory / name, self.filesystem))
            except MetadataUnavailable as exc:
                logger.warning("skipping %s: %s", exc.path, exc.reason)
        return children

    def list(self, options: DisplayOptions) -> str:
        """Render the listing described by ``options`` as one string."""
        location = options.target()

        if options.directory_only:
            try:
                entry = read_entry(location, self.filesystem)
            except MetadataUnavailable as exc:
                raise DirectoryUnreadable(location, exc.reason) from exc
            return format_entry(entry, options)

        entries = sort_entries(self.read_children(location, options.show_hidden), options.sort_key)
        rendered = [format_entry(entry, options) for entry in entries]
        if options.newline_terminated:
            listing = "".join(rendered)
        else:
            listing = pack_compact(rendered, self.width_provider())

        if options.recurse:
            listing += self._render_subdirectories(entries, options, listing)
        return listing

    def _render_subdirectories(
        self,
        entries: Iterable[EntryMetadata],
        options: DisplayOptions,
        listing: str,
    ) -> str:
        """Render one ``<path>:`` section per true subdirectory, in sorted order.

        Symlinks are never descended into. A subdirectory that cannot be
        enumerated still gets its heading, with an empty body.
        """
        parts: list[str] = []
        if listing and not listing.endswith("\n"):
            parts.append("\n")
        for entry in entries:
            if not entry.is_dir:
                continue
            parts.append(f"\n{entry.path}:\n")
            try:
                parts.append(self.list(options.with_location(entry.path)))
            except DirectoryUnreadable as exc:
                logger.warning("cannot list %s: %s", exc.path, exc.reason)
        return "".join(parts)


def list_directory(options: DisplayOptions, filesystem: FileSystem | None = None) -> str:
    """Render ``options.location`` (or the working directory) with a default lister."""
    return DirectoryLister(filesystem=filesystem).list(options)


@dataclass(frozen=True)
class TargetListing:
    """Outcome of listing one command-line target."""

    path: Path
    output: str = ""
    error: DirectoryUnreadable | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _terminated(text: str) -> str:
    if text and not text.endswith("\n"):
        return text + "\n"
    return text


def render_targets(
    paths: Iterable[Path],
    options: DisplayOptions,
    lister: DirectoryLister | None = None,
) -> list[TargetListing]:
    """List every path in ``paths``, framing output when there is more than one.

    With several targets each successful listing is preceded by ``<path>:``
    and separated from earlier output by a blank line. A failing target is
    reported in its record and does not stop the remaining targets. An empty
    ``paths`` lists the configured location.
    """
    lister = lister if lister is not None else DirectoryLister()
    targets = [Path(path) for path in paths]
    if not targets:
        targets = [options.target()]
    multiple = len(targets) > 1

    results: list[TargetListing] = []
    emitted = False
    for target in targets:
        try:
            body = lister.list(options.with_location(target))
        except DirectoryUnreadable as exc:
            results.append(TargetListing(path=target, error=exc))
            continue

        output = _terminated(body)
        if multiple:
            output = f"{target}:\n{output}"
            if emitted:
                output = f"\n{output}"
        emitted = True
        results.append(TargetListing(path=target, output=output))
    return results


__all__ = [
    "DirectoryLister",
    "TargetListing",
    "list_directory",
    "render_targets",
]
