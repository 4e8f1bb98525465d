"""Per-entry metadata snapshot read once from the filesystem.

Symbolic links are described by their own ``lstat`` result, so a broken link
is still a readable entry. Fields the platform cannot provide stay ``None``
and are omitted by the formatter.
"""

from __future__ import annotations

import logging
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import MetadataUnavailable, describe_os_error
from .filesystem import FileSystem

try:
    import grp
    import pwd
except ImportError:  # pragma: no cover - non-POSIX hosts have no owner names
    grp = None
    pwd = None

logger = logging.getLogger(__name__)


class EntryKind(str, Enum):
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    FILE = "file"


@dataclass(frozen=True)
class EntryMetadata:
    """Snapshot of one entry's attributes as observed at read time."""

    path: Path
    name: str
    kind: EntryKind
    mode: int
    size: int
    mtime: float | None
    nlink: int | None = None
    owner: str | None = None
    group: str | None = None
    executable: bool = False
    link_target: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK

    @property
    def sort_size(self) -> int:
        """Size used for ordering; directories count as zero."""
        if self.is_dir:
            return 0
        return self.size


def display_name(path: Path) -> str:
    """Return the base name of ``path``, or the path text for ``.`` and ``/``."""
    return path.name or str(path)


def _owner_name(uid: int) -> str | None:
    if pwd is None:
        return None
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        logger.debug("no user name for uid %d", uid)
        return str(uid)


def _group_name(gid: int) -> str | None:
    if grp is None:
        return None
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        logger.debug("no group name for gid %d", gid)
        return str(gid)


def _entry_kind(mode: int) -> EntryKind:
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    return EntryKind.FILE


def read_entry(path: Path, filesystem: FileSystem) -> EntryMetadata:
    """Read ``path``'s own metadata, raising ``MetadataUnavailable`` on failure.

    A symlink's target text is attached when ``readlink`` succeeds; an
    unreadable target leaves ``link_target`` empty rather than failing.
    """
    try:
        st = filesystem.lstat(path)
    except OSError as exc:
        raise MetadataUnavailable(path, describe_os_error(exc)) from exc

    kind = _entry_kind(st.st_mode)
    link_target: str | None = None
    executable = False
    if kind is EntryKind.SYMLINK:
        try:
            link_target = filesystem.readlink(path)
        except OSError as exc:
            logger.debug("cannot resolve link %s: %s", path, describe_os_error(exc))
    elif kind is EntryKind.FILE:
        executable = filesystem.is_executable(path)

    return EntryMetadata(
        path=path,
        name=display_name(path),
        kind=kind,
        mode=st.st_mode,
        size=int(st.st_size),
        mtime=float(st.st_mtime),
        nlink=int(st.st_nlink),
        owner=_owner_name(st.st_uid),
        group=_group_name(st.st_gid),
        executable=executable,
        link_target=link_target,
    )


__all__ = [
    "EntryKind",
    "EntryMetadata",
    "display_name",
    "read_entry",
]
