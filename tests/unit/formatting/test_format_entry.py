"""Attribute formatter tests.

Checks field order, optional field omission, color framing, and the
newline-versus-padding terminator rule.
"""

from __future__ import annotations

import stat
import unittest
from datetime import datetime
from pathlib import Path

from dirlist.classify import BLUE, RESET, WHITE, YELLOW
from dirlist.entry import EntryKind, EntryMetadata
from dirlist.formatting import format_entry, format_permissions, format_size, format_timestamp
from dirlist.options import DisplayOptions

MTIME = datetime(2024, 1, 2, 3, 4).timestamp()


def _file(name: str = "a.txt", **overrides) -> EntryMetadata:
    values = dict(
        path=Path("root") / name,
        name=name,
        kind=EntryKind.FILE,
        mode=stat.S_IFREG | 0o644,
        size=10,
        mtime=MTIME,
        nlink=1,
        owner="alice",
        group="staff",
    )
    values.update(overrides)
    return EntryMetadata(**values)


class FormatSizeTests(unittest.TestCase):
    def test_raw_byte_count(self) -> None:
        self.assertEqual(format_size(1536, human_readable=False), "1536")

    def test_human_readable_binary_prefixes(self) -> None:
        self.assertEqual(format_size(10, human_readable=True), "10B")
        self.assertEqual(format_size(1023, human_readable=True), "1023B")
        self.assertEqual(format_size(1536, human_readable=True), "1.5KiB")
        self.assertEqual(format_size(1024 * 1024, human_readable=True), "1.0MiB")
        self.assertEqual(format_size(5 * 1024**3, human_readable=True), "5.0GiB")


class FormatFieldTests(unittest.TestCase):
    def test_permissions_are_symbolic(self) -> None:
        self.assertEqual(format_permissions(stat.S_IFREG | 0o644), "-rw-r--r--")
        self.assertEqual(format_permissions(stat.S_IFDIR | 0o755), "drwxr-xr-x")

    def test_timestamp_format(self) -> None:
        self.assertEqual(format_timestamp(MTIME), "2024-01-02 03:04")


class FormatEntryTests(unittest.TestCase):
    def test_grid_mode_pads_with_two_spaces(self) -> None:
        self.assertEqual(format_entry(_file(), DisplayOptions()), "a.txt  ")

    def test_one_line_mode_ends_with_newline(self) -> None:
        self.assertEqual(format_entry(_file(), DisplayOptions(one_line=True)), "a.txt\n")

    def test_long_form_field_order(self) -> None:
        rendered = format_entry(_file(), DisplayOptions(long=True))
        self.assertEqual(rendered, "-rw-r--r-- alice staff 1  10 2024-01-02 03:04 a.txt\n")

    def test_long_form_human_readable_size(self) -> None:
        rendered = format_entry(_file(size=2048), DisplayOptions(long=True, human_readable=True))
        self.assertIn(" 2.0KiB ", rendered)

    def test_long_form_omits_unavailable_fields(self) -> None:
        rendered = format_entry(_file(owner=None, group=None, nlink=None), DisplayOptions(long=True))
        self.assertEqual(rendered, "-rw-r--r-- 10 2024-01-02 03:04 a.txt\n")

    def test_icon_precedes_long_fields(self) -> None:
        rendered = format_entry(_file(), DisplayOptions(long=True, icons=True))
        self.assertTrue(rendered.startswith("📄 -rw-r--r-- "))

    def test_color_wraps_name_classify_suffix(self) -> None:
        directory = _file("sub", kind=EntryKind.DIRECTORY, mode=stat.S_IFDIR | 0o755)
        rendered = format_entry(directory, DisplayOptions(color=True, classify=True))
        self.assertEqual(rendered, f"{BLUE}sub/{RESET}  ")

    def test_plain_file_color_is_white(self) -> None:
        rendered = format_entry(_file(), DisplayOptions(color=True, one_line=True))
        self.assertEqual(rendered, f"{WHITE}a.txt{RESET}\n")

    def test_classify_marks_executables(self) -> None:
        executable = _file("run.sh", mode=stat.S_IFREG | 0o755, executable=True)
        self.assertEqual(format_entry(executable, DisplayOptions(classify=True)), "run.sh*  ")

    def test_classify_prefers_directory_indicator(self) -> None:
        directory = _file("bin", kind=EntryKind.DIRECTORY, mode=stat.S_IFDIR | 0o755, executable=True)
        self.assertEqual(format_entry(directory, DisplayOptions(classify=True)), "bin/  ")

    def test_symlink_target_inside_color(self) -> None:
        link = _file("latest", kind=EntryKind.SYMLINK, mode=stat.S_IFLNK | 0o777, link_target="v2")
        rendered = format_entry(link, DisplayOptions(color=True, icons=True, one_line=True))
        self.assertEqual(rendered, f"🔗 {YELLOW}latest -> v2{RESET}\n")

    def test_broken_link_has_no_arrow(self) -> None:
        link = _file("dangling", kind=EntryKind.SYMLINK, mode=stat.S_IFLNK | 0o777, link_target=None)
        self.assertEqual(format_entry(link, DisplayOptions(one_line=True)), "dangling\n")


if __name__ == "__main__":
    unittest.main()
