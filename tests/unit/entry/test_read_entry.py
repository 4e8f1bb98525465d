"""Tests for one-shot metadata reads through the filesystem capability."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from dirlist.entry import EntryKind, display_name, read_entry
from dirlist.errors import MetadataUnavailable
from dirlist.filesystem import FileSystem
from listing_fakes import FakeFileSystem


class ReadEntryTests(unittest.TestCase):
    def test_regular_file_metadata(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "a.txt"
            target.write_bytes(b"0123456789")

            entry = read_entry(target, FileSystem())

            self.assertEqual(entry.name, "a.txt")
            self.assertIs(entry.kind, EntryKind.FILE)
            self.assertEqual(entry.size, 10)
            self.assertEqual(entry.sort_size, 10)
            self.assertFalse(entry.executable)
            self.assertIsNotNone(entry.mtime)
            self.assertEqual(entry.nlink, 1)

    def test_broken_symlink_reads_link_itself(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            link = Path(tmp) / "dangling"
            os.symlink("missing-target", link)

            entry = read_entry(link, FileSystem())

            self.assertIs(entry.kind, EntryKind.SYMLINK)
            self.assertEqual(entry.link_target, "missing-target")
            self.assertFalse(entry.executable)

    def test_symlink_to_directory_is_not_a_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real").mkdir()
            os.symlink(root / "real", root / "alias")

            entry = read_entry(root / "alias", FileSystem())

            self.assertIs(entry.kind, EntryKind.SYMLINK)
            self.assertFalse(entry.is_dir)

    def test_directory_sorts_with_zero_size(self) -> None:
        fs = FakeFileSystem()
        fs.add_dir("root")
        fs.add_dir("root/sub", size=4096)

        entry = read_entry(Path("root/sub"), fs)

        self.assertTrue(entry.is_dir)
        self.assertEqual(entry.size, 4096)
        self.assertEqual(entry.sort_size, 0)

    def test_missing_entry_raises_metadata_unavailable(self) -> None:
        fs = FakeFileSystem()
        fs.add_dir("root")
        with self.assertRaises(MetadataUnavailable) as exc_info:
            read_entry(Path("root/gone"), fs)
        self.assertEqual(exc_info.exception.path, Path("root/gone"))
        self.assertIsInstance(exc_info.exception.__cause__, FileNotFoundError)

    def test_unresolvable_link_target_is_left_empty(self) -> None:
        fs = FakeFileSystem()
        fs.add_dir("root")
        fs.add_link("root/link", "target")
        del fs.links[Path("root/link")]

        entry = read_entry(Path("root/link"), fs)

        self.assertIs(entry.kind, EntryKind.SYMLINK)
        self.assertIsNone(entry.link_target)

    def test_display_name_falls_back_to_path_text(self) -> None:
        self.assertEqual(display_name(Path("a/b.txt")), "b.txt")
        self.assertEqual(display_name(Path(".")), ".")
        self.assertEqual(display_name(Path("/")), "/")


if __name__ == "__main__":
    unittest.main()
