"""Tests for entry datatypes, accessors and the metadata slot."""

from __future__ import annotations

import unittest

from dirtree.entry_model import DirectoryEntry, FileEntry, entry_children, entry_file, is_directory, join_path
from dirtree.errors import TypeMismatch
from dirtree.memory_host import MemoryFile


class EntryTypesTests(unittest.TestCase):
    def test_kind_discriminant_distinguishes_variants(self) -> None:
        file_entry = FileEntry(MemoryFile("a.txt", b"a"), "a.txt", "a.txt", size=1)
        directory_entry = DirectoryEntry(children=[file_entry], name="root")

        self.assertEqual(file_entry.kind, "file")
        self.assertEqual(directory_entry.kind, "directory")
        self.assertFalse(is_directory(file_entry))
        self.assertTrue(directory_entry.is_directory)

    def test_variant_accessors_raise_type_mismatch_on_wrong_kind(self) -> None:
        handle = MemoryFile("a.txt", b"a")
        file_entry = FileEntry(handle, "a.txt", "docs/a.txt", size=1)
        directory_entry = DirectoryEntry(children=[file_entry], name="docs", path="docs")

        self.assertIs(entry_file(file_entry), handle)
        self.assertEqual(entry_children(directory_entry), [file_entry])
        with self.assertRaises(TypeMismatch) as ctx:
            entry_children(file_entry)
        self.assertEqual(ctx.exception.path, "docs/a.txt")
        self.assertIsInstance(ctx.exception, TypeError)
        with self.assertRaises(TypeMismatch):
            entry_file(directory_entry)

    def test_metadata_slot_is_absent_until_first_write(self) -> None:
        entry = FileEntry(MemoryFile("a.txt"), "a.txt", "a.txt")

        self.assertIsNone(entry.meta)
        self.assertIsNone(entry.get_meta("k"))
        self.assertEqual(entry.get_meta("k", 7), 7)
        self.assertFalse(entry.has_meta("k"))

        entry.set_meta("k", "v")
        entry.set_meta("k", "w")
        self.assertEqual(entry.get_meta("k"), "w")
        self.assertTrue(entry.has_meta("k"))
        self.assertEqual(entry.meta, {"k": "w"})

    def test_metadata_is_never_shared_between_entries(self) -> None:
        first = FileEntry(MemoryFile("a"), "a", "a")
        second = FileEntry(MemoryFile("b"), "b", "b")
        shared = {"lines": 3}

        first.set_meta_all(shared)
        second.set_meta_all(shared)
        first.set_meta("lines", 4)

        self.assertEqual(second.get_meta("lines"), 3)
        self.assertEqual(shared, {"lines": 3})

        first.set_meta_all(None)
        self.assertIsNone(first.meta)

    def test_size_is_mutable_after_construction(self) -> None:
        entry = FileEntry(MemoryFile("a", b"abc"), "a", "a", size=3)
        entry.set_size(10)
        self.assertEqual(entry.size, 10)

        directory = DirectoryEntry(name="root")
        self.assertEqual(directory.size, 0)

    def test_unreadable_file_entry_has_no_handle(self) -> None:
        error = PermissionError("revoked")
        entry = FileEntry(None, "a", "a", error=error)
        self.assertTrue(entry.unreadable)
        self.assertIs(entry.error, error)

    def test_join_path_omits_leading_slash_at_root(self) -> None:
        self.assertEqual(join_path("", "a"), "a")
        self.assertEqual(join_path("a", "b"), "a/b")


if __name__ == "__main__":
    unittest.main()
