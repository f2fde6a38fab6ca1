"""Tests for ``name-N.ext`` successor names."""

from __future__ import annotations

import unittest

from dirtree.unique_name import next_unique_name, unique_name


class UniqueNameTests(unittest.TestCase):
    def test_increment_chain(self) -> None:
        self.assertEqual(next_unique_name("foo.txt"), "foo-1.txt")
        self.assertEqual(next_unique_name("foo-1.txt"), "foo-2.txt")
        self.assertEqual(next_unique_name("foo-9.txt"), "foo-10.txt")
        self.assertEqual(next_unique_name("foo"), "foo-1")
        self.assertEqual(next_unique_name("foo-3"), "foo-4")

    def test_non_numeric_suffix_appends(self) -> None:
        self.assertEqual(next_unique_name("foo-bar.txt"), "foo-bar-1.txt")
        self.assertEqual(next_unique_name("my-file-v2.md"), "my-file-v2-1.md")

    def test_non_canonical_numbers_are_not_incremented(self) -> None:
        self.assertEqual(next_unique_name("foo-01.txt"), "foo-01-1.txt")
        self.assertEqual(next_unique_name("foo-+1.txt"), "foo-+1-1.txt")
        self.assertEqual(next_unique_name("foo-.txt"), "foo--1.txt")

    def test_only_final_dot_segment_is_extension(self) -> None:
        self.assertEqual(next_unique_name("foo.tar.gz"), "foo.tar-1.gz")
        self.assertEqual(next_unique_name("foo.tar-1.gz"), "foo.tar-2.gz")
        self.assertEqual(next_unique_name("v1.2-3.txt"), "v1.2-4.txt")

    def test_unique_name_loops_until_free(self) -> None:
        taken = {"report.pdf", "report-1.pdf", "report-2.pdf"}
        self.assertEqual(unique_name("report.pdf", taken.__contains__), "report-3.pdf")
        self.assertEqual(unique_name("notes.md", taken.__contains__), "notes.md")


if __name__ == "__main__":
    unittest.main()
