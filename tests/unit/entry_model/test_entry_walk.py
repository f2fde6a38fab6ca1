"""Tests for tree walking and path helpers."""

from __future__ import annotations

import unittest

from dirtree.entry_model import DirectoryEntry, find_entry, iter_entries, iter_files, join_path, reparent, tree_paths
from dirtree.memory_host import memory_tree
from dirtree.tree_builder import build_tree


class EntryWalkTests(unittest.TestCase):
    def setUp(self) -> None:
        source = memory_tree(
            "root",
            {
                "b.txt": b"b",
                "src": {"main.py": b"x = 1\n", "pkg": {"mod.py": b""}},
                "a.txt": b"a",
            },
        )
        self.tree = build_tree(source, path_prefix="", max_workers=2)

    def test_iter_entries_is_preorder_in_stored_order(self) -> None:
        paths = [entry.path for entry in iter_entries(self.tree)]
        self.assertEqual(paths, ["", "b.txt", "src", "src/main.py", "src/pkg", "src/pkg/mod.py", "a.txt"])

    def test_iter_files_skips_directories(self) -> None:
        self.assertEqual(
            [entry.path for entry in iter_files(self.tree)],
            ["b.txt", "src/main.py", "src/pkg/mod.py", "a.txt"],
        )

    def test_find_entry_and_tree_paths(self) -> None:
        found = find_entry(self.tree, "src/pkg")
        self.assertIsNotNone(found)
        assert found is not None
        self.assertTrue(found.is_directory)
        self.assertIsNone(find_entry(self.tree, "missing"))
        self.assertNotIn("", tree_paths(self.tree))
        self.assertIn("src/pkg/mod.py", tree_paths(self.tree))

    def test_reparent_rewrites_subtree_paths(self) -> None:
        src = find_entry(self.tree, "src")
        assert src is not None
        reparent(src, "vendor/src")
        self.assertEqual(
            [entry.path for entry in iter_entries(src)],
            ["vendor/src", "vendor/src/main.py", "vendor/src/pkg", "vendor/src/pkg/mod.py"],
        )

    def test_reparent_handles_deep_subtrees(self) -> None:
        root = DirectoryEntry(name="root")
        current = root
        for level in range(1500):
            child = DirectoryEntry(name=f"d{level}", path=join_path(current.path, f"d{level}"))
            current.children.append(child)
            current = child

        reparent(root, "moved")

        self.assertTrue(current.path.startswith("moved/d0/d1/"))
        self.assertTrue(current.path.endswith("/d1499"))


if __name__ == "__main__":
    unittest.main()
