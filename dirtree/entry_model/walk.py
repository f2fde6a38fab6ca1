"""Traversal helpers over built entry trees."""

from __future__ import annotations

from collections.abc import Iterator

from .types import DirectoryEntry, Entry, FileEntry, join_path


def iter_entries(root: Entry) -> Iterator[Entry]:
    """Yield ``root`` and every descendant in pre-order, children in stored order."""
    stack: list[Entry] = [root]
    while stack:
        entry = stack.pop()
        yield entry
        if isinstance(entry, DirectoryEntry):
            stack.extend(reversed(entry.children))


def iter_files(root: Entry) -> Iterator[FileEntry]:
    for entry in iter_entries(root):
        if isinstance(entry, FileEntry):
            yield entry


def find_entry(root: Entry, path: str) -> Entry | None:
    """Return the entry whose ``path`` equals ``path``, or ``None``."""
    for entry in iter_entries(root):
        if entry.path == path:
            return entry
    return None


def tree_paths(root: Entry) -> set[str]:
    """Return the paths of every descendant of ``root`` (``root`` excluded)."""
    return {entry.path for entry in iter_entries(root) if entry is not root}


def reparent(entry: Entry, path: str) -> None:
    """Move ``entry`` to ``path`` and rewrite the paths of its whole subtree."""
    stack: list[tuple[Entry, str]] = [(entry, path)]
    while stack:
        current, current_path = stack.pop()
        current.path = current_path
        if isinstance(current, DirectoryEntry):
            stack.extend((child, join_path(current_path, child.name)) for child in current.children)


__all__ = [
    "iter_entries",
    "iter_files",
    "find_entry",
    "tree_paths",
    "reparent",
]
