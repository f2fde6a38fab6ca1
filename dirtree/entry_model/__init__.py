"""Domain model for in-memory file/directory trees.

This package contains:
- file/directory entry datatypes with an explicit ``kind`` discriminant
- variant-checked accessors raising ``TypeMismatch``
- pre-order walking and path helpers over built trees
"""

from __future__ import annotations

from .types import (
    DirectoryEntry,
    Entry,
    FileEntry,
    entry_children,
    entry_file,
    is_directory,
    join_path,
)
from .walk import find_entry, iter_entries, iter_files, reparent, tree_paths

__all__ = [
    "Entry",
    "FileEntry",
    "DirectoryEntry",
    "is_directory",
    "entry_children",
    "entry_file",
    "join_path",
    "iter_entries",
    "iter_files",
    "find_entry",
    "tree_paths",
    "reparent",
]
