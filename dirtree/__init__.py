"""Public package surface for dirtree.

In-memory directory trees built from host-supplied directory capabilities,
plus byte-accurate line counting and ``name-N.ext`` unique naming.
Most implementation lives in submodules under ``dirtree``.
"""

from __future__ import annotations

from .annotate import annotate_tree
from .entry_model import (
    DirectoryEntry,
    Entry,
    FileEntry,
    entry_children,
    entry_file,
    find_entry,
    is_directory,
    iter_entries,
    iter_files,
    reparent,
    tree_paths,
)
from .errors import BuildCancelled, DirTreeError, EnumerationFailed, FetchFailed, TypeMismatch
from .file_kind import file_ext, is_binary, language_for_path
from .host import verify_handle_permission
from .line_count import count_file_lines, count_lines
from .tree_builder import build_tree, dont_skip, skip_any, skip_binary, skip_hidden, skip_names
from .unique_name import next_unique_name, unique_name

__all__ = [
    "Entry",
    "FileEntry",
    "DirectoryEntry",
    "is_directory",
    "entry_children",
    "entry_file",
    "iter_entries",
    "iter_files",
    "find_entry",
    "tree_paths",
    "reparent",
    "DirTreeError",
    "TypeMismatch",
    "EnumerationFailed",
    "FetchFailed",
    "BuildCancelled",
    "build_tree",
    "dont_skip",
    "skip_hidden",
    "skip_binary",
    "skip_names",
    "skip_any",
    "count_lines",
    "count_file_lines",
    "next_unique_name",
    "unique_name",
    "file_ext",
    "is_binary",
    "language_for_path",
    "verify_handle_permission",
    "annotate_tree",
]
