"""Derived metadata for built trees.

Stores, per file, whether it is binary and (for readable text files) its line
count and optional Pygments language name. Directories receive the sum of
their descendants' line counts.
"""

from __future__ import annotations

import logging

from .entry_model import DirectoryEntry, Entry, FileEntry, iter_entries
from .errors import FetchFailed
from .file_kind import is_binary, language_for_path
from .line_count import count_file_lines

logger = logging.getLogger(__name__)

META_BINARY = "binary"
META_LINE_COUNT = "line_count"
META_LANGUAGE = "language"


def annotate_tree(root: Entry, *, line_counts: bool = True, languages: bool = False) -> int:
    """Annotate ``root`` in place and return its total line count.

    Binary and unreadable files contribute no lines. A read failure while
    counting raises ``FetchFailed`` for that file.
    """
    entries = list(iter_entries(root))
    lines_by_id: dict[int, int] = {}
    for entry in entries:
        if isinstance(entry, FileEntry):
            lines_by_id[id(entry)] = _annotate_file(entry, line_counts, languages)

    # reversed pre-order visits every directory after all of its descendants
    for entry in reversed(entries):
        if isinstance(entry, DirectoryEntry):
            total = sum(lines_by_id[id(child)] for child in entry.children)
            lines_by_id[id(entry)] = total
            if line_counts:
                entry.set_meta(META_LINE_COUNT, total)
    return lines_by_id[id(root)]


def _annotate_file(entry: FileEntry, line_counts: bool, languages: bool) -> int:
    binary = is_binary(entry.path)
    entry.set_meta(META_BINARY, binary)
    if binary or entry.file is None:
        return 0
    if languages:
        language = language_for_path(entry.path)
        if language is not None:
            entry.set_meta(META_LANGUAGE, language)
    if not line_counts:
        return 0
    try:
        lines = count_file_lines(entry.file)
    except OSError as exc:
        raise FetchFailed(entry.path) from exc
    entry.set_meta(META_LINE_COUNT, lines)
    logger.debug("%s: %d lines", entry.path, lines)
    return lines


__all__ = [
    "META_BINARY",
    "META_LINE_COUNT",
    "META_LANGUAGE",
    "annotate_tree",
]
