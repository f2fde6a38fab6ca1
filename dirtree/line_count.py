"""Byte-level line counting.

Only LF (``0x0A``) terminates a line. CRLF therefore counts once and a lone
CR (classic Mac endings) is not a terminator at all. No decoding happens, so
binary or invalid UTF-8 content still yields a number; callers decide whether
that number is meaningful (see ``dirtree.file_kind.is_binary``).
"""

from __future__ import annotations

from .host import FileHandle

LF = 0x0A


def count_lines(data: bytes | bytearray | memoryview) -> int:
    """Return the number of lines in ``data``.

    Every LF ends a line; a trailing line without LF still counts. Empty input
    has zero lines.
    """
    if isinstance(data, memoryview):
        data = data.tobytes()
    if not data:
        return 0
    count = data.count(LF)
    if data[-1] != LF:
        count += 1
    return count


def count_file_lines(handle: FileHandle) -> int:
    """Count lines of a host file, reading its whole content into memory.

    Memory use is proportional to the file size. Empty files are answered from
    ``size`` without reading.
    """
    if handle.size == 0:
        return 0
    return count_lines(handle.read_bytes())


__all__ = [
    "count_lines",
    "count_file_lines",
]
