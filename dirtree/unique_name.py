"""Collision-avoiding file names following the ``name-N.ext`` convention."""

from __future__ import annotations

from collections.abc import Callable


def _canonical_int(text: str) -> int | None:
    """Parse ``text`` only when it round-trips exactly through ``str(int)``."""
    try:
        value = int(text)
    except ValueError:
        return None
    return value if str(value) == text else None


def next_unique_name(name: str) -> str:
    """Return the successor of ``name`` in the ``-N`` suffix sequence.

    ``foo.txt`` -> ``foo-1.txt`` -> ``foo-2.txt``; a non-numeric last dash
    segment gets a new ``-1`` (``foo-bar.txt`` -> ``foo-bar-1.txt``). Only the
    final dot segment is treated as the extension, so ``foo.tar.gz`` becomes
    ``foo.tar-1.gz``. No filesystem is consulted.
    """
    ext = ""
    stem = name
    dot_parts = name.split(".")
    if len(dot_parts) > 1:
        ext = "." + dot_parts[-1]
        stem = ".".join(dot_parts[:-1])

    dash_parts = stem.split("-")
    if len(dash_parts) == 1:
        return f"{stem}-1{ext}"

    suffix = _canonical_int(dash_parts[-1])
    if suffix is None:
        return f"{stem}-1{ext}"
    dash_parts[-1] = str(suffix + 1)
    return "-".join(dash_parts) + ext


def unique_name(name: str, exists: Callable[[str], bool]) -> str:
    """Return ``name`` or its first successor for which ``exists`` is false."""
    candidate = name
    while exists(candidate):
        candidate = next_unique_name(candidate)
    return candidate


__all__ = [
    "next_unique_name",
    "unique_name",
]
