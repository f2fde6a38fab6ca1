"""Exception hierarchy raised by tree construction and entry accessors."""

from __future__ import annotations


class DirTreeError(Exception):
    """Base class for every error raised by ``dirtree``."""


class TypeMismatch(DirTreeError, TypeError):
    """A file-only or directory-only accessor was used on the other variant."""

    def __init__(self, path: str, expected: str) -> None:
        self.path = path
        self.expected = expected
        super().__init__(f"entry {path!r} is not a {expected}")


class EnumerationFailed(DirTreeError):
    """The host refused or failed to list a directory during a build."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"failed to enumerate directory {path or '<root>'!r}")


class FetchFailed(DirTreeError):
    """Byte content for a file could not be obtained from the host."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"failed to fetch file {path!r}")


class BuildCancelled(DirTreeError):
    """A build was abandoned by its caller; the partial tree is discarded."""


__all__ = [
    "DirTreeError",
    "TypeMismatch",
    "EnumerationFailed",
    "FetchFailed",
    "BuildCancelled",
]
