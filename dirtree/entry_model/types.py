"""Entry datatypes for in-memory directory trees.

``Entry`` is a sum type of ``FileEntry`` and ``DirectoryEntry``. Both carry
an explicit ``kind`` discriminant, a slash-separated ``path`` relative to the
traversal root, and a lazily allocated metadata slot for caller data.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Union

from ..errors import TypeMismatch
from ..host import DirectoryHandle, FileHandle


class _EntryBase:
    """Metadata slot and size accessors shared by both variants."""

    kind: ClassVar[Literal["file", "directory"]]
    path: str
    size: int
    meta: dict[str, Any] | None

    @property
    def is_directory(self) -> bool:
        return self.kind == "directory"

    def set_size(self, size: int) -> None:
        self.size = size

    def get_meta(self, key: str, default: Any = None) -> Any:
        """Return ``meta[key]``, or ``default`` while the slot or key is absent."""
        if self.meta is None:
            return default
        return self.meta.get(key, default)

    def has_meta(self, key: str) -> bool:
        return self.meta is not None and key in self.meta

    def set_meta(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, allocating the slot on first write."""
        if self.meta is None:
            self.meta = {}
        self.meta[key] = value

    def set_meta_all(self, mapping: Mapping[str, Any] | None) -> None:
        """Replace the whole slot with a copy of ``mapping`` (``None`` clears it)."""
        self.meta = dict(mapping) if mapping is not None else None


@dataclass(eq=False)
class FileEntry(_EntryBase):
    """File leaf referencing host-owned content.

    ``file`` is ``None`` only for unreadable placeholders, in which case
    ``error`` holds the failure reported by the host.
    """

    kind: ClassVar[Literal["file"]] = "file"

    file: FileHandle | None
    name: str
    path: str
    size: int = 0
    meta: dict[str, Any] | None = None
    error: Exception | None = None

    @property
    def unreadable(self) -> bool:
        return self.file is None


@dataclass(eq=False)
class DirectoryEntry(_EntryBase):
    """Directory node with children in host enumeration order.

    ``size`` is kept at 0 and reserved for aggregate use.
    """

    kind: ClassVar[Literal["directory"]] = "directory"

    children: list["Entry"] = field(default_factory=list)
    handle: DirectoryHandle | None = None
    name: str = ""
    path: str = ""
    size: int = 0
    meta: dict[str, Any] | None = None


Entry = Union[FileEntry, DirectoryEntry]


def is_directory(entry: Entry) -> bool:
    return entry.kind == "directory"


def entry_children(entry: Entry) -> list[Entry]:
    """Return a directory's children; files raise ``TypeMismatch``."""
    if entry.kind != "directory":
        raise TypeMismatch(entry.path, "directory")
    return entry.children


def entry_file(entry: Entry) -> FileHandle | None:
    """Return a file's content handle; directories raise ``TypeMismatch``."""
    if entry.kind != "file":
        raise TypeMismatch(entry.path, "file")
    return entry.file


def join_path(prefix: str, name: str) -> str:
    """Join ``name`` under ``prefix`` without a leading slash at the root."""
    return name if prefix == "" else f"{prefix}/{name}"


__all__ = [
    "Entry",
    "FileEntry",
    "DirectoryEntry",
    "is_directory",
    "entry_children",
    "entry_file",
    "join_path",
]
