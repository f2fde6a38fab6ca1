"""In-memory host capabilities.

Lets callers synthesise a directory capability from nested mappings without
touching a real filesystem. Enumeration order is the mapping's insertion
order.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Literal, Union

from .host import PermissionState


@dataclass(eq=False)
class MemoryFile:
    """A file descriptor that is also its own content handle."""

    name: str
    content: bytes = b""
    fetch_error: Exception | None = None
    kind: Literal["file"] = field(default="file", init=False)

    @property
    def size(self) -> int:
        return len(self.content)

    def get_file(self) -> MemoryFile:
        if self.fetch_error is not None:
            raise self.fetch_error
        return self

    def read_bytes(self) -> bytes:
        if self.fetch_error is not None:
            raise self.fetch_error
        return self.content


@dataclass(eq=False)
class MemoryDirectory:
    """Directory capability over an ordered list of children.

    ``denied`` makes enumeration raise ``PermissionError`` the way a revoked
    host permission would.
    """

    name: str
    children: list[MemoryFile | MemoryDirectory] = field(default_factory=list)
    denied: bool = False
    permission: PermissionState = "granted"
    grant_on_request: bool = True
    kind: Literal["directory"] = field(default="directory", init=False)

    def iter_children(self) -> Iterator[MemoryFile | MemoryDirectory]:
        if self.denied:
            raise PermissionError(f"enumeration of {self.name!r} is not permitted")
        yield from list(self.children)

    def add(self, child: MemoryFile | MemoryDirectory) -> MemoryFile | MemoryDirectory:
        self.children.append(child)
        return child

    def query_permission(self, mode: str) -> PermissionState:
        return self.permission

    def request_permission(self, mode: str) -> PermissionState:
        if self.permission == "prompt" and self.grant_on_request:
            self.permission = "granted"
        return self.permission


MemoryLayout = Mapping[str, Union[bytes, str, "MemoryLayout"]]


def memory_tree(name: str, layout: MemoryLayout) -> MemoryDirectory:
    """Build a ``MemoryDirectory`` from a nested mapping.

    ``bytes`` values become files, ``str`` values become UTF-8 files and
    mappings become subdirectories.
    """
    directory = MemoryDirectory(name)
    for child_name, value in layout.items():
        if isinstance(value, Mapping):
            directory.add(memory_tree(child_name, value))
        elif isinstance(value, str):
            directory.add(MemoryFile(child_name, value.encode("utf-8")))
        else:
            directory.add(MemoryFile(child_name, bytes(value)))
    return directory


__all__ = [
    "MemoryFile",
    "MemoryDirectory",
    "MemoryLayout",
    "memory_tree",
]
