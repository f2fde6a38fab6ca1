"""Host capabilities consumed by the tree builder.

The host environment owns every directory and file handle. ``dirtree`` only
keeps references to them, never mutates them, and assumes permission has
already been granted by the time a build runs.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal, Protocol, runtime_checkable

HandleKind = Literal["file", "directory"]
PermissionState = Literal["granted", "denied", "prompt"]


@runtime_checkable
class FileHandle(Protocol):
    """Readable byte content of one file."""

    name: str
    size: int

    def read_bytes(self) -> bytes:
        ...


@runtime_checkable
class ChildDescriptor(Protocol):
    """One child reported while enumerating a directory."""

    name: str
    kind: HandleKind


@runtime_checkable
class FileDescriptor(ChildDescriptor, Protocol):
    def get_file(self) -> FileHandle:
        ...


@runtime_checkable
class DirectoryHandle(ChildDescriptor, Protocol):
    """Directory capability that can be re-queried for its children."""

    def iter_children(self) -> Iterable[ChildDescriptor]:
        ...


@runtime_checkable
class PermissionHandle(Protocol):
    def query_permission(self, mode: str) -> PermissionState:
        ...

    def request_permission(self, mode: str) -> PermissionState:
        ...


def verify_handle_permission(handle: PermissionHandle, read_write: bool = False) -> bool:
    """Return whether ``handle`` is accessible, prompting the host if needed.

    An already granted permission short-circuits; otherwise the host is asked
    once and the answer is returned as-is.
    """
    mode = "readwrite" if read_write else "read"
    if handle.query_permission(mode) == "granted":
        return True
    return handle.request_permission(mode) == "granted"


__all__ = [
    "HandleKind",
    "PermissionState",
    "FileHandle",
    "ChildDescriptor",
    "FileDescriptor",
    "DirectoryHandle",
    "PermissionHandle",
    "verify_handle_permission",
]
