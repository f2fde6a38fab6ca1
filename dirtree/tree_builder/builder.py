"""Recursive tree construction over a host directory capability.

Host calls (listing one directory, fetching one file) run on a thread pool.
The calling thread coordinates: it applies the skip predicate, schedules
follow-up work as listings complete and finally assembles the entries in
enumeration order, so worker threads never wait on each other.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Union

from .. import config
from ..entry_model import DirectoryEntry, Entry, FileEntry, join_path
from ..errors import BuildCancelled, EnumerationFailed, FetchFailed
from ..host import ChildDescriptor, DirectoryHandle, FileDescriptor, FileHandle
from .skip import SkipPredicate, dont_skip

logger = logging.getLogger(__name__)

CANCEL_POLL_SECONDS = 0.05
FETCH_ERROR_POLICIES = ("raise", "sentinel")


@dataclass(eq=False)
class _PendingDirectory:
    """Directory whose children are still being listed or fetched."""

    handle: DirectoryHandle
    path: str
    slots: list[Union[Entry, "_PendingDirectory", None]] = field(default_factory=list)


@dataclass(frozen=True)
class _ListJob:
    directory: _PendingDirectory


@dataclass(frozen=True)
class _FetchJob:
    directory: _PendingDirectory
    index: int
    child: FileDescriptor
    path: str


def _list_children(handle: DirectoryHandle) -> list[ChildDescriptor]:
    return list(handle.iter_children())


def _fetch_file(child: FileDescriptor) -> FileHandle:
    return child.get_file()


def _directory_entry(pending: _PendingDirectory) -> DirectoryEntry:
    return DirectoryEntry(handle=pending.handle, name=pending.handle.name, path=pending.path)


def _assemble(root: _PendingDirectory) -> DirectoryEntry:
    """Convert pending directories to entries without recursing per level."""
    root_entry = _directory_entry(root)
    stack = [(root, root_entry)]
    while stack:
        pending, entry = stack.pop()
        for slot in pending.slots:
            if isinstance(slot, _PendingDirectory):
                child = _directory_entry(slot)
                entry.children.append(child)
                stack.append((slot, child))
            elif slot is not None:
                entry.children.append(slot)
    return root_entry


def build_tree(
    directory: DirectoryHandle,
    skip_entry: SkipPredicate = dont_skip,
    path_prefix: str | None = None,
    *,
    max_workers: int | None = None,
    on_fetch_error: str = "raise",
    should_cancel: Callable[[], bool] | None = None,
) -> DirectoryEntry:
    """Build a ``DirectoryEntry`` tree for ``directory``.

    ``path_prefix`` is the path already accumulated for ``directory`` and
    becomes the returned root's ``path``. It defaults to the directory's own
    name, so the root path is then that name rather than ``""`` and every
    descendant path starts with it. Pass ``""`` for a traversal root whose
    path is empty and whose children carry no leading component.

    Children keep the host's enumeration order. ``skip_entry(child,
    parent_path)`` excludes a child and, for directories, its whole subtree.

    Raises ``EnumerationFailed`` when any listing fails and ``FetchFailed``
    when a file cannot be fetched under the ``"raise"`` policy; with
    ``on_fetch_error="sentinel"`` an unreadable ``FileEntry`` is kept instead.
    The policy is always the caller's choice and is never read from config.
    ``should_cancel`` is polled while host work is in flight and a true result
    raises ``BuildCancelled``.
    """
    if on_fetch_error not in FETCH_ERROR_POLICIES:
        raise ValueError(f"unknown fetch error policy: {on_fetch_error!r}")
    prefix = directory.name if path_prefix is None else path_prefix
    workers = max_workers if max_workers is not None else config.load_max_workers()

    root = _PendingDirectory(directory, prefix)
    pending: dict[Future, _ListJob | _FetchJob] = {}
    directories = 0
    files = 0
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="dirtree-build")
    try:
        pending[executor.submit(_list_children, directory)] = _ListJob(root)
        timeout = CANCEL_POLL_SECONDS if should_cancel is not None else None
        while pending:
            if should_cancel is not None and should_cancel():
                raise BuildCancelled(f"build of {prefix or '<root>'!r} was cancelled")
            done, _ = wait(pending, timeout=timeout, return_when=FIRST_COMPLETED)
            for future in done:
                job = pending.pop(future)
                if isinstance(job, _FetchJob):
                    job.directory.slots[job.index] = _file_entry(future, job, on_fetch_error)
                    files += 1
                    continue

                parent = job.directory
                try:
                    children = future.result()
                except Exception as exc:
                    raise EnumerationFailed(parent.path) from exc
                directories += 1
                logger.debug("listed %r: %d children", parent.path, len(children))

                for child in children:
                    if skip_entry(child, parent.path):
                        continue
                    child_path = join_path(parent.path, child.name)
                    if child.kind == "file" and isinstance(child, FileDescriptor):
                        fetch = _FetchJob(parent, len(parent.slots), child, child_path)
                        parent.slots.append(None)
                        pending[executor.submit(_fetch_file, child)] = fetch
                    elif child.kind == "directory" and isinstance(child, DirectoryHandle):
                        subdirectory = _PendingDirectory(child, child_path)
                        parent.slots.append(subdirectory)
                        pending[executor.submit(_list_children, child)] = _ListJob(subdirectory)
                    else:
                        logger.debug("ignoring %r of unsupported kind %r", child_path, child.kind)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    logger.debug("built %r: %d directories, %d files", prefix, directories, files)
    return _assemble(root)


def _file_entry(future: Future, job: _FetchJob, on_fetch_error: str) -> FileEntry:
    try:
        handle = future.result()
    except Exception as exc:
        if on_fetch_error == "raise":
            raise FetchFailed(job.path) from exc
        logger.warning("keeping unreadable placeholder for %r: %s", job.path, exc)
        size = getattr(job.child, "size", 0)
        return FileEntry(
            None,
            job.child.name,
            job.path,
            size=size if isinstance(size, int) else 0,
            error=exc,
        )
    return FileEntry(handle, job.child.name, job.path, size=handle.size)


__all__ = [
    "CANCEL_POLL_SECONDS",
    "FETCH_ERROR_POLICIES",
    "build_tree",
]
