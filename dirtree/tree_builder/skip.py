"""Skip predicates for ``build_tree``.

A predicate receives a child descriptor and the path of the directory being
enumerated and returns ``True`` to exclude the child. Excluding a directory
drops its whole subtree.
"""

from __future__ import annotations

from collections.abc import Callable

from .. import config
from ..entry_model import join_path
from ..file_kind import is_binary
from ..host import ChildDescriptor

SkipPredicate = Callable[[ChildDescriptor, str], bool]


def dont_skip(child: ChildDescriptor, parent_path: str) -> bool:
    return False


def skip_hidden(child: ChildDescriptor, parent_path: str) -> bool:
    """Skip dot-named children."""
    return child.name.startswith(".")


def skip_binary(child: ChildDescriptor, parent_path: str) -> bool:
    """Skip files classified as binary by extension; directories are kept."""
    return child.kind == "file" and is_binary(join_path(parent_path, child.name))


def skip_names(*names: str) -> SkipPredicate:
    """Return a predicate skipping children whose name is in ``names``."""
    excluded = frozenset(names)

    def predicate(child: ChildDescriptor, parent_path: str) -> bool:
        return child.name in excluded

    return predicate


def skip_any(*predicates: SkipPredicate) -> SkipPredicate:
    """Return a predicate that skips when any of ``predicates`` does."""
    active = tuple(p for p in predicates if p is not dont_skip)
    if not active:
        return dont_skip

    def predicate(child: ChildDescriptor, parent_path: str) -> bool:
        return any(p(child, parent_path) for p in active)

    return predicate


def default_skip_predicate() -> SkipPredicate:
    """Compose the skip rules persisted in the user config."""
    predicates: list[SkipPredicate] = []
    names = config.load_skip_names()
    if names:
        predicates.append(skip_names(*names))
    if not config.load_show_hidden():
        predicates.append(skip_hidden)
    return skip_any(*predicates)


__all__ = [
    "SkipPredicate",
    "dont_skip",
    "skip_hidden",
    "skip_binary",
    "skip_names",
    "skip_any",
    "default_skip_predicate",
]
