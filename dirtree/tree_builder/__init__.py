"""Tree construction from host directory capabilities plus skip predicates."""

from __future__ import annotations

from .builder import build_tree
from .skip import (
    SkipPredicate,
    default_skip_predicate,
    dont_skip,
    skip_any,
    skip_binary,
    skip_hidden,
    skip_names,
)

__all__ = [
    "build_tree",
    "SkipPredicate",
    "dont_skip",
    "skip_hidden",
    "skip_binary",
    "skip_names",
    "skip_any",
    "default_skip_predicate",
]
