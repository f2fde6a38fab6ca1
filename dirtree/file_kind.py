"""Extension-based file classification.

``is_binary`` is a static lookup used to decide whether line counting is
worth running; ``language_for_path`` asks Pygments which lexer would handle a
file name.
"""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

BINARY_EXTS = frozenset(
    {
        ".bmp",
        ".ico",
        ".png",
        ".jpg",
        ".jpeg",
        ".webp",
        ".avif",
        ".jfif",
        ".tiff",
        ".xd",
        ".a",
        ".xz",
        ".gz",
        ".tar",
        ".zip",
        ".rar",
        ".7z",
        ".cbz",
        ".cbr",
        ".cb7",
        ".exe",
        ".dll",
        ".pdb",
        ".lib",
        ".ttf",
        ".otf",
        ".afm",
    }
)


def file_ext(name: str) -> str:
    """Return the lower-cased final extension with its dot.

    ``"foo.TXT"`` -> ``".txt"``, ``"foo"`` -> ``""``.
    """
    parts = name.split(".")
    if len(parts) > 1:
        return "." + parts[-1].lower()
    return ""


def is_binary(path: str) -> bool:
    """Return whether ``path`` is inside a ``.git`` directory or has a binary extension."""
    if ".git/" in path:
        return True
    return file_ext(path) in BINARY_EXTS


@lru_cache(maxsize=1024)
def language_for_path(path: str) -> str | None:
    """Return the Pygments lexer name for ``path``'s file name, or ``None``."""
    name = path.rsplit("/", 1)[-1]
    try:
        return get_lexer_for_filename(name).name
    except ClassNotFound:
        return None


__all__ = [
    "BINARY_EXTS",
    "file_ext",
    "is_binary",
    "language_for_path",
]
