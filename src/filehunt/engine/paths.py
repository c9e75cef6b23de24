"""Path helpers: containing directory and directory depth."""

from __future__ import annotations

import os


def _segments(path: str) -> list[str]:
    normalized = os.path.normpath(path)
    if os.path.altsep:
        normalized = normalized.replace(os.path.altsep, os.sep)
    return [part for part in normalized.split(os.sep) if part]


def parent_of(path: str) -> str:
    """Return the normalized directory that contains ``path``."""
    return os.path.dirname(os.path.normpath(path))


def depth_of(path: str) -> int:
    """Count directory levels above the file name.

    ``/a/b/c/file.txt`` has depth 3, ``/file.txt`` has depth 0.
    """
    return max(0, len(_segments(path)) - 1)
