"""
Path segmentation and normalization.

A path is handled as a list of segments. The root marker ``/`` can only be the
first segment and marks the path as absolute; the empty path and ``.`` are both
the empty list.

Examples:
    >>> segment("/mnt/./local")
    ['/', 'mnt', '.', 'local']
    >>> normalize("/mnt/local/../global/foo")
    '/mnt/global/foo'
"""
from __future__ import annotations

from typing import List, Sequence

SEPARATOR = "/"
ROOT = SEPARATOR
CURRENT = "."
PARENT = ".."

__all__ = [
    "SEPARATOR",
    "ROOT",
    "CURRENT",
    "PARENT",
    "segment",
    "join",
    "is_absolute",
    "is_relative",
    "normalize_segments",
    "normalize",
    "concat",
]


def is_absolute(path: str) -> bool:
    return path.startswith(SEPARATOR)


def is_relative(path: str) -> bool:
    return not is_absolute(path)


def segment(path: str) -> List[str]:
    """
    Split a path into its segments, left to right.

    Empty components from repeated or trailing separators are dropped. A
    single leading ``.`` of a relative path disappears while interior ``.``
    segments are kept for the normalizer.

    Args:
        path: Path string using ``/`` as separator

    Returns:
        List of segments, starting with ``"/"`` for absolute paths
    """
    segments = [part for part in path.split(SEPARATOR) if part]
    if is_absolute(path):
        segments.insert(0, ROOT)
    elif segments and segments[0] == CURRENT:
        del segments[0]
    return segments


def join(segments: Sequence[str]) -> str:
    """Reassemble segments produced by :func:`segment` into a path string."""
    if not segments:
        return CURRENT
    if segments[0] == ROOT:
        return ROOT + SEPARATOR.join(segments[1:])
    return SEPARATOR.join(segments)


def normalize_segments(segments: Sequence[str]) -> List[str]:
    """
    Take out all ``..`` and ``.`` segments.

    Relative paths may keep a run of ``..`` at the front when there is
    nothing left to cancel them against. The parent of the root is the root.
    """
    stack: List[str] = []
    for seg in segments:
        if seg == PARENT:
            if stack == [ROOT]:
                continue
            if stack and stack[-1] != PARENT:
                stack.pop()
            else:
                stack.append(seg)
        elif seg != CURRENT:
            stack.append(seg)
    return stack


def normalize(path: str) -> str:
    return join(normalize_segments(segment(path)))


def concat(dirname: str, basename: str) -> str:
    """Append ``basename`` to ``dirname`` with exactly one separator between them."""
    if not dirname:
        dirname = CURRENT
    if dirname.endswith(SEPARATOR):
        return dirname + basename
    return dirname + SEPARATOR + basename
