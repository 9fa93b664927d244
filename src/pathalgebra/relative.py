"""
Relative path resolution and the ancestor predicate.

Both operate on normalized segment lists, so un-normalized inputs such as
``/mnt/local/../global`` are handled the same way as their canonical form.
"""
from __future__ import annotations

import logging
import os
from typing import Callable, List, Optional, Sequence

from .errors import IncompatiblePathsError, LookaheadError
from .segments import (
    PARENT,
    ROOT,
    concat,
    is_relative,
    join,
    normalize,
    normalize_segments,
    segment,
)

logger = logging.getLogger(__name__)

# Provider for the current location, injectable so callers can pin it
CwdProvider = Callable[[], str]

__all__ = ["CwdProvider", "make_relative", "is_parent", "is_parent_segments", "parent"]


def make_relative(
    path: str,
    reference: Optional[str] = None,
    *,
    getcwd: CwdProvider = os.getcwd,
) -> str:
    """
    Express ``path`` relative to ``reference``.

    Args:
        path: Path to express
        reference: Directory the result is relative to; the current working
            directory (as given by ``getcwd``) when omitted
        getcwd: Provider for the current location

    Returns:
        Relative path string; ``path`` unchanged when it is already relative
        and no reference was given

    Raises:
        IncompatiblePathsError: If exactly one of path/reference is absolute
        LookaheadError: If the result would have to go above the reference
            through a leading ``..``

    Examples:
        >>> make_relative("a/b", "c")
        '../a/b'
        >>> make_relative("../a", "..")
        'a'
    """
    if reference is None:
        if is_relative(path):
            return path
        reference = getcwd()
    elif is_relative(path) != is_relative(reference):
        logger.debug(f"Refusing to relate {path!r} to {reference!r}: mixed absolute and relative")
        raise IncompatiblePathsError(path, reference)

    ref_segments = normalize_segments(segment(reference))
    path_segments = normalize_segments(segment(path))

    common = 0
    for ref_seg, path_seg in zip(ref_segments, path_segments):
        if ref_seg != path_seg:
            break
        common += 1

    ref_rest = ref_segments[common:]
    if PARENT in ref_rest:
        logger.debug(f"Cannot relate {path!r} to {reference!r}: reference goes above a '..'")
        raise LookaheadError(path, reference)

    return join([PARENT] * len(ref_rest) + path_segments[common:])


def _all_parents(segments: Sequence[str]) -> bool:
    return all(seg == PARENT for seg in segments)


def _is_plain_name(seg: str) -> bool:
    return seg != PARENT and seg != ROOT


def is_parent_segments(p1: Sequence[str], p2: Sequence[str]) -> bool:
    """
    Ancestor test on two normalized segment lists.

    This is deliberately permissive with leading ``..`` chains: ``..`` is
    considered a parent of ``a`` because it could be, whatever ``..`` is.
    """
    if list(p1) == [ROOT]:
        return True
    for idx, h1 in enumerate(p1):
        if idx == len(p2):
            return _all_parents(p1[idx:])
        h2 = p2[idx]
        if h1 != h2:
            return _is_plain_name(h2) and _all_parents(p1[idx:])
    if len(p2) == len(p1):
        return True
    return _is_plain_name(p2[len(p1)])


def is_parent(p1: str, p2: str) -> bool:
    """
    Whether ``p1`` is (or could be) an ancestor of ``p2``.

    Both paths are normalized first. A path counts as its own parent.

    Examples:
        >>> is_parent("/mnt", "/mnt/local/../global")
        True
        >>> is_parent("a", "../a")
        False
    """
    s1: List[str] = normalize_segments(segment(p1))
    s2: List[str] = normalize_segments(segment(p2))
    return is_parent_segments(s1, s2)


def parent(path: str) -> str:
    """Normalized parent directory of ``path``."""
    return normalize(concat(path, PARENT))
