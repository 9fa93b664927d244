"""
Natural ("human") string collation.

Strings are cut into alternating non-digit and digit runs, always starting
with a (possibly empty) non-digit run, and the runs are compared pairwise
from left to right:

- non-digit runs compare lexicographically
- digit runs compare by integer value, then the shorter spelling first
  (``2`` before ``02``)

This gives ``rfc1.txt < rfc822.txt < rfc2086.txt`` and is a strict total order.
"""
from __future__ import annotations

import re
from typing import Tuple, Union

__all__ = ["collate", "collate_key"]

_DIGIT_RUN = re.compile(r"([0-9]+)")

Run = Union[str, Tuple[int, str, int]]


def _digit_key(run: str) -> Tuple[int, str, int]:
    """
    Order digit runs by value, then shorter spelling first.

    Without leading zeros, a longer run is a larger number and equal lengths
    compare digit by digit, so no integer conversion is needed.
    """
    stripped = run.lstrip("0")
    return (len(stripped), stripped, len(run))


def collate_key(s: str) -> Tuple[Run, ...]:
    """
    Sort key equivalent to :func:`collate`.

    ``re.split`` with a capturing group alternates text and digit runs, so even
    positions always hold strings and odd positions digit-run keys;
    tuple comparison never mixes the two.
    """
    runs = _DIGIT_RUN.split(s)
    return tuple(
        run if idx % 2 == 0 else _digit_key(run)
        for idx, run in enumerate(runs)
    )


def collate(a: str, b: str) -> int:
    """
    Compare two strings in natural order.

    Returns:
        -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``
    """
    ka = collate_key(a)
    kb = collate_key(b)
    return (ka > kb) - (ka < kb)
