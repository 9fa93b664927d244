"""
Filename ordering.

Paths are compared segment by segment. Inside a segment the stem (text before
the first ``.``) is compared with natural collation, then the extension is
compared through an extension table so that related extensions sit next to
each other: with the group ``[h, c]``, ``c`` is mapped to ``(h, 1)``, meaning it
comes right after ``h``, so ``foo.h`` sorts immediately before ``foo.c``.
"""
from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .collate import collate_key
from .errors import DuplicateExtensionError
from .segments import SEPARATOR, segment

logger = logging.getLogger(__name__)

__all__ = [
    "ExtensionTable",
    "build_extension_table",
    "validate_extension_groups",
    "compare",
    "filename_key",
    "sort_filenames",
    "filename_compare",
    "DEFAULT_EXTENSION_GROUPS",
    "DEFAULT_EXTENSION_TABLE",
]

DEFAULT_EXTENSION_GROUPS: Tuple[Tuple[str, ...], ...] = (("h", "c"), ("mli", "ml"))


@dataclass(frozen=True)
class ExtensionTable:
    """
    Immutable mapping from extension to (group id, position in group).

    The group id is the first extension of the group. Use
    :func:`build_extension_table` rather than constructing this directly.
    """
    entries: Mapping[str, Tuple[str, int]]

    def lookup(self, extension: str) -> Tuple[str, int]:
        """Precedence of ``extension``; unknown extensions form their own group."""
        return self.entries.get(extension, (extension, 0))

    def __contains__(self, extension: object) -> bool:
        return extension in self.entries

    def __len__(self) -> int:
        return len(self.entries)


def validate_extension_groups(groups: Iterable[Sequence[str]]) -> None:
    """
    Check that every extension is a bare name.

    Raises:
        ValueError: If an extension is empty or contains a dot or a separator
    """
    for group in groups:
        for extension in group:
            if not extension or "." in extension or SEPARATOR in extension:
                raise ValueError(f"Invalid extension {extension!r}")


def build_extension_table(groups: Iterable[Sequence[str]]) -> ExtensionTable:
    """
    Build an extension table from ordered groups of related extensions.

    Args:
        groups: e.g. ``[["h", "c"], ["mli", "ml"]]``; empty groups are skipped

    Returns:
        ExtensionTable

    Raises:
        DuplicateExtensionError: If an extension appears more than once
    """
    entries: Dict[str, Tuple[str, int]] = {}
    for group in groups:
        if not group:
            continue
        group_id = group[0]
        for pos, extension in enumerate(group):
            if extension in entries:
                raise DuplicateExtensionError(extension)
            entries[extension] = (group_id, pos)
    logger.debug(f"Built extension table with {len(entries)} extensions")
    return ExtensionTable(entries=MappingProxyType(entries))


def _split_extension(name: str) -> Tuple[str, str]:
    stem, _, extension = name.partition(".")
    return stem, extension


def _segment_key(table: ExtensionTable, name: str) -> Tuple[Any, ...]:
    stem, extension = _split_extension(name)
    group_id, pos = table.lookup(extension)
    return (collate_key(stem), collate_key(group_id), pos, collate_key(extension))


def filename_key(table: ExtensionTable) -> Callable[[str], Tuple[Any, ...]]:
    """Key function for ``sorted()`` that orders paths like :func:`compare`."""
    def key(path: str) -> Tuple[Any, ...]:
        return tuple(_segment_key(table, name) for name in segment(path))
    return key


def compare(table: ExtensionTable, a: str, b: str) -> int:
    """
    Compare two paths using ``table`` for extension precedence.

    Returns:
        -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``
    """
    key = filename_key(table)
    ka = key(a)
    kb = key(b)
    return (ka > kb) - (ka < kb)


DEFAULT_EXTENSION_TABLE = build_extension_table(DEFAULT_EXTENSION_GROUPS)

filename_compare = functools.partial(compare, DEFAULT_EXTENSION_TABLE)


def sort_filenames(
    paths: Iterable[str],
    table: Optional[ExtensionTable] = None,
    reverse: bool = False,
) -> List[str]:
    """Sort paths with :func:`compare`, using the default table when none is given."""
    if table is None:
        table = DEFAULT_EXTENSION_TABLE
    return sorted(paths, key=filename_key(table), reverse=reverse)
