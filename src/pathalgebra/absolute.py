"""
Helpers that anchor paths to a base directory or a user's home.

These are the only functions here that read ambient process state: the
current working directory (through an injectable ``getcwd`` provider) and the
passwd database for ``~user`` expansion.
"""
from __future__ import annotations

import logging
import os
import pwd
from typing import Callable

from .errors import UnknownUserError
from .relative import CwdProvider
from .segments import SEPARATOR, concat, is_absolute, normalize

logger = logging.getLogger(__name__)

__all__ = [
    "concat_if_relative",
    "make_absolute",
    "user_home",
    "current_user",
    "expand_user",
    "expand",
]


def concat_if_relative(base: Callable[[], str], path: str) -> str:
    """
    ``path`` if it is absolute, else ``path`` appended to ``base()``.

    ``base`` is only called when needed, so chaining these short-circuits on
    the first absolute path.
    """
    if is_absolute(path):
        return path
    return concat(base(), path)


def make_absolute(path: str, *, getcwd: CwdProvider = os.getcwd) -> str:
    return concat_if_relative(getcwd, path)


def current_user() -> str:
    return pwd.getpwuid(os.getuid()).pw_name


def user_home(username: str) -> str:
    """
    Home directory of ``username`` from the passwd database.

    Raises:
        UnknownUserError: If the user does not exist or its home is empty
    """
    try:
        entry = pwd.getpwnam(username)
    except KeyError as e:
        raise UnknownUserError(username, "not found") from e
    if not entry.pw_dir:
        raise UnknownUserError(username, "home is an empty string")
    return entry.pw_dir


def expand_user(path: str) -> str:
    """
    Expand a leading ``~`` or ``~user``.

    Examples:
        ``~/notes`` -> ``/home/me/notes``, ``~bob`` -> ``/home/bob``; paths
        without a leading ``~`` are returned unchanged.
    """
    if not path.startswith("~"):
        return path
    head, sep, rest = path.partition(SEPARATOR)
    username = head[1:] or current_user()
    home = user_home(username)
    logger.debug(f"Expanded {head!r} to {home!r}")
    if not sep:
        return home
    return home + SEPARATOR + rest


def expand(path: str, from_: str = ".", *, getcwd: CwdProvider = os.getcwd) -> str:
    """
    Absolute, normalized form of ``path``.

    ``~`` prefixes are expanded, relative paths are taken relative to
    ``from_``, and ``from_`` itself is taken relative to the current
    working directory when it is relative.
    """
    anchored = concat_if_relative(lambda: from_, expand_user(path))
    return normalize(make_absolute(anchored, getcwd=getcwd))
