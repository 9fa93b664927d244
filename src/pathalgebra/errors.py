"""
Path algebra error classes.

Provides a small taxonomy of the failures the path operations can report.
Every error derives from ``ValueError`` so callers that only care about bad
input can keep catching that.
"""
from __future__ import annotations


class PathAlgebraError(ValueError):
    """Base class for all path algebra errors."""
    pass


class IncompatiblePathsError(PathAlgebraError):
    """
    One operand is absolute and the other relative.
    
    Raised when:
    - make_relative() gets an explicit reference whose kind differs from the path
    """
    
    def __init__(self, path: str, reference: str):
        super().__init__(
            f"make_relative({path!r}, reference={reference!r}): "
            "cannot work on an absolute path and a relative one"
        )
        self.path = path
        self.reference = reference


class LookaheadError(PathAlgebraError):
    """
    The path can only be reached by going above the reference directory.
    
    Raised when the reference still starts with ``..`` once the common prefix
    is dropped, so the answer would depend on what lies above that ``..``.
    """
    
    def __init__(self, path: str, reference: str):
        super().__init__(
            f"make_relative({path!r}, reference={reference!r}): "
            "negative lookahead (goes above the reference directory)"
        )
        self.path = path
        self.reference = reference


class DuplicateExtensionError(PathAlgebraError):
    """An extension was listed more than once while building an extension table."""
    
    def __init__(self, extension: str):
        super().__init__(f"Extension {extension} is defined twice")
        self.extension = extension


class UnknownUserError(PathAlgebraError):
    """
    A ``~user`` prefix could not be expanded.
    
    Raised when the user is missing from the passwd database or has an empty
    home directory.
    """
    
    def __init__(self, username: str, reason: str):
        super().__init__(f"user {username!r}: {reason}")
        self.username = username
        self.reason = reason


__all__ = [
    "PathAlgebraError",
    "IncompatiblePathsError",
    "LookaheadError",
    "DuplicateExtensionError",
    "UnknownUserError",
]
