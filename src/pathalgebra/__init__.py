"""
pathalgebra: path segmentation, normalization, relative paths and natural
filename ordering over POSIX-style path strings.
"""
from .absolute import concat_if_relative, expand, expand_user, make_absolute, user_home
from .collate import collate, collate_key
from .errors import (
    DuplicateExtensionError,
    IncompatiblePathsError,
    LookaheadError,
    PathAlgebraError,
    UnknownUserError,
)
from .ordering import (
    DEFAULT_EXTENSION_GROUPS,
    DEFAULT_EXTENSION_TABLE,
    ExtensionTable,
    build_extension_table,
    compare,
    filename_compare,
    filename_key,
    sort_filenames,
)
from .relative import is_parent, is_parent_segments, make_relative, parent
from .segments import (
    concat,
    is_absolute,
    is_relative,
    join,
    normalize,
    normalize_segments,
    segment,
)

__version__ = "0.1.0"

__all__ = [
    "segment",
    "join",
    "is_absolute",
    "is_relative",
    "normalize_segments",
    "normalize",
    "concat",
    "make_relative",
    "is_parent",
    "is_parent_segments",
    "parent",
    "collate",
    "collate_key",
    "ExtensionTable",
    "build_extension_table",
    "compare",
    "filename_key",
    "sort_filenames",
    "filename_compare",
    "DEFAULT_EXTENSION_GROUPS",
    "DEFAULT_EXTENSION_TABLE",
    "concat_if_relative",
    "make_absolute",
    "user_home",
    "expand_user",
    "expand",
    "PathAlgebraError",
    "IncompatiblePathsError",
    "LookaheadError",
    "DuplicateExtensionError",
    "UnknownUserError",
]
