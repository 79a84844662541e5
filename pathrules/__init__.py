"""pathrules: byte-level file path algebra.

pathrules parses raw byte strings into immutable ``Path`` values under an
explicit platform rule-set, decomposes and composes them, and serializes them
back. It never touches the filesystem.

Primary API:
    POSIX, WINDOWS - Built-in rule-sets; current_rules() picks one for this OS
    from_bytes() / to_bytes() - Total parser and serializer
    valid() - Strictness check for a parsed path
    root(), directory(), parent(), filename(), basename(), split_extension()
    append(), concat(), common_prefix(), strip_prefix()
    normalise(), equivalent()
    split_search_path()

Example:
    from pathrules import POSIX, WINDOWS, equivalent, from_bytes, to_bytes
    from pathrules import directory

    p = from_bytes(POSIX, b"/foo/bar.txt")
    to_bytes(POSIX, directory(p))  # b"/foo/"

    equivalent(
        WINDOWS,
        from_bytes(WINDOWS, b"c://a//bc.txt"),
        from_bytes(WINDOWS, b"C:\\\\A\\\\BC.TXT"),
    )  # True
"""

from __future__ import annotations

from pathrules import cli, logging
from pathrules._version import __version__
from pathrules.codec import from_bytes, from_text, to_bytes, to_text, valid
from pathrules.compose import append, common_prefix, concat, strip_prefix
from pathrules.decompose import (
    absolute,
    add_extension,
    basename,
    directory,
    dirname,
    drop_extension,
    extension,
    extensions,
    filename,
    has_extension,
    null,
    parent,
    relative,
    replace_extension,
    root,
    split_directories,
    split_extension,
)
from pathrules.dsl.loader import load_rules_file, load_rules_yaml
from pathrules.model.path import (
    CURRENT_DIRECTORY,
    EMPTY,
    InvalidComponentError,
    Path,
    make_path,
)
from pathrules.normalise import equivalent, normalise
from pathrules.rules import (
    POSIX,
    WINDOWS,
    Rules,
    available_rules,
    current_rules,
    get_rules,
    register_rules,
    unregister_rules,
)
from pathrules.search_path import split_search_path
from pathrules.types.base import RootSyntax

__all__ = [
    # Version
    "__version__",
    # Rules
    "Rules",
    "RootSyntax",
    "POSIX",
    "WINDOWS",
    "current_rules",
    "get_rules",
    "available_rules",
    "register_rules",
    "unregister_rules",
    "load_rules_yaml",
    "load_rules_file",
    # Model
    "Path",
    "EMPTY",
    "CURRENT_DIRECTORY",
    "make_path",
    "InvalidComponentError",
    # Codec
    "from_bytes",
    "to_bytes",
    "from_text",
    "to_text",
    "valid",
    # Decomposition
    "root",
    "directory",
    "parent",
    "filename",
    "dirname",
    "basename",
    "split_extension",
    "extension",
    "extensions",
    "has_extension",
    "drop_extension",
    "add_extension",
    "replace_extension",
    "split_directories",
    "absolute",
    "relative",
    "null",
    # Composition
    "append",
    "concat",
    "common_prefix",
    "strip_prefix",
    # Normalization
    "normalise",
    "equivalent",
    # Search paths
    "split_search_path",
    # Utilities
    "cli",
    "logging",
]
