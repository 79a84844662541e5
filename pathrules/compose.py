"""Combinators over paths: joining, common prefixes and prefix stripping.

All comparisons here are byte-for-byte. Case-insensitive rule-sets are
handled by :func:`pathrules.normalise.equivalent`, not by these functions.
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable, List, Optional, Sequence, Tuple

from pathrules.model.path import EMPTY, Path
from pathrules.types.base import DOT

__all__ = [
    "append",
    "concat",
    "common_prefix",
    "strip_prefix",
]

# A comparison token: (kind, bytes). Kinds order the structure of a path.
_Token = Tuple[str, bytes]
_ROOT = "root"
_DIR = "dir"
_STEM = "stem"
_EXT = "ext"


def append(left: Path, right: Path) -> Path:
    """Join ``right`` onto ``left``.

    ``left`` is always treated as a directory, whether or not it ends in a
    separator. An absolute ``right`` discards ``left`` entirely. Appending a
    path with no components marks the result as a directory.
    """
    if right.root is not None:
        return right
    trailing = right.trailing_separator or not right.components
    return left.with_components(left.components + right.components, trailing)


def concat(paths: Iterable[Path]) -> Path:
    """Append every path in ``paths`` in order; the empty path for no input."""
    paths = list(paths)
    if not paths:
        return EMPTY
    return reduce(append, paths)


def _tokens(path: Path) -> List[_Token]:
    """Flatten ``path`` into comparable tokens.

    Directory components compare whole. The filename compares as its stem
    followed by each extension, so ``baz.txt.gz`` is a prefix of
    ``baz.txt.gz.bar`` but ``bar`` is not a prefix of ``barbaz``.
    """
    tokens: List[_Token] = []
    if path.root is not None:
        tokens.append((_ROOT, path.root))
    dirs: Tuple[bytes, ...] = path.components
    name: Optional[bytes] = None
    if dirs and not path.trailing_separator:
        dirs, name = dirs[:-1], dirs[-1]
    tokens.extend((_DIR, d) for d in dirs)
    if name is not None:
        idx = name.find(bytes([DOT]), 1)
        if idx == -1:
            tokens.append((_STEM, name))
        else:
            tokens.append((_STEM, name[:idx]))
            tokens.extend((_EXT, e) for e in name[idx + 1 :].split(bytes([DOT])))
    return tokens


def _from_tokens(tokens: Sequence[_Token]) -> Path:
    root: Optional[bytes] = None
    dirs: List[bytes] = []
    name: Optional[bytes] = None
    for kind, value in tokens:
        if kind == _ROOT:
            root = value
        elif kind == _DIR:
            dirs.append(value)
        elif kind == _STEM:
            name = value
        else:
            name = (name or b"") + bytes([DOT]) + value
    if name is None:
        if root is None and not dirs:
            return EMPTY
        return Path(root).with_components(dirs, True)
    return Path(root, tuple(dirs) + (name,), False)


def common_prefix(paths: Iterable[Path]) -> Path:
    """Return the longest path that leads every path in ``paths``.

    Roots and directory components must match exactly; within the filename
    only whole stems and extensions count. An empty input, or any root
    mismatch, yields the empty path. Comparison is raw bytes, without case
    folding.

    Examples (POSIX spelling):
        ``/foo`` and ``/foo/`` share ``/``; ``/foo/`` and ``/foo/`` share
        ``/foo/``; ``/foo/bar/baz.txt.gz`` and ``/foo/bar/baz.txt.gz.bar``
        share ``/foo/bar/baz.txt.gz``.
    """
    paths = list(paths)
    if not paths:
        return EMPTY
    first = paths[0]
    if all(p == first for p in paths[1:]):
        return first

    token_lists = [_tokens(p) for p in paths]
    common: List[_Token] = []
    for column in zip(*token_lists):
        if any(token != column[0] for token in column[1:]):
            break
        common.append(column[0])
    return _from_tokens(common)


def strip_prefix(prefix: Path, path: Path) -> Optional[Path]:
    """Return ``path`` relative to the directory ``prefix``.

    ``prefix`` is treated as a directory. The result is None when ``prefix``
    does not lead ``path`` (different roots, or a component mismatch). A
    ``path`` equal to the prefix yields the empty path.
    """
    if prefix.root != path.root:
        return None
    n = len(prefix.components)
    if path.components[:n] != prefix.components:
        return None
    rest = path.components[n:]
    if not rest:
        return EMPTY
    return Path(None, rest, path.trailing_separator)
