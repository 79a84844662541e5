"""Canonical forms and rule-set aware comparison.

``normalise`` is purely lexical and never resolves ``..`` components.
"""

from __future__ import annotations

from typing import List, Optional

from pathrules.codec import root_token
from pathrules.model.path import CURRENT_DIRECTORY, EMPTY, Path
from pathrules.rules import Rules
from pathrules.types.base import COLON, CURRENT_DIR_NAME, RootSyntax

__all__ = [
    "normalise",
    "equivalent",
]


def _normalise_root(rules: Rules, root: Optional[bytes]) -> Optional[bytes]:
    if root is None:
        return None
    token = root_token(rules, root)
    if rules.root_syntax == RootSyntax.DRIVE and len(token) >= 2 and token[1] == COLON:
        token = token[:1].upper() + token[1:]
    return token


def normalise(rules: Rules, path: Path) -> Path:
    """Return the canonical spelling of ``path`` under ``rules``.

    - separators inside components are split out and empty components dropped;
    - the root uses the canonical separator and an upper-case drive letter;
    - ``.`` components are dropped unless one ends a path with no trailing
      separator (``/.`` stays ``/.``), and a relative path that is just ``.``
      becomes the current directory;
    - a path with components loses its trailing separator;
    - ``..`` components and component case are left untouched.

    The result is a fixed point: ``normalise(r, normalise(r, p)) == normalise(r, p)``.
    """
    root = _normalise_root(rules, path.root)
    parts: List[bytes] = [
        piece for component in path.components for piece in rules.split(component) if piece
    ]

    last = len(parts) - 1
    kept = [
        part
        for i, part in enumerate(parts)
        if part != CURRENT_DIR_NAME or (i == last and not path.trailing_separator)
    ]

    if root is None and kept == [CURRENT_DIR_NAME]:
        return CURRENT_DIRECTORY
    if kept:
        return Path(root, tuple(kept), False)
    if root is not None:
        return Path(root, (), True)
    if parts or path.trailing_separator:
        return CURRENT_DIRECTORY
    return EMPTY


def _fold(rules: Rules, path: Path) -> Path:
    return Path(
        None if path.root is None else rules.fold_case(path.root),
        tuple(rules.fold_case(c) for c in path.components),
        path.trailing_separator,
    )


def equivalent(rules: Rules, left: Path, right: Path) -> bool:
    """Return True if ``left`` and ``right`` spell the same path under ``rules``.

    Both sides are normalised and, for case-insensitive rule-sets, ASCII
    upper-cased before a structural comparison. This is syntactic sameness,
    not filesystem identity: ``foo/bar/../baz`` and ``foo/baz`` differ.
    """
    return _fold(rules, normalise(rules, left)) == _fold(rules, normalise(rules, right))
