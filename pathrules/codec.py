"""Conversion between raw bytes and :class:`~pathrules.model.path.Path` values.

Parsing is total: every byte string maps to exactly one path under a given
rule-set, and nothing here raises for odd input. Callers that need strictness
check :func:`valid` explicitly.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pathrules.model.path import CURRENT_DIRECTORY, EMPTY, Path
from pathrules.rules import Rules
from pathrules.types.base import COLON, CURRENT_DIR_NAME, RootSyntax

__all__ = [
    "from_bytes",
    "to_bytes",
    "from_text",
    "to_text",
    "valid",
    "root_token",
]

_TEXT_ERRORS = "surrogateescape"


def _is_ascii_letter(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def _drive_root(rules: Rules, letter: int) -> bytes:
    return bytes([letter]).upper() + bytes([COLON]) + rules.separator


def _split_root(rules: Rules, data: bytes) -> Tuple[Optional[bytes], bytes]:
    """Return ``(root, remainder)`` for ``data``."""
    if not data or rules.root_syntax == RootSyntax.NONE:
        return None, data
    if rules.is_separator(data[0]):
        return rules.separator, data[1:]
    if (
        rules.root_syntax == RootSyntax.DRIVE
        and len(data) >= 3
        and _is_ascii_letter(data[0])
        and data[1] == COLON
        and rules.is_separator(data[2])
    ):
        return _drive_root(rules, data[0]), data[3:]
    return None, data


def from_bytes(rules: Rules, data: bytes) -> Path:
    """Parse ``data`` into a path.

    Empty segments produced by repeated separators are dropped, an empty last
    segment marks the path as a directory, and a bare root is a root-only
    directory path. A relative path consisting of ``.`` alone is the canonical
    current directory. ``.`` and ``..`` are otherwise ordinary components.

    Args:
        rules: Rule-set describing the byte syntax.
        data: Raw path bytes.

    Returns:
        The parsed path. Never raises for any byte string.
    """
    root, rest = _split_root(rules, bytes(data))
    if not rest:
        return EMPTY if root is None else Path(root, (), True)

    segments = rules.split(rest)
    trailing = segments[-1] == b""
    components = tuple(s for s in segments if s)

    if root is None and components == (CURRENT_DIR_NAME,):
        return CURRENT_DIRECTORY
    return Path(root, (), True).with_components(components, trailing)


def root_token(rules: Rules, root: bytes) -> bytes:
    """Return ``root`` spelled with the canonical separator of ``rules``."""
    if rules.alternate_separator is None:
        return root
    return root.replace(rules.alternate_separator, rules.separator)


def to_bytes(rules: Rules, path: Path) -> bytes:
    """Serialize ``path`` under ``rules``.

    The root token is emitted as stored, with alternate separators rewritten
    to the canonical one. Component bytes are never altered.
    """
    if path.root is None and not path.components:
        return CURRENT_DIR_NAME + rules.separator if path.trailing_separator else b""

    out = root_token(rules, path.root) if path.root is not None else b""
    out += rules.separator.join(path.components)
    if path.components and path.trailing_separator:
        out += rules.separator
    return out


def from_text(rules: Rules, text: str) -> Path:
    """Parse a text path, encoding it with ``rules.encoding``.

    Undecodable bytes smuggled in as lone surrogates (as produced by
    :func:`os.fsdecode`) are restored to their original byte values.
    """
    return from_bytes(rules, text.encode(rules.encoding, _TEXT_ERRORS))


def to_text(rules: Rules, path: Path) -> str:
    """Serialize ``path`` and decode it with ``rules.encoding``."""
    return to_bytes(rules, path).decode(rules.encoding, _TEXT_ERRORS)


def _valid_root(rules: Rules, root: bytes) -> bool:
    if rules.root_syntax == RootSyntax.NONE:
        return False
    if root == rules.separator:
        return True
    return (
        rules.root_syntax == RootSyntax.DRIVE
        and len(root) == 3
        and 0x41 <= root[0] <= 0x5A
        and root[1] == COLON
        and root[2:] == rules.separator
    )


def valid(rules: Rules, path: Path) -> bool:
    """Return True if ``path`` can be spelled under ``rules``.

    A path is invalid when its root does not follow the rule-set's root
    syntax, or a component is empty or contains a reserved byte.
    """
    if path.root is not None and not _valid_root(rules, path.root):
        return False
    for component in path.components:
        if not component:
            return False
        if any(b in rules.reserved for b in component):
            return False
    return True
