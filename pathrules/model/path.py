"""Immutable structured path value.

A ``Path`` is a root token, a tuple of components and a trailing-separator
flag. It is produced by :func:`pathrules.codec.from_bytes`, by
:func:`make_path`, or by the decomposition and composition operations, and is
never mutated. The root token is stored in the spelling of the rule-set that
produced it (``b"/"``, ``b"\\\\"``, ``b"C:\\\\"``); every other operation is
rule-set agnostic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

if TYPE_CHECKING:
    from pathrules.rules import Rules


class InvalidComponentError(ValueError):
    """Raised when a programmatically built component cannot exist."""


#: Bytes no programmatically built component may contain.
FORBIDDEN_COMPONENT_BYTES = b"\x00/\\"


@dataclass(frozen=True)
class Path:
    """Parsed file path.

    Attributes:
        root: Root token, or None for a relative path.
        components: Non-empty byte strings between separators.
        trailing_separator: True when the path is known to denote a directory.
    """

    root: Optional[bytes] = None
    components: Tuple[bytes, ...] = ()
    trailing_separator: bool = False

    @property
    def is_absolute(self) -> bool:
        return self.root is not None

    @property
    def is_empty(self) -> bool:
        return self.root is None and not self.components and not self.trailing_separator

    @property
    def is_current_directory(self) -> bool:
        return self.root is None and not self.components and self.trailing_separator

    def with_components(
        self, components: Iterable[bytes], trailing_separator: bool
    ) -> Path:
        """Return a path with this root and the given components."""
        components = tuple(components)
        if self.root is not None and not components:
            return Path(self.root, (), True)
        if self.root is None and not components:
            return CURRENT_DIRECTORY if trailing_separator else EMPTY
        return Path(self.root, components, trailing_separator)


#: The empty path: no root, no components, no trailing separator.
EMPTY = Path()

#: The canonical current directory, ``./`` on POSIX.
CURRENT_DIRECTORY = Path(None, (), True)


def forbidden_bytes(rules: Optional[Rules] = None) -> bytes:
    """Return the bytes a built component may not contain under ``rules``.

    Without a rule-set both `/` and `\\` are forbidden, together with NUL.
    """
    if rules is None:
        return FORBIDDEN_COMPONENT_BYTES
    return b"\x00" + bytes(rules.separators)


def check_fragment(fragment: bytes, forbidden: bytes) -> bytes:
    """Return ``fragment`` if it holds none of ``forbidden``.

    A fragment is any byte string that ends up inside a component: a whole
    component, or an extension pasted onto one.

    Raises:
        InvalidComponentError: If ``fragment`` is not bytes or contains a
            forbidden byte.
    """
    if not isinstance(fragment, bytes):
        raise InvalidComponentError(
            f"Component must be bytes, got {type(fragment).__name__}"
        )
    bad = [b for b in fragment if b in forbidden]
    if bad:
        raise InvalidComponentError(
            f"Component {fragment!r} contains forbidden byte {bytes(bad[:1])!r}"
        )
    return fragment


def make_path(
    components: Iterable[bytes],
    root: Optional[bytes] = None,
    trailing_separator: bool = False,
    rules: Optional[Rules] = None,
) -> Path:
    """Build a path from components, checking each one.

    Args:
        components: Component byte strings, outermost first.
        root: Optional root token.
        trailing_separator: Whether the path denotes a directory.
        rules: When given, only its separators and NUL are forbidden in a
            component; otherwise both `/` and `\\` are.

    Returns:
        The assembled path. A root with no components always carries a
        trailing separator.

    Raises:
        InvalidComponentError: If a component is empty or contains a
            separator or a null byte.
    """
    forbidden = forbidden_bytes(rules)
    checked = []
    for component in components:
        check_fragment(component, forbidden)
        if not component:
            raise InvalidComponentError("Component must not be empty")
        checked.append(component)
    return Path(root).with_components(checked, trailing_separator)
