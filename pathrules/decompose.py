"""Projections of a path onto its parts.

Every function here is pure. Only the extension builders consult a rule-set,
and only to vet the bytes they insert. Paths returned for a single component
(``filename``, ``dirname``) are relative.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from pathrules.model.path import (
    CURRENT_DIRECTORY,
    EMPTY,
    Path,
    check_fragment,
    forbidden_bytes,
)
from pathrules.types.base import CURRENT_DIR_NAME, DOT, PARENT_DIR_NAME

if TYPE_CHECKING:
    from pathrules.rules import Rules

__all__ = [
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
]


def root(path: Path) -> Path:
    """Return the root of ``path`` alone, or the empty path."""
    if path.root is None:
        return EMPTY
    return Path(path.root, (), True)


def directory(path: Path) -> Path:
    """Return the directory containing the last component of ``path``.

    All components but the last are kept and the result carries a trailing
    separator. A relative path with at most one component yields the current
    directory; a root-only path yields itself.
    """
    if path.root is None and len(path.components) <= 1:
        return CURRENT_DIRECTORY
    return path.with_components(path.components[:-1], True)


def parent(path: Path) -> Path:
    """Return the parent of ``path``. Same as :func:`directory`; fixed on a root."""
    return directory(path)


def filename(path: Path) -> Path:
    """Return the last component of a non-directory path, else the empty path."""
    if path.trailing_separator or not path.components:
        return EMPTY
    return Path(None, path.components[-1:], False)


def dirname(path: Path) -> Path:
    """Return the innermost directory component as a relative directory path.

    For ``/foo/bar/baz.txt`` this is ``bar/``; for ``/foo/bar/`` it is
    ``bar/``. Empty when there is no such component.
    """
    dirs = path.components if path.trailing_separator else path.components[:-1]
    if not dirs:
        return EMPTY
    return Path(None, dirs[-1:], True)


def _split_name(name: bytes) -> Tuple[bytes, Optional[bytes]]:
    """Split one component at its last extension dot."""
    if name in (CURRENT_DIR_NAME, PARENT_DIR_NAME):
        return name, None
    idx = name.rfind(bytes([DOT]))
    if idx <= 0:
        return name, None
    return name[:idx], name[idx + 1 :]


def _replace_last(path: Path, name: bytes) -> Path:
    return Path(path.root, path.components[:-1] + (name,), False)


def split_extension(path: Path) -> Tuple[Path, Optional[bytes]]:
    """Split ``path`` into its stem and its last extension.

    The extension separator is the last ``.`` of the filename that is not its
    first byte, so ``.bashrc`` has no extension and ``foo.`` has the empty
    extension. Directory paths and paths without a filename are returned
    unchanged with no extension.

    Returns:
        ``(stem, extension)`` where ``extension`` is None when absent.
    """
    if path.trailing_separator or not path.components:
        return path, None
    stem, ext = _split_name(path.components[-1])
    if ext is None:
        return path, None
    return _replace_last(path, stem), ext


def extension(path: Path) -> Optional[bytes]:
    """Return the last extension of ``path``, or None."""
    return split_extension(path)[1]


def extensions(path: Path) -> List[bytes]:
    """Return every extension of the filename, outermost last.

    ``archive.tar.gz`` has extensions ``[b"tar", b"gz"]``.
    """
    exts: List[bytes] = []
    current, ext = split_extension(path)
    while ext is not None:
        exts.append(ext)
        current, ext = split_extension(current)
    exts.reverse()
    return exts


def has_extension(path: Path, ext: bytes) -> bool:
    """Return True if the last extension of ``path`` is exactly ``ext``."""
    return extension(path) == ext


def drop_extension(path: Path) -> Path:
    """Return ``path`` without its last extension."""
    return split_extension(path)[0]


def add_extension(path: Path, ext: bytes, rules: Optional[Rules] = None) -> Path:
    """Append ``.ext`` to the filename of ``path``.

    Paths without a filename are returned unchanged.

    Args:
        path: Path whose filename gains the extension.
        ext: Extension bytes, without the leading dot.
        rules: When given, only its separators and NUL are refused in
            ``ext``; otherwise both `/` and `\\` are, as for
            :func:`pathrules.model.path.make_path`.

    Raises:
        InvalidComponentError: If ``ext`` contains a separator or a null byte.
    """
    check_fragment(ext, forbidden_bytes(rules))
    if path.trailing_separator or not path.components:
        return path
    return _replace_last(path, path.components[-1] + bytes([DOT]) + ext)


def replace_extension(
    path: Path, ext: bytes, rules: Optional[Rules] = None
) -> Path:
    """Swap the last extension of ``path`` for ``ext``, adding one if absent."""
    return add_extension(drop_extension(path), ext, rules)


def basename(path: Path) -> Path:
    """Return the filename of ``path`` with its last extension removed."""
    return drop_extension(filename(path))


def split_directories(path: Path) -> List[Path]:
    """Split ``path`` into its root, each directory, and its filename.

    Concatenating the pieces with :func:`pathrules.compose.concat` rebuilds
    ``path``.
    """
    pieces: List[Path] = []
    if path.root is not None:
        pieces.append(root(path))
    dirs = path.components if path.trailing_separator else path.components[:-1]
    pieces.extend(Path(None, (d,), True) for d in dirs)
    name = filename(path)
    if not name.is_empty:
        pieces.append(name)
    if not pieces and path.is_current_directory:
        pieces.append(CURRENT_DIRECTORY)
    return pieces


def absolute(path: Path) -> bool:
    """Return True if ``path`` has a root."""
    return path.root is not None


def relative(path: Path) -> bool:
    """Return True if ``path`` has no root."""
    return path.root is None


def null(path: Path) -> bool:
    """Return True for the empty path."""
    return path.is_empty
