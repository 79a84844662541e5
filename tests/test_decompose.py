"""Tests for root/directory/filename/extension projections."""

import pytest

from pathrules.compose import concat
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
from pathrules.codec import from_bytes, to_bytes
from pathrules.model.path import CURRENT_DIRECTORY, EMPTY, InvalidComponentError
from pathrules.rules import POSIX, WINDOWS


def test_null(posix):
    """Only the path with no root, components or separator is null."""
    assert null(EMPTY)
    assert not null(posix("/"))
    assert not null(CURRENT_DIRECTORY)


@pytest.mark.parametrize(
    "given,expected", [("", ""), ("/", "/"), ("foo", ""), ("/foo", "/")]
)
def test_root(posix, given, expected):
    """The root is kept alone; relative paths have an empty root."""
    assert root(posix(given)) == posix(expected)


@pytest.mark.parametrize(
    "given,expected",
    [
        ("", "./"),
        ("/", "/"),
        ("/foo", "/"),
        ("/foo/bar", "/foo/"),
        ("/foo/bar/", "/foo/"),
        ("a/b/c", "a/b/"),
        (".", "./"),
        ("..", "./"),
        ("foo", "./"),
    ],
)
def test_directory(posix, given, expected):
    """All components but the last survive, with a trailing separator."""
    assert directory(posix(given)) == posix(expected)


def test_directory_current_directory_form():
    """The directory of the empty path is the canonical current directory."""
    assert directory(EMPTY) == CURRENT_DIRECTORY
    assert CURRENT_DIRECTORY.trailing_separator
    assert CURRENT_DIRECTORY.root is None
    assert CURRENT_DIRECTORY.components == ()


@pytest.mark.parametrize(
    "given,expected",
    [
        ("", "./"),
        ("/", "/"),
        ("/foo/bar", "/foo/"),
        ("/foo/bar/", "/foo/"),
        (".", "./"),
        ("..", "./"),
        ("foo", "./"),
    ],
)
def test_parent(posix, given, expected):
    """Parent matches directory on every sample."""
    assert parent(posix(given)) == posix(expected)


def test_parent_is_fixed_on_roots(windows):
    """Repeated parents stop at a drive root."""
    drive = windows("C:\\")
    assert parent(drive) == drive
    assert parent(parent(windows("C:\\a\\b"))) == drive


@pytest.mark.parametrize(
    "given,expected",
    [
        ("", ""),
        ("/", ""),
        ("/foo/", ""),
        ("/foo/bar", "bar"),
        ("/foo/bar.txt", "bar.txt"),
        ("..", ".."),
    ],
)
def test_filename(posix, given, expected):
    """Directory paths have no filename."""
    assert filename(posix(given)) == posix(expected)


@pytest.mark.parametrize(
    "given,expected",
    [
        ("/foo/bar", "bar"),
        ("/foo/bar.txt", "bar"),
        ("/foo/bar.tar.gz", "bar.tar"),
        ("/foo/.bashrc", ".bashrc"),
        ("/foo/", ""),
    ],
)
def test_basename(posix, given, expected):
    """Basename drops only the last extension of the filename."""
    assert basename(posix(given)) == posix(expected)


@pytest.mark.parametrize(
    "given,expected",
    [
        ("/foo/bar/baz.txt", "bar/"),
        ("/foo/bar/", "bar/"),
        ("baz.txt", ""),
        ("/", ""),
    ],
)
def test_dirname(posix, given, expected):
    """Dirname is the innermost directory component."""
    assert dirname(posix(given)) == posix(expected)


def test_absolute_and_relative(posix, windows):
    """A path is absolute exactly when it has a root."""
    for path in (posix("/"), posix("/foo/bar"), windows("C:\\x"), windows("\\x")):
        assert absolute(path)
        assert not relative(path)
    for path in (posix(""), posix("foo/bar"), windows("a\\b"), CURRENT_DIRECTORY):
        assert relative(path)
        assert not absolute(path)


@pytest.mark.parametrize(
    "given,stem,ext",
    [
        ("", "", None),
        ("foo", "foo", None),
        ("foo.", "foo", b""),
        ("foo.a", "foo", b"a"),
        ("foo.a/", "foo.a/", None),
        ("foo.a/bar", "foo.a/bar", None),
        ("foo.a/bar.b", "foo.a/bar", b"b"),
        ("foo.a/bar.b.c", "foo.a/bar.b", b"c"),
        (".bashrc", ".bashrc", None),
        ("/x/.bashrc.bak", "/x/.bashrc", b"bak"),
        ("..", "..", None),
    ],
)
def test_split_extension(posix, given, stem, ext):
    """The last dot past the first byte splits stem and extension."""
    assert split_extension(posix(given)) == (posix(stem), ext)


def test_extension_helpers(posix):
    """Extension helpers agree with split_extension."""
    path = posix("/srv/archive.tar.gz")
    assert extension(path) == b"gz"
    assert extensions(path) == [b"tar", b"gz"]
    assert has_extension(path, b"gz")
    assert not has_extension(path, b"tar")
    assert drop_extension(path) == posix("/srv/archive.tar")
    assert replace_extension(path, b"bz2") == posix("/srv/archive.tar.bz2")
    assert add_extension(posix("/srv/notes"), b"md") == posix("/srv/notes.md")
    assert replace_extension(posix("notes"), b"md") == posix("notes.md")
    assert add_extension(posix("/srv/"), b"md") == posix("/srv/")
    assert extensions(posix(".profile")) == []


@pytest.mark.parametrize(
    "given,pieces",
    [
        ("/foo/bar/baz.txt", ["/", "foo/", "bar/", "baz.txt"]),
        ("foo/bar/", ["foo/", "bar/"]),
        ("", []),
        ("./", ["./"]),
    ],
)
def test_split_directories(posix, given, pieces):
    """Concatenating the pieces rebuilds the path."""
    parts = split_directories(posix(given))
    assert parts == [posix(p) for p in pieces]
    assert concat(parts) == posix(given)


@pytest.mark.parametrize("ext", [b"x/y", b"x\\y", b"x\x00y", b"/"])
def test_add_extension_rejects_separators(posix, ext):
    """An extension holding a separator or NUL never reaches a component."""
    with pytest.raises(InvalidComponentError):
        add_extension(posix("a/b"), ext)
    with pytest.raises(InvalidComponentError):
        replace_extension(posix("a/b.txt"), ext)


def test_add_extension_checks_even_without_filename(posix):
    """The extension is vetted before the filename is looked at."""
    with pytest.raises(InvalidComponentError):
        add_extension(posix("/srv/"), b"x/y")


def test_add_extension_with_rules():
    """A rule-set narrows the refused bytes to its own separators."""
    path = from_bytes(POSIX, b"a/b")
    added = add_extension(path, b"x\\y", POSIX)
    assert added.components == (b"a", b"b.x\\y")
    assert from_bytes(POSIX, to_bytes(POSIX, added)) == added

    with pytest.raises(InvalidComponentError):
        add_extension(path, b"x/y", POSIX)
    with pytest.raises(InvalidComponentError):
        replace_extension(from_bytes(WINDOWS, b"a\\b.txt"), b"x/y", WINDOWS)


def test_added_extension_round_trips(posix):
    """Accepted extensions survive serialization and parsing."""
    for ext in (b"md", b"", b"tar.gz"):
        added = add_extension(posix("a/b"), ext)
        assert from_bytes(POSIX, to_bytes(POSIX, added)) == added
