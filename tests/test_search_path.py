"""Tests for search-path splitting."""

import pytest

from pathrules.model.path import CURRENT_DIRECTORY
from pathrules.rules import POSIX, WINDOWS
from pathrules.search_path import split_search_path


@pytest.mark.parametrize(
    "raw,expected",
    [
        (b"a:b:c", ["a", "b", "c"]),
        (b"a::b:c", ["a", ".", "b", "c"]),
        (b"/usr/bin:/bin", ["/usr/bin", "/bin"]),
        (b":a:", [".", "a", "."]),
    ],
)
def test_split_search_path_posix(posix, raw, expected):
    """Empty entries become the current directory."""
    assert split_search_path(POSIX, raw) == [posix(p) for p in expected]


def test_split_search_path_windows(windows):
    """Windows search paths split on semicolons."""
    assert split_search_path(WINDOWS, b"a;b;c") == [windows(p) for p in "abc"]
    assert split_search_path(WINDOWS, b"C:\\Windows;c:/tools/") == [
        windows("C:\\Windows"),
        windows("C:\\tools\\"),
    ]


def test_empty_entries_are_current_directory():
    """An empty entry is the canonical current directory."""
    assert split_search_path(WINDOWS, b"a;;b")[1] == CURRENT_DIRECTORY
    assert split_search_path(POSIX, b"") == [CURRENT_DIRECTORY]
