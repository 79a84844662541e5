"""Splitting of search-path values such as ``$PATH``."""

from __future__ import annotations

from typing import List

from pathrules.codec import from_bytes
from pathrules.model.path import CURRENT_DIRECTORY, Path
from pathrules.rules import Rules

__all__ = ["split_search_path"]


def split_search_path(rules: Rules, data: bytes) -> List[Path]:
    """Split a search-path value into paths.

    Entries are separated by ``rules.search_path_separator``. An empty entry
    (leading, trailing or doubled separator) denotes the current directory.

    Args:
        rules: Rule-set that spells both the separator and each entry.
        data: Raw search-path bytes, e.g. ``os.environb[b"PATH"]``.

    Returns:
        One path per entry, in order.
    """
    return [
        from_bytes(rules, entry) if entry else CURRENT_DIRECTORY
        for entry in bytes(data).split(rules.search_path_separator)
    ]
