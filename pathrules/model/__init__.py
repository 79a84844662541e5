"""Path value model."""

from pathrules.model.path import (
    CURRENT_DIRECTORY,
    EMPTY,
    InvalidComponentError,
    Path,
    make_path,
)

__all__ = [
    "Path",
    "EMPTY",
    "CURRENT_DIRECTORY",
    "make_path",
    "InvalidComponentError",
]
