"""Shared typing constructs for pathrules.

Holds the enum describing root syntaxes and the handful of byte constants the
codec and the decomposition operations agree on. Contains no path logic.
"""

from pathrules.types.base import (
    COLON,
    CURRENT_DIR_NAME,
    DOT,
    PARENT_DIR_NAME,
    RootSyntax,
)

__all__ = [
    # Enums
    "RootSyntax",
    # Constants
    "DOT",
    "COLON",
    "CURRENT_DIR_NAME",
    "PARENT_DIR_NAME",
]
