"""Base enums and byte constants shared by the path algebra."""

from __future__ import annotations

from enum import IntEnum

#: Byte value of ``.``, the extension separator and current-directory name.
DOT = 0x2E

#: Byte value of ``:``, the drive-letter delimiter on Windows.
COLON = 0x3A

#: Name of the current directory as a component.
CURRENT_DIR_NAME = b"."

#: Name of the parent directory as a component.
PARENT_DIR_NAME = b".."


class RootSyntax(IntEnum):
    """How a rule-set recognizes the root of an absolute path."""

    #: No root syntax; every path is relative and leading separators are dropped.
    NONE = 0
    #: A single leading separator (``/``).
    SEPARATOR = 1
    #: A leading separator, or an ASCII drive letter, ``:`` and a separator (``C:\\``).
    DRIVE = 2

    @classmethod
    def from_string(cls, value: str) -> "RootSyntax":
        """Parse a string into a RootSyntax enum value.

        Args:
            value: Case-insensitive member name (e.g., "separator", "DRIVE").

        Returns:
            The corresponding RootSyntax enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid root_syntax '{value}'. Valid values are: {valid}"
            ) from None
