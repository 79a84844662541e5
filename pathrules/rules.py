"""Platform rule-sets.

A :class:`Rules` value captures one platform's lexical path conventions. The
two built-in rule-sets, :data:`POSIX` and :data:`WINDOWS`, are constants;
callers pick one and pass it explicitly to every operation that needs
platform knowledge. Custom rule-sets can be registered by name, usually via
:func:`pathrules.dsl.loader.load_rules_file`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from pathrules.config import SELECTION_CONFIG, RulesSelectionConfig
from pathrules.logging import get_logger
from pathrules.types.base import RootSyntax

logger = get_logger(__name__)

#: Control bytes 0x00-0x1F.
CONTROL_BYTES: FrozenSet[int] = frozenset(range(0x20))


@dataclass(frozen=True)
class Rules:
    """Lexical conventions of one platform.

    Attributes:
        name: Registry name of the rule-set.
        separator: Canonical separator, a single byte.
        alternate_separator: Separator accepted on input and rewritten to
            ``separator`` on output, or None.
        root_syntax: How an absolute path's root is spelled.
        reserved: Byte values forbidden inside a component.
        case_sensitive: Whether :func:`pathrules.normalise.equivalent` compares
            bytes exactly or after ASCII upper-casing.
        search_path_separator: Single byte separating entries of a search path.
        encoding: Text encoding used by ``from_text``/``to_text``.
    """

    name: str
    separator: bytes
    alternate_separator: Optional[bytes] = None
    root_syntax: RootSyntax = RootSyntax.SEPARATOR
    reserved: FrozenSet[int] = field(default_factory=frozenset, repr=False)
    case_sensitive: bool = True
    search_path_separator: bytes = b":"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Reject multi-byte separators."""
        for attr in ("separator", "alternate_separator", "search_path_separator"):
            value = getattr(self, attr)
            if value is not None and len(value) != 1:
                raise ValueError(
                    f"Rules '{self.name}': {attr} must be a single byte, got {value!r}"
                )

    @property
    def separators(self) -> Tuple[int, ...]:
        """Byte values accepted as a separator on input."""
        if self.alternate_separator is None:
            return (self.separator[0],)
        return (self.separator[0], self.alternate_separator[0])

    def is_separator(self, byte: int) -> bool:
        """Return True if ``byte`` separates components under these rules."""
        return byte in self.separators

    def split(self, data: bytes) -> List[bytes]:
        """Split ``data`` on every accepted separator, keeping empty segments."""
        if self.alternate_separator is not None:
            data = data.replace(self.alternate_separator, self.separator)
        return data.split(self.separator)

    def fold_case(self, data: bytes) -> bytes:
        """Return ``data`` as compared by these rules."""
        if self.case_sensitive:
            return data
        return data.upper()


POSIX = Rules(
    name="posix",
    separator=b"/",
    root_syntax=RootSyntax.SEPARATOR,
    reserved=frozenset(b"\x00/"),
    case_sensitive=True,
    search_path_separator=b":",
)

WINDOWS = Rules(
    name="windows",
    separator=b"\\",
    alternate_separator=b"/",
    root_syntax=RootSyntax.DRIVE,
    reserved=CONTROL_BYTES | frozenset(b'/\\?*:|"<>'),
    case_sensitive=False,
    search_path_separator=b";",
)

_REGISTRY: Dict[str, Rules] = {POSIX.name: POSIX, WINDOWS.name: WINDOWS}


def register_rules(rules: Rules, replace: bool = False) -> None:
    """Make ``rules`` available to :func:`get_rules` under its name.

    Args:
        rules: Rule-set to register.
        replace: Allow overwriting an existing custom rule-set of the same name.

    Raises:
        ValueError: If the name is taken and ``replace`` is False, or if the
            name belongs to a built-in rule-set.
    """
    key = rules.name.lower()
    if key in (POSIX.name, WINDOWS.name):
        raise ValueError(f"Cannot replace built-in rule-set '{key}'")
    if key in _REGISTRY and not replace:
        raise ValueError(f"Rule-set '{key}' is already registered")
    _REGISTRY[key] = rules
    logger.debug(f"Registered rule-set '{key}'")


def unregister_rules(name: str) -> None:
    """Remove a custom rule-set from the registry. Unknown names are ignored."""
    key = name.lower()
    if key in (POSIX.name, WINDOWS.name):
        raise ValueError(f"Cannot remove built-in rule-set '{key}'")
    _REGISTRY.pop(key, None)


def available_rules() -> List[str]:
    """Return registered rule-set names, built-ins first."""
    builtins = [POSIX.name, WINDOWS.name]
    return builtins + sorted(k for k in _REGISTRY if k not in builtins)


def get_rules(name: str) -> Rules:
    """Look up a rule-set by case-insensitive name.

    Raises:
        ValueError: If no rule-set of that name is registered.
    """
    try:
        return _REGISTRY[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown rule-set '{name}'. Valid values are: {', '.join(available_rules())}"
        ) from None


def current_rules(
    config: RulesSelectionConfig = SELECTION_CONFIG,
    os_name: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Rules:
    """Return the rule-set for the running operating system.

    The environment variable named by ``config.env_var`` overrides detection.
    """
    name = config.select_name(
        os.name if os_name is None else os_name,
        os.environ if environ is None else environ,
    )
    logger.debug(f"Selected rule-set '{name}'")
    return get_rules(name)
