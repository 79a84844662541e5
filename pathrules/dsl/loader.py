"""YAML loader + schema validation for custom rule-set definitions.

A definitions document lists rule-sets under a top-level ``rules`` key::

    rules:
      - name: plan9
        separator: "/"
        root_syntax: separator
        reserved: ["\\0", "/"]
        case_sensitive: true
        search_path_separator: ":"

Documents are validated against the packaged schema
``pathrules/schemas/rules.json`` before being turned into
:class:`~pathrules.rules.Rules` values.
"""

from __future__ import annotations

import codecs
import json
from importlib import resources
from pathlib import Path as FsPath
from typing import Any, Dict, List, Optional, Union

import jsonschema
import yaml

from pathrules.logging import get_logger
from pathrules.rules import CONTROL_BYTES, Rules, register_rules
from pathrules.types.base import RootSyntax

logger = get_logger(__name__)

_CHAR_FIELDS = ("separator", "alternate_separator", "search_path_separator")


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("pathrules.schemas")
        .joinpath("rules.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def _to_byte(value: str, where: str) -> bytes:
    """Encode a one-character string as exactly one byte."""
    try:
        encoded = value.encode("latin-1")
    except UnicodeEncodeError:
        raise ValueError(f"{where}: {value!r} is not a single byte") from None
    return encoded


def _check_encoding(encoding: str, where: str) -> str:
    """Return the canonical codec name for ``encoding``."""
    try:
        return codecs.lookup(encoding).name
    except LookupError:
        raise ValueError(f"{where}: unknown encoding {encoding!r}") from None


def _build_rules(entry: Dict[str, Any]) -> Rules:
    name = entry["name"].lower()
    chars: Dict[str, Optional[bytes]] = {}
    for key in _CHAR_FIELDS:
        value = entry.get(key)
        chars[key] = None if value is None else _to_byte(value, f"{name}.{key}")

    reserved = frozenset(
        _to_byte(c, f"{name}.reserved")[0] for c in entry.get("reserved", [])
    )
    if entry.get("reserved_control", False):
        reserved |= CONTROL_BYTES

    separator = chars["separator"]
    if separator is None:
        raise ValueError(f"{name}.separator: a separator is required")
    # A separator can never appear inside a component
    reserved |= frozenset(separator)
    if chars["alternate_separator"] is not None:
        reserved |= frozenset(chars["alternate_separator"])

    return Rules(
        name=name,
        separator=separator,
        alternate_separator=chars["alternate_separator"],
        root_syntax=RootSyntax.from_string(entry.get("root_syntax", "separator")),
        reserved=reserved,
        case_sensitive=entry.get("case_sensitive", True),
        search_path_separator=chars["search_path_separator"] or b":",
        encoding=_check_encoding(entry.get("encoding", "utf-8"), f"{name}.encoding"),
    )


def load_rules_yaml(yaml_str: str) -> List[Rules]:
    """Load, validate and build rule-sets from a YAML string.

    Args:
        yaml_str: YAML document with a top-level ``rules`` list.

    Returns:
        The rule-sets in document order. Nothing is registered.

    Raises:
        ValueError: If the document is not a mapping, names repeat, a
            single-character field does not encode to one byte, or an
            encoding names no known codec.
        jsonschema.ValidationError: If the document violates the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {"rules": []}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    jsonschema.validate(data, _load_schema())

    seen = set()
    result: List[Rules] = []
    for entry in data["rules"]:
        name = entry["name"].lower()
        if name in seen:
            raise ValueError(f"Duplicate rule-set name '{name}'")
        seen.add(name)
        result.append(_build_rules(entry))

    logger.debug(f"Loaded {len(result)} rule-set definition(s)")
    return result


def load_rules_file(
    path: Union[str, FsPath], register: bool = True, replace: bool = False
) -> List[Rules]:
    """Load rule-sets from a YAML file and optionally register them.

    Args:
        path: Filesystem path of the definitions file.
        register: Register each loaded rule-set with :func:`register_rules`.
        replace: Allow replacing previously registered custom rule-sets.

    Returns:
        The loaded rule-sets.
    """
    text = FsPath(path).read_text(encoding="utf-8")
    loaded = load_rules_yaml(text)
    if register:
        for rules in loaded:
            register_rules(rules, replace=replace)
    logger.info(f"Loaded rule-sets from {path}: {', '.join(r.name for r in loaded)}")
    return loaded
