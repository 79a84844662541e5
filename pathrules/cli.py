"""Command-line interface for pathrules."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path as FsPath
from typing import Any, Dict, List, Optional

import jsonschema
import yaml

from pathrules.codec import from_text, to_text, valid
from pathrules.compose import common_prefix, concat
from pathrules.decompose import absolute, extension, filename
from pathrules.dsl.loader import load_rules_file
from pathrules.logging import cli_log_level, get_logger, set_global_log_level
from pathrules.model.path import Path
from pathrules.normalise import equivalent, normalise
from pathrules.rules import Rules, available_rules, current_rules, get_rules
from pathrules.search_path import split_search_path

logger = get_logger(__name__)

_TEXT_ERRORS = "surrogateescape"


def _decode(rules: Rules, data: Optional[bytes]) -> Optional[str]:
    if data is None:
        return None
    return data.decode(rules.encoding, _TEXT_ERRORS)


def _describe(rules: Rules, path: Path) -> Dict[str, Any]:
    """Return a JSON-friendly summary of one parsed path."""
    return {
        "path": to_text(rules, path),
        "root": _decode(rules, path.root),
        "components": [_decode(rules, c) for c in path.components],
        "trailing_separator": path.trailing_separator,
        "absolute": absolute(path),
        "valid": valid(rules, path),
        "filename": to_text(rules, filename(path)),
        "extension": _decode(rules, extension(path)),
        "normalised": to_text(rules, normalise(rules, path)),
    }


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


def _resolve_rules(name: Optional[str], rules_file: Optional[FsPath]) -> Rules:
    if rules_file is not None:
        load_rules_file(rules_file, replace=True)
    if name is None:
        return current_rules()
    return get_rules(name)


def _run(args: argparse.Namespace) -> None:
    rules = _resolve_rules(args.rules, args.rules_file)
    logger.debug(f"Using rule-set '{rules.name}' for command '{args.command}'")

    if args.command == "inspect":
        _emit([_describe(rules, from_text(rules, p)) for p in args.paths])
    elif args.command == "normalise":
        _emit([to_text(rules, normalise(rules, from_text(rules, p))) for p in args.paths])
    elif args.command == "equivalent":
        same = equivalent(
            rules, from_text(rules, args.left), from_text(rules, args.right)
        )
        _emit({"left": args.left, "right": args.right, "equivalent": same})
        if not same:
            sys.exit(1)
    elif args.command == "split":
        data = args.search_path.encode(rules.encoding, _TEXT_ERRORS)
        _emit([to_text(rules, p) for p in split_search_path(rules, data)])
    elif args.command == "common-prefix":
        paths = [from_text(rules, p) for p in args.paths]
        _emit(to_text(rules, common_prefix(paths)))
    elif args.command == "join":
        _emit(to_text(rules, concat(from_text(rules, p) for p in args.paths)))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathrules`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathrules",
        description="Parse, normalise and compare file paths without touching the filesystem.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--rules",
        "-r",
        default=None,
        help=(
            "Rule-set name (built-in: posix, windows). Defaults to the rule-set"
            " of the running system, overridable with PATHRULES_RULES."
        ),
    )
    parser.add_argument(
        "--rules-file",
        type=FsPath,
        default=None,
        help="YAML file with custom rule-set definitions to register first",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{inspect,normalise,equivalent,split,common-prefix,join}",
        help="Available commands",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show the structure of one or more paths"
    )
    inspect_parser.add_argument("paths", nargs="+", help="Paths to parse")

    normalise_parser = subparsers.add_parser(
        "normalise", help="Print the normal form of each path"
    )
    normalise_parser.add_argument("paths", nargs="+", help="Paths to normalise")

    equivalent_parser = subparsers.add_parser(
        "equivalent", help="Compare two paths; exit status 1 when they differ"
    )
    equivalent_parser.add_argument("left", help="First path")
    equivalent_parser.add_argument("right", help="Second path")

    split_parser = subparsers.add_parser(
        "split", help="Split a search-path value such as $PATH"
    )
    split_parser.add_argument("search_path", help="Search-path value")

    prefix_parser = subparsers.add_parser(
        "common-prefix", help="Print the longest common prefix of the paths"
    )
    prefix_parser.add_argument("paths", nargs="+", help="Paths to compare")

    join_parser = subparsers.add_parser("join", help="Append paths left to right")
    join_parser.add_argument("paths", nargs="+", help="Paths to join")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(cli_log_level(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    try:
        _run(args)
    except FileNotFoundError as e:
        logger.error(f"Rule-set file not found: {e.filename}")
        print(f"ERROR: Rule-set file not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except (jsonschema.ValidationError, yaml.YAMLError) as e:
        logger.error(f"Invalid rule-set file: {type(e).__name__}")
        print(f"ERROR: Invalid rule-set file: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        print(f"Known rule-sets: {', '.join(available_rules())}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
