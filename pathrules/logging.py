"""Logging for pathrules.

Path operations are pure and never log. The rule-set registry, the YAML
loader and the CLI report through loggers from :func:`get_logger`, all of
which hang off a single ``pathrules`` logger with one stderr handler. stdout
is left to the CLI's JSON output.

The starting level comes from ``PATHRULES_LOG_LEVEL`` (see
:class:`pathrules.config.LoggingConfig`); the CLI then picks one from its
``--verbose``/``--quiet`` flags via :func:`cli_log_level`.
"""

import logging
import os
import sys
from typing import Mapping, Optional

from pathrules.config import LOGGING_CONFIG, LoggingConfig

ROOT_LOGGER_NAME = "pathrules"

_configured = False


def _root() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    config: LoggingConfig = LOGGING_CONFIG,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """Attach the single pathrules handler, once.

    Repeated calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Starting level. Defaults to the level named by
            ``config.env_var`` in ``environ``, else ``config.default_level``.
        format_string: Record format. Defaults to ``config.format_string``.
        handler: Destination. Defaults to a stderr ``StreamHandler``.
        config: Logging configuration to read defaults from.
        environ: Environment mapping. Defaults to ``os.environ``.
    """
    global _configured
    if _configured:
        return

    if level is None:
        level = config.initial_level(os.environ if environ is None else environ)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or config.format_string))

    root = _root()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    # pytest's caplog listens on the stdlib root logger
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the pathrules hierarchy.

    Args:
        name: Logger name, normally the calling module's ``__name__``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the pathrules logger and its handlers."""
    setup_root_logger()
    root = _root()
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def cli_log_level(verbose: bool, quiet: bool) -> int:
    """Map the CLI's verbosity flags to a level; ``verbose`` wins."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def enable_debug_logging() -> None:
    """Log everything, including rule-set selection details."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the handler so the next :func:`setup_root_logger` starts over."""
    global _configured
    _configured = False
    root = _root()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
