"""Configuration classes for pathrules components."""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class RulesSelectionConfig:
    """Configuration for choosing the rule-set of the running system."""

    # Environment variable that forces a rule-set by name
    env_var: str = "PATHRULES_RULES"

    # Rule-set used when os.name is "nt"
    nt_rules: str = "windows"

    # Rule-set used on every other system
    default_rules: str = "posix"

    def select_name(self, os_name: str, environ: Mapping[str, str]) -> str:
        """Return the rule-set name for an ``os.name`` value and environment."""
        override: Optional[str] = environ.get(self.env_var)
        if override:
            return override.strip().lower()
        if os_name == "nt":
            return self.nt_rules
        return self.default_rules


# Global configuration instance
SELECTION_CONFIG = RulesSelectionConfig()


@dataclass
class LoggingConfig:
    """Configuration for the ``pathrules`` logger hierarchy."""

    # Environment variable naming the initial level (DEBUG, INFO, ...)
    env_var: str = "PATHRULES_LOG_LEVEL"

    # Level used when the environment names none, or names an unknown one
    default_level: int = logging.INFO

    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def initial_level(self, environ: Mapping[str, str]) -> int:
        """Return the level named by the environment, or the default."""
        name = environ.get(self.env_var, "").strip().upper()
        if not name:
            return self.default_level
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else self.default_level


# Global configuration instance
LOGGING_CONFIG = LoggingConfig()
