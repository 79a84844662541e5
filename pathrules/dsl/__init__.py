"""Loading of custom rule-set definitions from YAML documents."""

from pathrules.dsl.loader import load_rules_file, load_rules_yaml

__all__ = ["load_rules_yaml", "load_rules_file"]
