"""Bundled query scenarios."""

from .loader import (
    get_scenario_set_path,
    list_scenario_sets,
    load_scenario_set,
    validate_scenario_yaml,
)

__all__ = [
    "get_scenario_set_path",
    "list_scenario_sets",
    "load_scenario_set",
    "validate_scenario_yaml",
]
