"""YAML scenario set loading.

Provides functions to:
- List bundled scenario sets
- Load scenario sets by name or from any YAML file path
- Validate YAML content as a scenario set
"""

import logging
from pathlib import Path

from ..models.scenario import ScenarioSet

logger = logging.getLogger(__name__)

# Bundled scenario sets (inside the package so they ship with the wheel)
SCENARIO_SETS_DIR = Path(__file__).parent.parent / "scenario_sets"


def get_scenario_set_path(name: str = "basic") -> Path:
    """Get the path to a bundled scenario set.

    Args:
        name: Scenario set name (without .yaml extension)

    Returns:
        Path to the scenario set YAML file

    Raises:
        FileNotFoundError: If the scenario set doesn't exist
    """
    path = SCENARIO_SETS_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Scenario set '{name}' not found at {path}")
    return path


def list_scenario_sets() -> list[dict[str, str]]:
    """List all bundled scenario sets.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    scenario_sets = []

    if not SCENARIO_SETS_DIR.exists():
        logger.warning(f"Scenario sets directory not found: {SCENARIO_SETS_DIR}")
        return scenario_sets

    for yaml_file in SCENARIO_SETS_DIR.glob("*.yaml"):
        scenario_sets.append({
            "name": yaml_file.stem,
            "description": _extract_description(yaml_file),
        })

    return sorted(scenario_sets, key=lambda s: s["name"])


def _extract_description(yaml_path: Path) -> str:
    """Extract description from first comment line of YAML file."""
    with open(yaml_path) as f:
        first_line = f.readline().strip()
    if first_line.startswith("#"):
        return first_line.lstrip("#").strip()
    return f"Scenarios from {yaml_path.name}"


def load_scenario_set(name_or_path: str = "basic") -> ScenarioSet:
    """Load a scenario set from a bundled name or a YAML file path.

    Args:
        name_or_path: Bundled set name, or path to a .yaml/.yml file

    Returns:
        Validated ScenarioSet
    """
    candidate = Path(name_or_path)
    if candidate.suffix in (".yaml", ".yml"):
        if not candidate.exists():
            raise FileNotFoundError(f"Scenario file not found: {candidate}")
        path = candidate
    else:
        path = get_scenario_set_path(name_or_path)

    with open(path) as f:
        yaml_content = f.read()

    scenario_set = ScenarioSet.from_yaml(yaml_content)
    logger.debug(f"Loaded {len(scenario_set.scenarios)} scenarios from {path}")
    return scenario_set


def validate_scenario_yaml(yaml_content: str) -> tuple[bool, str | None]:
    """Validate YAML content as a scenario set.

    Args:
        yaml_content: YAML string to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        ScenarioSet.from_yaml(yaml_content)
        return True, None
    except Exception as e:
        return False, str(e)
