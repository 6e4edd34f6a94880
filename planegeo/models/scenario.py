"""Scenario sets: named batches of queries with optional expected outcomes."""

from pydantic import BaseModel, Field, field_validator

from .query import QueryRequest


class ScenarioExpectation(BaseModel):
    """Expected predicate results; unset fields are not checked."""

    contains_point_a: bool | None = None
    crosses_segment_ab: bool | None = None
    moved_clone: str | None = None


class Scenario(BaseModel):
    """A single named query."""

    name: str = Field(..., description="Unique scenario name within the set")
    description: str = Field(default="", description="What the scenario exercises")
    request: QueryRequest
    expect: ScenarioExpectation | None = Field(
        default=None, description="Expected results, if any"
    )


class ScenarioSet(BaseModel):
    """Collection of scenarios loaded from one YAML file."""

    name: str
    description: str = ""
    scenarios: list[Scenario] = Field(..., description="Scenarios in run order")

    @field_validator("scenarios")
    @classmethod
    def validate_scenarios(cls, v: list[Scenario]) -> list[Scenario]:
        """Require at least one scenario and unique names."""
        if not v:
            raise ValueError("Scenario set must contain at least one scenario")
        names = [s.name for s in v]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate scenario names: {duplicates}")
        return v

    def get_scenario(self, name: str) -> Scenario | None:
        """Get scenario by name."""
        for scenario in self.scenarios:
            if scenario.name == name:
                return scenario
        return None

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "ScenarioSet":
        """Load scenario set from YAML string.

        Raises:
            ValueError: If the content is not YAML, or not a mapping at the top level
        """
        import yaml
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ValueError(f"Scenario set is not valid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(
                f"Scenario set must be a mapping at the top level, got {type(data).__name__}"
            )
        return cls(**data)
