"""Query request and report models."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

ShapeKindName = Literal["point", "segment", "ray", "line", "circle", "polygon"]

# Fixed parameter counts; polygons take any even count.
PARAM_COUNTS: dict[str, int] = {
    "point": 2,
    "segment": 4,
    "ray": 4,
    "line": 4,
    "circle": 3,
}


class ShapeSpec(BaseModel):
    """Shape keyword plus its defining integers.

    Parameters per kind:
        point    x y
        segment  x1 y1 x2 y2
        ray      x y px py      (direction is (px, py) - (x, y))
        line     x1 y1 x2 y2    (line through both points)
        circle   x y r
        polygon  x1 y1 ... xn yn
    """

    kind: ShapeKindName = Field(..., description="Shape keyword")
    params: list[int] = Field(default_factory=list, description="Defining integer parameters")

    @model_validator(mode="after")
    def validate_params(self) -> "ShapeSpec":
        """Check the parameter count (and circle radius) for the kind."""
        count = len(self.params)
        if self.kind == "polygon":
            if count % 2 != 0:
                raise ValueError(f"Polygon needs x y pairs, got {count} values")
        elif count != PARAM_COUNTS[self.kind]:
            raise ValueError(
                f"{self.kind} takes {PARAM_COUNTS[self.kind]} parameters, got {count}"
            )
        if self.kind == "circle" and self.params[2] < 0:
            raise ValueError(f"Circle radius must be non-negative, got {self.params[2]}")
        return self


class QueryRequest(BaseModel):
    """One shape and the two query points A and B."""

    shape: ShapeSpec = Field(..., description="Shape to query")
    point_a: tuple[int, int] = Field(..., description="Point A [x, y]")
    point_b: tuple[int, int] = Field(..., description="Point B [x, y]")


class QueryReport(BaseModel):
    """Outcome of the fixed check sequence on one shape."""

    shape: str = Field(..., description="Rendering of the queried shape")
    contains_point_a: bool
    crosses_segment_ab: bool
    moved_clone: str = Field(..., description="Rendering of the clone moved by B - A")
