"""Reports for the vector and line measurement modes."""

from pydantic import BaseModel, Field


class VectorMeasurements(BaseModel):
    """Measurements of two vectors, each given by a start and end point."""

    lengths: tuple[float, float] = Field(..., description="Length of each vector")
    sum: tuple[int, int] = Field(..., description="Component-wise sum")
    dot: int = Field(..., description="Dot product")
    cross: int = Field(..., description="Cross product (z component)")
    triangle_area: float = Field(..., description="Area of the triangle the vectors span")


class LineMeasurements(BaseModel):
    """Measurements of two lines given by their equation coefficients.

    Exactly one of ``distance`` (parallel lines) and ``intersection`` is set.
    """

    directions: tuple[tuple[float, float], tuple[float, float]] = Field(
        ..., description="Direction vector of each line"
    )
    parallel: bool
    distance: float | None = Field(default=None, description="Gap between parallel lines")
    intersection: tuple[float, float] | None = Field(
        default=None, description="Meeting point of non-parallel lines"
    )
