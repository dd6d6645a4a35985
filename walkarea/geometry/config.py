"""Geometry query configuration."""

from pydantic import BaseModel, Field

from .visibility import EdgeTestMode


class GeometryConfig(BaseModel):
    """Tunable behaviour of polygon queries.

    Defaults give exact coordinate matching, true boundary edges for
    line-of-sight checks, and lazily computed caches.
    """

    edge_test_mode: EdgeTestMode = Field(
        default=EdgeTestMode.BOUNDARY,
        description="Edges tested for line of sight: 'boundary' or 'legacy' (vertex to itself)",
    )
    point_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        description="Absolute tolerance for coordinate matching (0 = exact equality)",
    )
    eager: bool = Field(
        default=False,
        description="Compute segments, convex hull and triangles at construction",
    )
    boundary_tolerance: float = Field(
        default=1e-9,
        ge=0.0,
        description="Squared distance under which a point counts as lying on the boundary",
    )
