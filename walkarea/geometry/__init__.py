"""Polygon geometry for walkable areas."""

from .config import GeometryConfig
from .hull import build_convex_hull, cross
from .point import Point, PointLike
from .polygon import (
    InvalidPolygon,
    Polygon,
    PolygonResult,
    try_create_polygon,
)
from .segment import Segment
from .triangulation import Triangulator, delaunay_triangulate
from .visibility import (
    EdgeTestMode,
    crosses_boundary,
    points_can_see_each_other,
    segments_cross,
)

__all__ = [
    # Primitives
    "Point",
    "PointLike",
    "Segment",
    # Polygon
    "Polygon",
    "PolygonResult",
    "InvalidPolygon",
    "try_create_polygon",
    "GeometryConfig",
    # Algorithms
    "build_convex_hull",
    "cross",
    "segments_cross",
    "crosses_boundary",
    "points_can_see_each_other",
    "EdgeTestMode",
    # Triangulation
    "Triangulator",
    "delaunay_triangulate",
]
