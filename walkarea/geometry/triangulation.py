"""Triangulation adapter backed by Shapely's Delaunay triangulation.

The adapter only marshals vertices as (x, y) pairs and maps the
resulting triangles back to vertex indices. It does not constrain the
triangulation to the polygon boundary, so concave polygons get triangles
that cover their convex hull.
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from shapely.geometry import MultiPoint
from shapely.ops import triangulate

logger = logging.getLogger(__name__)

# Type aliases
RawVertices = list[tuple[float, float]]
Triangle = tuple[int, int, int]


class Triangulator(Protocol):
    """Anything that turns raw vertices into triangle topology."""

    def __call__(self, vertices: RawVertices) -> list[Triangle]:
        ...


def delaunay_triangulate(vertices: RawVertices) -> list[Triangle]:
    """Delaunay-triangulate a vertex list.

    Args:
        vertices: Ordered (x, y) pairs

    Returns:
        Triangles as index triples into vertices. Empty for fewer than
        3 distinct or all-collinear vertices.

    Raises:
        ValueError: If a triangle corner is not one of the input vertices
    """
    if len(vertices) < 3:
        return []

    # Duplicate coordinates map to their first occurrence
    index_of: dict[tuple[float, float], int] = {}
    for i, (x, y) in enumerate(vertices):
        index_of.setdefault((float(x), float(y)), i)

    triangles: list[Triangle] = []
    for poly in triangulate(MultiPoint(vertices)):
        coords = list(poly.exterior.coords)[:3]  # Exclude closing point
        try:
            triangles.append(tuple(index_of[(x, y)] for x, y in coords))
        except KeyError as e:
            raise ValueError(f"Triangle vertex not found in input: {coords}") from e

    logger.debug(f"Triangulated {len(vertices)} vertices into {len(triangles)} triangles")
    return triangles


def to_raw_vertices(points: Sequence) -> RawVertices:
    """Export points as (x, y) pairs."""
    return [(p.x, p.y) for p in points]
