"""Simple polygon with cached boundary, convex hull and triangulation.

A Polygon never changes its vertices after construction. Derived data is
computed at most once per instance; each cache is filled under a
per-instance lock so concurrent first access cannot observe a partial
value. With ``GeometryConfig(eager=True)`` everything is computed up front.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .config import GeometryConfig
from .hull import build_convex_hull
from .point import Point, PointLike
from .segment import Segment
from .triangulation import Triangle, Triangulator, delaunay_triangulate, to_raw_vertices
from .visibility import points_can_see_each_other

logger = logging.getLogger(__name__)

MIN_POINTS = 3


class InvalidPolygon(ValueError):
    """Raised when a polygon is built from fewer than 3 points."""

    def __init__(self, point_count: int):
        self.point_count = point_count
        super().__init__(
            f"Polygon needs at least {MIN_POINTS} points, got {point_count}"
        )


class Polygon:
    """Walkable area polygon built from an ordered vertex list."""

    def __init__(
        self,
        points: Iterable[PointLike],
        config: Optional[GeometryConfig] = None,
        triangulator: Optional[Triangulator] = None,
    ):
        """Create a polygon.

        Args:
            points: Vertices in boundary order; the boundary closes itself
            config: Query configuration (defaults to GeometryConfig())
            triangulator: Triangulation routine (defaults to Delaunay)

        Raises:
            InvalidPolygon: If fewer than 3 points are given
        """
        coerced = tuple(Point.coerce(p) for p in points)
        if len(coerced) < MIN_POINTS:
            raise InvalidPolygon(len(coerced))
        self._init(coerced, config, triangulator)

        if self.config.eager:
            _ = self.segments
            self.get_convex_hull()
            _ = self.triangles

    def _init(
        self,
        points: tuple[Point, ...],
        config: Optional[GeometryConfig],
        triangulator: Optional[Triangulator],
    ) -> None:
        self._points = points
        self.config = config or GeometryConfig()
        self._triangulator = triangulator or delaunay_triangulate
        self._lock = threading.RLock()
        self._segments: Optional[tuple[Segment, ...]] = None
        self._convex_hull: Optional[Polygon] = None
        self._triangles: Optional[list[Triangle]] = None

    @classmethod
    def _unchecked(
        cls,
        points: tuple[Point, ...],
        config: GeometryConfig,
        triangulator: Optional[Triangulator] = None,
    ) -> Polygon:
        """Wrap points without the size check (hulls of collinear sets)."""
        polygon = cls.__new__(cls)
        polygon._init(points, config, triangulator)
        return polygon

    def __repr__(self) -> str:
        coords = ", ".join(f"({p.x}, {p.y})" for p in self._points)
        return f"Polygon([{coords}])"

    def __len__(self) -> int:
        return len(self._points)

    def _cached(self, attr: str, factory: Callable):
        value = getattr(self, attr)
        if value is None:
            with self._lock:
                value = getattr(self, attr)
                if value is None:
                    value = factory()
                    setattr(self, attr, value)
        return value

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Boundary segments; segment i joins points[i] to points[i + 1], wrapping."""
        return self._cached("_segments", self._create_segments)

    def _create_segments(self) -> tuple[Segment, ...]:
        n = len(self._points)
        return tuple(
            Segment(self._points[i], self._points[(i + 1) % n]) for i in range(n)
        )

    def get_convex_hull(self) -> Polygon:
        """Convex hull as a Polygon, counter-clockwise and strictly convex.

        For collinear input the hull holds fewer than 3 points.
        """
        return self._cached("_convex_hull", self._calculate_convex_hull)

    def _calculate_convex_hull(self) -> Polygon:
        hull_points = tuple(build_convex_hull(self._points))
        if len(hull_points) < MIN_POINTS:
            logger.warning(
                f"Convex hull has only {len(hull_points)} points; polygon vertices are collinear"
            )
        logger.debug(f"Convex hull: {len(hull_points)} of {len(self._points)} points")
        # Hull of a hull is never needed eagerly
        hull_config = self.config.model_copy(update={"eager": False})
        return Polygon._unchecked(hull_points, hull_config, self._triangulator)

    def get_concave_vertex(self) -> list[Point]:
        """Vertices that are not on the convex hull, in original order."""
        hull = self.get_convex_hull()
        return [p for p in self._points if not hull.has_point(p)]

    def has_point(self, point: PointLike, tolerance: Optional[float] = None) -> bool:
        """Check if point is one of the vertices.

        Args:
            point: Point to search for
            tolerance: Absolute coordinate tolerance; defaults to
                config.point_tolerance (0 = exact equality)
        """
        point = Point.coerce(point)
        if tolerance is None:
            tolerance = self.config.point_tolerance
        if tolerance <= 0:
            return point in self._points
        return any(p.is_close(point, tolerance) for p in self._points)

    def is_point_inside(self, point: PointLike) -> bool:
        """Even-odd ray casting containment test.

        Points exactly on the boundary may land on either side.
        """
        point = Point.coerce(point)
        inside = False
        points = self._points
        j = len(points) - 1
        for i in range(len(points)):
            xi, yi = points[i].x, points[i].y
            xj, yj = points[j].x, points[j].y
            j = i
            if yi == yj:
                continue
            if (yi > point.y) != (yj > point.y):
                x_intercept = (xj - xi) * (point.y - yi) / (yj - yi) + xi
                if point.x < x_intercept:
                    inside = not inside
        return inside

    def get_closest_segment(self, point: PointLike) -> Segment:
        """Boundary segment nearest to point; the first one wins on ties."""
        point = Point.coerce(point)
        segments = self.segments
        closest = segments[0]
        min_distance = closest.distance2_to_point(point)
        for segment in segments[1:]:
            distance = segment.distance2_to_point(point)
            if distance < min_distance:
                closest = segment
                min_distance = distance
        return closest

    def get_closest_point_to(self, point: PointLike) -> Point:
        """Closest point on the polygon boundary."""
        point = Point.coerce(point)
        return self.get_closest_segment(point).closest_point_to(point)

    def is_point_on_boundary(self, point: PointLike) -> bool:
        """Check if point lies on the boundary within config.boundary_tolerance."""
        point = Point.coerce(point)
        distance2 = self.get_closest_segment(point).distance2_to_point(point)
        return distance2 <= self.config.boundary_tolerance

    def points_can_see_each_other(self, point_a: PointLike, point_b: PointLike) -> bool:
        """Check if the straight line between two interior points stays inside."""
        return points_can_see_each_other(
            Point.coerce(point_a),
            Point.coerce(point_b),
            self._points,
            self.is_point_inside,
            self.config.edge_test_mode,
        )

    @property
    def triangles(self) -> list[Triangle]:
        """Triangle index triples from the triangulator (memoized)."""
        return self._cached("_triangles", self._triangulate)

    def _triangulate(self) -> list[Triangle]:
        return list(self._triangulator(self.get_raw_vertices()))

    def get_raw_vertices(self) -> list[tuple[float, float]]:
        return to_raw_vertices(self._points)


@dataclass
class PolygonResult:
    """Outcome of building a polygon without raising."""

    polygon: Optional[Polygon] = None
    error: Optional[InvalidPolygon] = None

    @property
    def ok(self) -> bool:
        return self.polygon is not None


def try_create_polygon(
    points: Iterable[PointLike],
    config: Optional[GeometryConfig] = None,
) -> PolygonResult:
    """Build a polygon, returning the InvalidPolygon error instead of raising."""
    try:
        return PolygonResult(polygon=Polygon(points, config=config))
    except InvalidPolygon as e:
        return PolygonResult(error=e)
