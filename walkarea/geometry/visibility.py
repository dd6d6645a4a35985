"""Line-of-sight checks between two points inside a polygon.

Based on the visibility test used for point-and-click pathfinding on 2D
polygonal maps: two interior points see each other when the segment
joining them crosses no boundary edge and its midpoint is still inside.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, Sequence

from .point import Point
from .segment import Segment

logger = logging.getLogger(__name__)


class EdgeTestMode(str, Enum):
    """Which edges the query segment is tested against."""

    # True boundary edges points[i] -> points[(i + 1) % n]
    BOUNDARY = "boundary"
    # Each vertex paired with itself. Such zero-length edges never cross
    # anything, so only the midpoint check can reject a line of sight.
    LEGACY = "legacy"


def segments_cross(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Check if segment a-b properly crosses segment c-d.

    Parallel or collinear segments never cross, and neither do segments
    that only touch at an endpoint.
    """
    denominator = (b.x - a.x) * (d.y - c.y) - (b.y - a.y) * (d.x - c.x)
    if denominator == 0:
        return False

    numerator1 = (a.y - c.y) * (d.x - c.x) - (a.x - c.x) * (d.y - c.y)
    numerator2 = (a.y - c.y) * (b.x - a.x) - (a.x - c.x) * (b.y - a.y)
    if numerator1 == 0 or numerator2 == 0:
        return False

    r = numerator1 / denominator
    s = numerator2 / denominator
    return 0 < r < 1 and 0 < s < 1


def iter_test_edges(
    points: Sequence[Point],
    mode: EdgeTestMode = EdgeTestMode.BOUNDARY,
) -> Iterable[tuple[Point, Point]]:
    """Yield the edges a line of sight is tested against."""
    n = len(points)
    for i in range(n):
        if mode is EdgeTestMode.LEGACY:
            yield points[i], points[i % n]
        else:
            yield points[i], points[(i + 1) % n]


def crosses_boundary(
    a: Point,
    b: Point,
    points: Sequence[Point],
    mode: EdgeTestMode = EdgeTestMode.BOUNDARY,
) -> bool:
    """Check if segment a-b properly crosses any tested polygon edge."""
    for c, d in iter_test_edges(points, mode):
        if segments_cross(a, b, c, d):
            return True
    return False


def points_can_see_each_other(
    point_a: Point,
    point_b: Point,
    points: Sequence[Point],
    is_inside: Callable[[Point], bool],
    mode: EdgeTestMode = EdgeTestMode.BOUNDARY,
) -> bool:
    """Check mutual visibility of two points inside a polygon.

    Args:
        point_a: First query point
        point_b: Second query point
        points: Polygon vertices in boundary order
        is_inside: Containment test for the same polygon
        mode: Edge set to test the connecting segment against

    Returns:
        True if both points are inside and the segment between them
        stays inside the polygon
    """
    if not is_inside(point_a) or not is_inside(point_b):
        return False
    if point_a == point_b:
        return True

    if crosses_boundary(point_a, point_b, points, mode):
        logger.debug(f"Line of sight {point_a} -> {point_b} crosses the boundary")
        return False

    return is_inside(Segment(point_a, point_b).middle_point())
