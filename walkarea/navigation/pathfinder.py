"""Walk-path finding inside a scene's walkable polygon.

A walker goes straight to its target when the two points see each other.
Otherwise it hugs the boundary: the shortest route bends only at concave
vertices, so a visibility graph over start, goal and the concave vertices
is searched for the shortest path.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import networkx as nx
from shapely.geometry import LineString
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.prepared import PreparedGeometry, prep
from shapely.validation import make_valid

from ..geometry.point import Point, PointLike
from ..geometry.polygon import Polygon

logger = logging.getLogger(__name__)


@dataclass
class WalkPathResult:
    """Result from walk-path finding."""

    success: bool
    path: List[Point]  # Waypoints including start and goal
    length: float
    message: Optional[str] = None

    @property
    def is_direct(self) -> bool:
        return self.success and len(self.path) <= 2

    def to_linestring(self) -> Optional[LineString]:
        """Convert path to Shapely LineString."""
        if not self.path or len(self.path) < 2:
            return None
        return LineString([p.as_tuple() for p in self.path])


def resolve_walk_target(polygon: Polygon, target: PointLike) -> Point:
    """Return target if it is walkable, else the closest boundary point."""
    target = Point.coerce(target)
    if polygon.is_point_inside(target) or polygon.is_point_on_boundary(target):
        return target
    closest = polygon.get_closest_point_to(target)
    logger.debug(f"Target {target} outside walkable area, snapped to {closest}")
    return closest


def walkable_area(polygon: Polygon) -> PreparedGeometry:
    """Prepared Shapely area of polygon, grown by the boundary tolerance.

    The slight buffer keeps segments that run along walls or end on
    snapped boundary points inside the area.
    """
    area = ShapelyPolygon(polygon.get_raw_vertices())
    if not area.is_valid:
        area = make_valid(area)
    return prep(area.buffer(math.sqrt(polygon.config.boundary_tolerance)))


def _is_walkable(area: PreparedGeometry, a: Point, b: Point) -> bool:
    """Check if a walker can go straight from a to b.

    The whole segment must lie in the area; touching the boundary is
    allowed, since waypoints are vertices and snapped targets.
    """
    if a == b:
        return True
    return area.covers(LineString([a.as_tuple(), b.as_tuple()]))


def _distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def _path_length(path: List[Point]) -> float:
    return sum(_distance(a, b) for a, b in zip(path, path[1:]))


def build_visibility_graph(
    polygon: Polygon,
    start: Point,
    goal: Point,
    area: Optional[PreparedGeometry] = None,
) -> nx.Graph:
    """Build the graph of mutually walkable waypoints.

    Nodes are start, goal and the concave vertices; edges carry the
    Euclidean length as 'weight'.
    """
    if area is None:
        area = walkable_area(polygon)

    nodes = [start, goal]
    for vertex in polygon.get_concave_vertex():
        if vertex not in nodes:
            nodes.append(vertex)

    graph = nx.Graph()
    graph.add_nodes_from(nodes)
    for i, a in enumerate(nodes):
        for b in nodes[i + 1:]:
            if _is_walkable(area, a, b):
                graph.add_edge(a, b, weight=_distance(a, b))

    logger.debug(
        f"Visibility graph: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges"
    )
    return graph


def find_walk_path(
    polygon: Polygon,
    start: PointLike,
    goal: PointLike,
) -> WalkPathResult:
    """Find the shortest walk from start to goal inside polygon.

    Args:
        polygon: Walkable area
        start: Walker position (snapped onto the area if outside)
        goal: Requested target (snapped onto the area if outside)

    Returns:
        WalkPathResult with waypoints from start to goal
    """
    start = resolve_walk_target(polygon, start)
    goal = resolve_walk_target(polygon, goal)
    area = walkable_area(polygon)

    # Line of sight alone misses lines leaving through vertices
    if polygon.points_can_see_each_other(start, goal) and _is_walkable(area, start, goal):
        path = [start, goal]
        return WalkPathResult(success=True, path=path, length=_path_length(path))

    graph = build_visibility_graph(polygon, start, goal, area)
    try:
        path = nx.shortest_path(graph, start, goal, weight="weight")
    except nx.NetworkXNoPath:
        logger.warning(f"No walk path from {start} to {goal}")
        return WalkPathResult(
            success=False,
            path=[],
            length=0.0,
            message=f"Goal {goal.as_tuple()} not reachable from {start.as_tuple()}",
        )

    length = _path_length(path)
    logger.info(f"Walk path found: {len(path)} waypoints, length {length:.1f}")
    return WalkPathResult(success=True, path=path, length=length)
