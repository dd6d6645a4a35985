"""FastMCP server exposing walkable-area geometry queries.

Lets tool-calling clients (level editors, scripted playtests) check move
targets and line of sight against a scene boundary.
"""

import logging
import sys
from typing import Any

from mcp.server.fastmcp import FastMCP

from .geometry.point import Point
from .geometry.polygon import Polygon
from .navigation.pathfinder import find_walk_path, resolve_walk_target
from .scenes.loader import list_scene_boundaries, load_scene_boundary

# stdio servers must NOT log to stdout as it interferes with JSON-RPC
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

mcp = FastMCP(
    name="walkarea_mcp",
    instructions="Answer walkable-area questions for adventure game scenes. "
    "Pass a boundary as [[x,y], ...] or a scene name from walkarea_list_scenes.",
)

READ_ONLY = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": False,
}


def _load_polygon(boundary: list[list[float]] | str) -> Polygon:
    """Build a polygon from coordinates or a scene boundary name."""
    if isinstance(boundary, str):
        return load_scene_boundary(boundary).to_polygon()
    return Polygon(boundary)


def _error(e: Exception) -> dict[str, Any]:
    logger.warning(f"Query failed: {e}")
    return {
        "success": False,
        "error": str(e),
        "suggestion": "Boundary needs at least 3 [x, y] points or a known scene name",
    }


def _xy(point: Point) -> list[float]:
    return [point.x, point.y]


@mcp.tool(annotations=READ_ONLY)
async def walkarea_point_inside(
    boundary: list[list[float]] | str,
    point: list[float],
) -> dict[str, Any]:
    """Check whether a point is inside a walkable area.

    Args:
        boundary: Boundary as [[x,y], ...] or a scene name
        point: Query point [x, y]

    Returns:
        Dict with inside flag and the walk target the point resolves to
    """
    try:
        polygon = _load_polygon(boundary)
        inside = polygon.is_point_inside(point)
        return {
            "success": True,
            "inside": inside,
            "closest_boundary_point": _xy(polygon.get_closest_point_to(point)),
            "walk_target": _xy(resolve_walk_target(polygon, point)),
        }
    except (ValueError, FileNotFoundError) as e:
        return _error(e)


@mcp.tool(annotations=READ_ONLY)
async def walkarea_line_of_sight(
    boundary: list[list[float]] | str,
    point_a: list[float],
    point_b: list[float],
) -> dict[str, Any]:
    """Check whether two points inside a walkable area can see each other.

    Args:
        boundary: Boundary as [[x,y], ...] or a scene name
        point_a: First point [x, y]
        point_b: Second point [x, y]
    """
    try:
        polygon = _load_polygon(boundary)
        return {
            "success": True,
            "visible": polygon.points_can_see_each_other(point_a, point_b),
        }
    except (ValueError, FileNotFoundError) as e:
        return _error(e)


@mcp.tool(annotations=READ_ONLY)
async def walkarea_walk_path(
    boundary: list[list[float]] | str,
    start: list[float],
    goal: list[float],
) -> dict[str, Any]:
    """Find the walk path between two points of a walkable area.

    Args:
        boundary: Boundary as [[x,y], ...] or a scene name
        start: Walker position [x, y]
        goal: Requested target [x, y]; snapped to the area if outside

    Returns:
        Dict with waypoints, total length and whether the walk is direct
    """
    try:
        polygon = _load_polygon(boundary)
        result = find_walk_path(polygon, start, goal)
        return {
            "success": result.success,
            "path": [_xy(p) for p in result.path],
            "length": result.length,
            "direct": result.is_direct,
            "message": result.message,
        }
    except (ValueError, FileNotFoundError) as e:
        return _error(e)


@mcp.tool(annotations=READ_ONLY)
async def walkarea_describe(boundary: list[list[float]] | str) -> dict[str, Any]:
    """Describe a walkable area: convex hull, concave vertices and triangles.

    Args:
        boundary: Boundary as [[x,y], ...] or a scene name
    """
    try:
        polygon = _load_polygon(boundary)
        return {
            "success": True,
            "points": [_xy(p) for p in polygon.points],
            "convex_hull": [_xy(p) for p in polygon.get_convex_hull().points],
            "concave_vertices": [_xy(p) for p in polygon.get_concave_vertex()],
            "triangles": [list(t) for t in polygon.triangles],
        }
    except (ValueError, FileNotFoundError) as e:
        return _error(e)


@mcp.tool(annotations=READ_ONLY)
async def walkarea_list_scenes() -> dict[str, Any]:
    """List scene boundaries shipped with the package."""
    return {"scenes": list_scene_boundaries()}


def main():
    """Run the MCP server over stdio."""
    mcp.run()


if __name__ == "__main__":
    main()
