"""Tests for the MCP tool functions."""

import asyncio

from walkarea import get_mcp
from walkarea.server import (
    walkarea_describe,
    walkarea_line_of_sight,
    walkarea_list_scenes,
    walkarea_point_inside,
    walkarea_walk_path,
)


SQUARE = [[0, 0], [10, 0], [10, 10], [0, 10]]
L_SHAPE = [[0, 0], [10, 0], [10, 10], [5, 10], [5, 5], [0, 5]]


def run(coro):
    return asyncio.run(coro)


class TestTools:
    """Test tool responses for coordinate and scene boundaries."""

    def test_get_mcp(self):
        """Lazy accessor returns the named server."""
        assert get_mcp().name == "walkarea_mcp"

    def test_point_inside(self):
        """Inside point is its own walk target."""
        result = run(walkarea_point_inside(SQUARE, [5, 5]))
        assert result["success"]
        assert result["inside"]
        assert result["walk_target"] == [5, 5]

    def test_point_outside_resolves_to_boundary(self):
        """Outside point reports the boundary point as walk target."""
        result = run(walkarea_point_inside(SQUARE, [-5, 5]))
        assert not result["inside"]
        assert result["closest_boundary_point"] == [0, 5]
        assert result["walk_target"] == [0, 5]

    def test_line_of_sight(self):
        """Visible in the square, blocked across the notch."""
        assert run(walkarea_line_of_sight(SQUARE, [1, 1], [9, 9]))["visible"]
        assert not run(walkarea_line_of_sight(L_SHAPE, [1, 4], [9.5, 9]))["visible"]

    def test_walk_path(self):
        """Walk path bends at the notch vertex."""
        result = run(walkarea_walk_path(L_SHAPE, [1, 4], [9.5, 9]))
        assert result["success"]
        assert not result["direct"]
        assert result["path"] == [[1, 4], [5, 5], [9.5, 9]]

    def test_describe(self):
        """Describe lists hull, concave vertices and triangles."""
        result = run(walkarea_describe(L_SHAPE))
        assert result["concave_vertices"] == [[5, 5]]
        assert len(result["convex_hull"]) == 5
        assert all(len(t) == 3 for t in result["triangles"])

    def test_scene_name_boundary(self):
        """A scene name can stand in for coordinates."""
        result = run(walkarea_point_inside("lift_lobby", [223, 187]))
        assert result["success"]
        assert result["inside"]

    def test_invalid_boundary(self):
        """Too few points come back as an error dict."""
        result = run(walkarea_describe([[0, 0], [1, 1]]))
        assert not result["success"]
        assert "at least 3 points" in result["error"]

    def test_unknown_scene(self):
        """Unknown scene name comes back as an error dict."""
        result = run(walkarea_line_of_sight("no_such_scene", [0, 0], [1, 1]))
        assert not result["success"]

    def test_list_scenes(self):
        """Shipped scenes are listed."""
        names = [s["name"] for s in run(walkarea_list_scenes())["scenes"]]
        assert "backyard" in names
