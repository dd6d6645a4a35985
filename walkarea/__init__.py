"""walkarea - Walkable-area geometry for point-and-click adventure scenes.

This package provides:
- Polygon queries: convex hull, concave vertices, containment,
  closest boundary point and line of sight
- Walk-path finding over a scene's walkable polygon
- YAML scene boundary loading
- MCP tools for querying walkable areas

Core functionality can be imported without MCP server dependencies:
    from walkarea.geometry import Polygon
    from walkarea.navigation import find_walk_path

To get the MCP server instance:
    from walkarea import get_mcp
    mcp = get_mcp()
"""

__version__ = "0.1.0"


def get_mcp():
    """Get the MCP server instance (lazy import to avoid coupling).

    Returns:
        FastMCP: The configured MCP server instance.
    """
    from .server import mcp
    return mcp


__all__ = ["get_mcp", "__version__"]
