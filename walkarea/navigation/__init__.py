"""Walk-path navigation over walkable polygons."""

from .pathfinder import (
    WalkPathResult,
    build_visibility_graph,
    find_walk_path,
    resolve_walk_target,
    walkable_area,
)

__all__ = [
    "WalkPathResult",
    "build_visibility_graph",
    "find_walk_path",
    "resolve_walk_target",
    "walkable_area",
]
