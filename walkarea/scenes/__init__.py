"""Scene boundary loading from YAML files."""

from .loader import (
    BOUNDARIES_DIR,
    get_boundary_path,
    list_scene_boundaries,
    load_scene_boundary,
    save_scene_boundary,
    validate_scene_yaml,
)

__all__ = [
    "BOUNDARIES_DIR",
    "get_boundary_path",
    "list_scene_boundaries",
    "load_scene_boundary",
    "save_scene_boundary",
    "validate_scene_yaml",
]
