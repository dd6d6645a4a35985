"""YAML scene boundary loading and management.

Provides functions to:
- List available scene boundaries
- Load boundaries from YAML files
- Merge overrides into boundaries
"""

from pathlib import Path

import structlog
import yaml

from ..models.scene import SceneBoundary

logger = structlog.get_logger(__name__)

# Default boundaries directory (inside the package for wheel packaging)
BOUNDARIES_DIR = Path(__file__).parent.parent / "boundaries"


def get_boundary_path(name: str, directory: Path | None = None) -> Path:
    """Get the path to a scene boundary file.

    Args:
        name: Boundary name (without .yaml extension)
        directory: Directory to look in (defaults to BOUNDARIES_DIR)

    Returns:
        Path to the boundary YAML file

    Raises:
        FileNotFoundError: If the boundary doesn't exist
    """
    path = (directory or BOUNDARIES_DIR) / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Scene boundary '{name}' not found at {path}")
    return path


def list_scene_boundaries(directory: Path | None = None) -> list[dict[str, str]]:
    """List all available scene boundaries.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    directory = directory or BOUNDARIES_DIR
    boundaries = []

    if not directory.exists():
        logger.warning("boundaries_dir_not_found", path=str(directory))
        return boundaries

    for yaml_file in directory.glob("*.yaml"):
        boundaries.append({
            "name": yaml_file.stem,
            "description": _extract_description(yaml_file),
        })

    return sorted(boundaries, key=lambda b: b["name"])


def _extract_description(yaml_path: Path) -> str:
    """Extract description from first comment line of YAML file."""
    with open(yaml_path) as f:
        first_line = f.readline().strip()
    if first_line.startswith("#"):
        return first_line.lstrip("#").strip()
    return f"Boundary from {yaml_path.name}"


def load_scene_boundary(
    name: str,
    override: dict | None = None,
    directory: Path | None = None,
) -> SceneBoundary:
    """Load a scene boundary from YAML file with optional overrides.

    Args:
        name: Boundary name (without .yaml extension)
        override: Optional dict of values to override
        directory: Directory to look in (defaults to BOUNDARIES_DIR)

    Returns:
        SceneBoundary instance with merged overrides
    """
    path = get_boundary_path(name, directory)

    with open(path) as f:
        yaml_content = f.read()

    boundary = SceneBoundary.from_yaml(yaml_content)
    logger.info("scene_boundary_loaded", name=name, points=len(boundary.points))

    if override:
        boundary = boundary.merge_override(override)
        logger.debug("scene_boundary_overridden", name=name, keys=sorted(override))

    return boundary


def save_scene_boundary(
    boundary: SceneBoundary,
    name: str,
    directory: Path | None = None,
) -> Path:
    """Save a scene boundary to YAML file.

    Args:
        boundary: SceneBoundary instance to save
        name: Filename (without .yaml extension)
        directory: Target directory (defaults to BOUNDARIES_DIR)

    Returns:
        Path to saved file
    """
    path = (directory or BOUNDARIES_DIR) / f"{name}.yaml"

    data = boundary.model_dump(mode="json")

    with open(path, "w") as f:
        if boundary.description:
            # One comment line per description line; the first is listed
            f.writelines(f"# {line}\n" for line in boundary.description.splitlines())
        yaml.dump(data, f, default_flow_style=None, sort_keys=False)

    logger.info("scene_boundary_saved", path=str(path))
    return path


def validate_scene_yaml(yaml_content: str) -> tuple[bool, str | None]:
    """Validate YAML content as a scene boundary.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        SceneBoundary.from_yaml(yaml_content)
        return True, None
    except Exception as e:
        logger.warning("scene_yaml_invalid", error=str(e))
        return False, str(e)
