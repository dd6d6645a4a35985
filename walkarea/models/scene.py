"""Scene walkable-area models."""

from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from ..geometry.config import GeometryConfig
from ..geometry.polygon import MIN_POINTS, Polygon


class SceneBoundary(BaseModel):
    """Walkable area of a scene.

    The boundary closes itself, so the first point is not repeated.
    """

    id: str = Field(..., description="Scene identifier, e.g. LIFTLOBBY")
    description: str = Field(default="", description="Human readable scene name")
    points: list[tuple[float, float]] = Field(
        ..., description="Boundary vertices as [x, y] pairs in screen pixels"
    )
    config: GeometryConfig = Field(
        default_factory=GeometryConfig, description="Geometry query settings"
    )

    @field_validator("points")
    @classmethod
    def validate_points(cls, v: list[tuple[float, float]]) -> list[tuple[float, float]]:
        """Validate the boundary has enough vertices for a polygon."""
        if len(v) < MIN_POINTS:
            raise ValueError(f"Boundary must have at least {MIN_POINTS} points, got {len(v)}")
        return v

    def to_polygon(self) -> Polygon:
        return Polygon(self.points, config=self.config)

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "SceneBoundary":
        data = yaml.safe_load(yaml_content) or {}
        return cls(**data)

    def merge_override(self, override: dict[str, Any]) -> "SceneBoundary":
        """Return a copy with override values merged in (nested dicts merge)."""
        data = self.model_dump()
        _deep_merge(data, override)
        return SceneBoundary(**data)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
