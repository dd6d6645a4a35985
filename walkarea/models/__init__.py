"""Pydantic models for walkarea."""

from .scene import SceneBoundary

__all__ = [
    "SceneBoundary",
]
