"""Geometry utilities for floor sketching.

This module provides the transforms between world millimetres and surface
units, plus the small distance helpers used by the measurement overlay.
"""

from .transform import (
    distance,
    midpoint,
    to_surface_length,
    to_surface_point,
    to_world_length,
    to_world_point,
)

__all__ = [
    "distance",
    "midpoint",
    "to_surface_length",
    "to_surface_point",
    "to_world_length",
    "to_world_point",
]
