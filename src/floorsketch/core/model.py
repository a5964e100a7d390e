"""Core data models for floor sketching.

This module defines the geometry primitives shared by every part of the
sketching engine: points, orientations, line thicknesses and door types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    """Represents a 2D point in space.

    The same type is used for world points (millimetres) and surface points
    (surface units); the context decides which space a point lives in.

    Attributes:
        x: The x-coordinate of the point.
        y: The y-coordinate of the point.
    """

    x: float
    y: float

    def translated(self, dx: float = 0.0, dy: float = 0.0) -> Point:
        """Return a new point shifted by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


class Orientation(Enum):
    """Direction a door swing or a bed headboard faces."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


class LineThickness(Enum):
    """Stroke weight of a drawn element."""

    THIN = "thin"
    THICK = "thick"


class DoorType(Enum):
    """Hinge side of a door. Recorded on the command, not used by the geometry."""

    LEFT = "left"
    RIGHT = "right"
