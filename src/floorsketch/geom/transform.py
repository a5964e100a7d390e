"""World/surface coordinate transforms.

World points are shifted by the context base first and scaled second, so the
base is expressed in world millimetres.
"""

from __future__ import annotations

import math

from ..core.context import DrawingContext
from ..core.model import Point


def to_surface_point(point: Point, base: Point, scale: float) -> Point:
    """Map a world point to surface coordinates."""
    return Point((base.x + point.x) * scale, (base.y + point.y) * scale)


def to_surface_length(length: float, scale: float) -> float:
    """Scale a world length to a surface length."""
    return length * scale


def to_world_length(length: float, scale: float) -> float:
    """Scale a surface length back to a world length."""
    return length / scale


def to_world_point(point: Point, base: Point, scale: float) -> Point:
    """Inverse of to_surface_point."""
    return Point(point.x / scale - base.x, point.y / scale - base.y)


def surface_point(point: Point, ctx: DrawingContext) -> Point:
    """Map a world point through the context's base and scale."""
    return to_surface_point(point, ctx.base, ctx.scale)


def surface_length(length: float, ctx: DrawingContext) -> float:
    """Scale a world length with the context's scale."""
    return to_surface_length(length, ctx.scale)


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def midpoint(p1: Point, p2: Point) -> Point:
    """Point halfway between p1 and p2."""
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)
