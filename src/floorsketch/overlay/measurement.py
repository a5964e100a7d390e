"""Interactive distance measurement overlay.

The overlay holds at most one anchor point in surface coordinates. It is drawn
on top of a replayed scene and is never recorded in the command log.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Optional

from .. import config
from ..core.model import Point
from ..geom.transform import distance, midpoint, to_world_length
from ..surface.base import DrawingSurface


class Measurement(NamedTuple):
    """Distance between the anchor and the pointer."""

    anchor: Point
    pointer: Point
    surface_distance: float
    world_distance: float
    label: str


def format_distance(world_distance: float) -> str:
    """Format a world distance as a rounded millimetre label, e.g. '5,315 mm'."""
    rounded = math.floor(world_distance + 0.5)
    return f"{rounded:,} {config.DISTANCE_UNIT}"


def measure(anchor: Point, pointer: Point, scale: float) -> Measurement:
    """Measure the world distance between two surface points at a scale."""
    surface_distance = distance(anchor, pointer)
    world_distance = to_world_length(surface_distance, scale)
    return Measurement(
        anchor=anchor,
        pointer=pointer,
        surface_distance=surface_distance,
        world_distance=world_distance,
        label=format_distance(world_distance),
    )


class MeasurementOverlay:
    """Transient anchor state plus the primitives that paint it."""

    def __init__(self):
        self.anchor: Optional[Point] = None
        self.measurement: Optional[Measurement] = None

    @property
    def active(self) -> bool:
        return self.anchor is not None

    def set_anchor(self, point: Point) -> None:
        """Place or replace the anchor; drops any previous measurement."""
        self.anchor = point
        self.measurement = None

    def clear(self) -> None:
        self.anchor = None
        self.measurement = None

    def draw_cross(self, surface: DrawingSurface, point: Point) -> None:
        """Draw the anchor cross marker."""
        size = config.CROSS_SIZE
        surface.set_stroke_color(config.OVERLAY_COLOR)
        surface.set_line_width(config.OVERLAY_LINE_WIDTH)

        surface.begin_path()
        surface.move_to(point.translated(dx=-size))
        surface.line_to(point.translated(dx=size))
        surface.move_to(point.translated(dy=-size))
        surface.line_to(point.translated(dy=size))
        surface.stroke()
        surface.close_path()

    def draw_measurement(self, surface: DrawingSurface, measurement: Measurement) -> None:
        """Draw the dashed guide from anchor to pointer and the distance label."""
        surface.set_stroke_color(config.OVERLAY_COLOR)
        surface.set_line_dash(config.DASH_PATTERN)
        surface.begin_path()
        surface.move_to(measurement.anchor)
        surface.line_to(measurement.pointer)
        surface.stroke()
        surface.close_path()
        surface.set_line_dash(())

        dx, dy = config.LABEL_OFFSET
        surface.set_font(config.LABEL_FONT)
        surface.set_line_width(config.OVERLAY_LINE_WIDTH)
        surface.stroke_text(
            measurement.label,
            midpoint(measurement.anchor, measurement.pointer).translated(dx, dy),
        )
        self.measurement = measurement
