"""Per-command renderers.

A renderer is a plain function ``(command, context) -> ContextUpdate``. It draws
the command onto ``context.surface`` (already-mapped surface coordinates) and
returns the changes to the mutable part of the context. Renderers keep no state
between calls.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Mapping, Tuple

from .. import config
from ..core.context import ContextUpdate, DrawingContext
from ..core.model import LineThickness, Orientation, Point
from ..geom.transform import surface_length, surface_point
from .commands import (
    CommandType,
    DrawBed,
    DrawDoor,
    DrawLine,
    DrawWindow,
    MoveTo,
    SetThickness,
)

Renderer = Callable[[Any, DrawingContext], ContextUpdate]

STROKE_WIDTHS: Dict[LineThickness, float] = {
    LineThickness.THIN: config.THIN_STROKE_WIDTH,
    LineThickness.THICK: config.THICK_STROKE_WIDTH,
}


def set_stroke_style(thickness: LineThickness, ctx: DrawingContext) -> None:
    """Apply the standard black stroke for a thickness."""
    ctx.surface.set_stroke_color(config.STROKE_COLOR)
    ctx.surface.set_line_width(STROKE_WIDTHS.get(thickness, config.THIN_STROKE_WIDTH))


def render_move_to(command: MoveTo, ctx: DrawingContext) -> ContextUpdate:
    return {"current_point": command.target}


def render_set_thickness(command: SetThickness, ctx: DrawingContext) -> ContextUpdate:
    return {"current_thickness": command.thickness}


def render_line(command: DrawLine, ctx: DrawingContext) -> ContextUpdate:
    """Stroke a straight line between the command's endpoints."""
    set_stroke_style(command.thickness, ctx)

    surface = ctx.surface
    surface.begin_path()
    surface.move_to(surface_point(command.start, ctx))
    surface.line_to(surface_point(command.end, ctx))
    surface.stroke()
    surface.close_path()

    return {}


def window_rect(command: DrawWindow, current: Point) -> Tuple[Point, float, float]:
    """World rectangle of a window centred across its axis.

    Returns:
        Tuple of (origin, width, height) in world units.
    """
    half = config.WINDOW_WIDTH / 2
    if command.is_horizontal:
        return Point(current.x, current.y - half), command.length, config.WINDOW_WIDTH
    return Point(current.x - half, current.y), config.WINDOW_WIDTH, command.length


def render_window(command: DrawWindow, ctx: DrawingContext) -> ContextUpdate:
    """Fill and stroke a window, then advance the pen along the window axis.

    Windows are always drawn thick, whatever the current thickness.
    """
    set_stroke_style(LineThickness.THICK, ctx)
    ctx.surface.set_fill_color(config.WINDOW_FILL)

    origin, width, height = window_rect(command, ctx.current_point)

    surface = ctx.surface
    surface.begin_path()
    surface.rect(
        surface_point(origin, ctx),
        surface_length(width, ctx),
        surface_length(height, ctx),
    )
    surface.fill()
    surface.stroke()
    surface.close_path()

    if command.is_horizontal:
        return {"current_point": ctx.current_point.translated(dx=command.length)}
    return {"current_point": ctx.current_point.translated(dy=command.length)}


def door_segment(command: DrawDoor, current: Point) -> Tuple[Point, Point]:
    """Endpoints of the door leaf for an orientation.

    The west branch only shifts the end point along x. The other branches shift
    both points; the asymmetry is part of the established drawing convention.
    """
    width = command.width
    x, y = current.x, current.y

    if command.orientation == Orientation.NORTH:
        return Point(x + width, y), Point(x + width, y - abs(width))
    if command.orientation == Orientation.EAST:
        return Point(x, y + width), Point(x + abs(width), y + width)
    if command.orientation == Orientation.SOUTH:
        return Point(x + width, y), Point(x + width, y + abs(width))
    return Point(x, y), Point(x - abs(width), y)


def render_door(command: DrawDoor, ctx: DrawingContext) -> ContextUpdate:
    """Draw the door leaf and a quarter swing arc around the pen position."""
    set_stroke_style(ctx.current_thickness, ctx)

    start, end = door_segment(command, ctx.current_point)

    surface = ctx.surface
    surface.begin_path()
    surface.move_to(surface_point(start, ctx))
    surface.line_to(surface_point(end, ctx))
    surface.arc(
        surface_point(ctx.current_point, ctx),
        surface_length(command.width, ctx),
        math.pi,
        math.pi / 2,
        True,
    )
    surface.stroke()
    surface.close_path()

    return {}


def bed_corners(command: DrawBed, current: Point) -> Tuple[Point, Point, Point]:
    """Top-right, bottom-right and bottom-left corners of a bed.

    North/south beds run ``width`` along x and ``length`` along y; east/west
    beds swap the axes.
    """
    x, y = current.x, current.y
    if command.orientation in (Orientation.NORTH, Orientation.SOUTH):
        dx, dy = command.width, command.length
    else:
        dx, dy = command.length, command.width
    return Point(x + dx, y), Point(x + dx, y + dy), Point(x, y + dy)


def headboard_segment(command: DrawBed, current: Point) -> Tuple[Point, Point]:
    """Endpoints of the headboard line, inset from the head edge."""
    inset = config.HEADBOARD_WIDTH
    top_right, bottom_right, bottom_left = bed_corners(command, current)
    x, y = current.x, current.y

    if command.orientation == Orientation.NORTH:
        return Point(x, y + inset), Point(top_right.x, y + inset)
    if command.orientation == Orientation.EAST:
        head_x = top_right.x - inset
        return Point(head_x, top_right.y), Point(head_x, bottom_right.y)
    if command.orientation == Orientation.SOUTH:
        head_y = bottom_left.y - inset
        return Point(x, head_y), Point(bottom_right.x, head_y)
    return Point(x + inset, y), Point(x + inset, bottom_left.y)


def render_bed(command: DrawBed, ctx: DrawingContext) -> ContextUpdate:
    """Draw a bed outline and its headboard."""
    set_stroke_style(LineThickness.THICK, ctx)

    start = ctx.current_point
    top_right, bottom_right, bottom_left = bed_corners(command, start)

    surface = ctx.surface
    surface.begin_path()
    surface.move_to(surface_point(start, ctx))
    for corner in (top_right, bottom_right, bottom_left, start):
        surface.line_to(surface_point(corner, ctx))
    surface.stroke()

    head_start, head_end = headboard_segment(command, start)
    surface.begin_path()
    surface.move_to(surface_point(head_start, ctx))
    surface.line_to(surface_point(head_end, ctx))
    surface.stroke()

    return {}


# Renderer registry
_RENDERERS: Dict[str, Renderer] = {
    CommandType.MOVE_TO: render_move_to,
    CommandType.SET_THICKNESS: render_set_thickness,
    CommandType.DRAW_LINE: render_line,
    CommandType.DRAW_DOOR: render_door,
    CommandType.DRAW_WINDOW: render_window,
    CommandType.DRAW_BED: render_bed,
}


def register_renderer(command_type: str, renderer: Renderer) -> None:
    """Register a renderer for a command tag.

    Args:
        command_type: Tag of the command.
        renderer: Function drawing the command.
    """
    _RENDERERS[command_type] = renderer


def get_renderer(command_type: str) -> Renderer:
    """Get the renderer for a command tag.

    Args:
        command_type: Tag of the command.

    Returns:
        The renderer function.

    Raises:
        KeyError: If no renderer is registered for the tag.
    """
    if command_type not in _RENDERERS:
        raise KeyError(f"Renderer for '{command_type}' is not registered")
    return _RENDERERS[command_type]


def list_renderers() -> list[str]:
    """List all command tags with a registered renderer."""
    return [str(getattr(key, "value", key)) for key in _RENDERERS]


def default_renderers() -> Mapping[str, Renderer]:
    """Return a snapshot of the renderer registry."""
    return dict(_RENDERERS)
