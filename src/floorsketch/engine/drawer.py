"""Command log interpreter.

The Drawer owns an append-only log of drawing commands and the live drawing
context. Every builder call appends a command and immediately runs it, so the
context always reflects the whole log. A replay clears the surface and folds
the log again from the initial pen state at the current scale.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Iterable, List, Mapping, Optional, Tuple

from .. import config
from ..core.context import DrawingContext, apply_update
from ..core.model import DoorType, LineThickness, Orientation, Point
from ..geom.transform import to_world_point
from ..overlay.measurement import Measurement, MeasurementOverlay, measure
from ..surface.base import DrawingSurface
from .commands import (
    DrawBed,
    DrawDoor,
    DrawingCommand,
    DrawLine,
    DrawWindow,
    MoveTo,
    SetThickness,
)
from .renderers import Renderer, default_renderers
from .validators import validate_number, validate_point

LOGGER = logging.getLogger(__name__)


def run_command(
    command: DrawingCommand,
    context: DrawingContext,
    renderers: Mapping[str, Renderer],
) -> DrawingContext:
    """Render one command and return the updated context.

    Commands without a registered renderer are logged and skipped; the context
    is returned unchanged.
    """
    command_type = getattr(command, "type", None)
    renderer = renderers.get(command_type)

    if renderer is None:
        LOGGER.error("Unhandled command: %s", getattr(command_type, "value", command_type))
        return context

    return apply_update(context, renderer(command, context))


def replay(
    commands: Iterable[DrawingCommand],
    context: DrawingContext,
    renderers: Mapping[str, Renderer],
) -> DrawingContext:
    """Fold a sequence of commands over a starting context."""
    return reduce(lambda ctx, cmd: run_command(cmd, ctx, renderers), commands, context)


class Drawer:
    """Builder-style sketching API over a command log.

    All builder and event methods return the drawer itself so calls can be
    chained.

    Args:
        context: Initial drawing context. Its pen point and thickness are the
            state every replay starts from.
        renderers: Mapping of command tag to renderer. Defaults to the module
            renderer registry.
    """

    def __init__(
        self,
        context: DrawingContext,
        renderers: Optional[Mapping[str, Renderer]] = None,
    ):
        self._context = context
        self._initial_point = context.current_point
        self._initial_thickness = context.current_thickness
        self._renderers = dict(renderers) if renderers is not None else default_renderers()
        self._commands: List[DrawingCommand] = []
        self._overlay = MeasurementOverlay()

    # Read-only state -------------------------------------------------------

    @property
    def commands(self) -> Tuple[DrawingCommand, ...]:
        return tuple(self._commands)

    @property
    def context(self) -> DrawingContext:
        return self._context

    @property
    def surface(self) -> DrawingSurface:
        return self._context.surface

    @property
    def current_point(self) -> Point:
        return self._context.current_point

    @property
    def current_thickness(self) -> LineThickness:
        return self._context.current_thickness

    @property
    def scale(self) -> float:
        return self._context.scale

    @property
    def anchor(self) -> Optional[Point]:
        return self._overlay.anchor

    @property
    def measurement(self) -> Optional[Measurement]:
        return self._overlay.measurement

    def world_point(self, point: Point) -> Point:
        """Map a surface point to world millimetres at the current scale."""
        return to_world_point(point, self._context.base, self._context.scale)

    # Builder ---------------------------------------------------------------

    def move_to(self, target: Point) -> Drawer:
        validate_point(target, "target")
        return self._add_command(MoveTo(target))

    def set_thickness(self, thickness: LineThickness) -> Drawer:
        return self._add_command(SetThickness(LineThickness(thickness)))

    def draw_line(
        self,
        start: Point,
        end: Point,
        thickness: Optional[LineThickness] = None,
    ) -> Drawer:
        """Draw a line between explicit points. The pen does not move.

        Args:
            start: Start point in world coordinates.
            end: End point in world coordinates.
            thickness: Stroke thickness; None uses the current thickness.
        """
        validate_point(start, "start")
        validate_point(end, "end")
        return self._add_command(DrawLine(start, end, self._resolve_thickness(thickness)))

    def draw_line_to(self, target: Point, thickness: Optional[LineThickness] = None) -> Drawer:
        """Draw from the pen position to ``target`` and move the pen there."""
        validate_point(target, "target")
        self.draw_line(self._context.current_point, target, thickness)
        return self.move_to(target)

    def draw_line_horizontal(
        self, length: float, thickness: Optional[LineThickness] = None
    ) -> Drawer:
        validate_number(length, "length")
        return self.draw_line_to(self._context.current_point.translated(dx=length), thickness)

    def draw_line_vertical(
        self, length: float, thickness: Optional[LineThickness] = None
    ) -> Drawer:
        validate_number(length, "length")
        return self.draw_line_to(self._context.current_point.translated(dy=length), thickness)

    def draw_window_horizontal(self, length: float) -> Drawer:
        return self._draw_window(length, True)

    def draw_window_vertical(self, length: float) -> Drawer:
        return self._draw_window(length, False)

    def _draw_window(self, length: float, is_horizontal: bool) -> Drawer:
        validate_number(length, "length")
        return self._add_command(DrawWindow(length, is_horizontal))

    def draw_door(self, width: float, door_type: DoorType, orientation: Orientation) -> Drawer:
        validate_number(width, "width")
        return self._add_command(
            DrawDoor(width, DoorType(door_type), Orientation(orientation))
        )

    def draw_bed(self, width: float, length: float, orientation: Orientation) -> Drawer:
        validate_number(width, "width")
        validate_number(length, "length")
        return self._add_command(DrawBed(width, length, Orientation(orientation)))

    # View ------------------------------------------------------------------

    def zoom_in(self) -> Drawer:
        return self._set_scale(self._context.scale * config.ZOOM_FACTOR)

    def zoom_out(self) -> Drawer:
        return self._set_scale(max(self._context.scale / config.ZOOM_FACTOR, config.MIN_SCALE))

    def _set_scale(self, scale: float) -> Drawer:
        self._context = apply_update(self._context, {"scale": scale})
        return self.redraw()

    def redraw(self) -> Drawer:
        """Clear the surface and replay the whole command log.

        The scale is kept; the pen restarts from its initial state. The
        measurement overlay is not redrawn.
        """
        surface = self._context.surface
        LOGGER.debug("Redrawing scene. Scale: %s", self._context.scale)

        surface.clear(Point(0, 0), surface.width, surface.height)

        start = apply_update(
            self._context,
            {
                "current_point": self._initial_point,
                "current_thickness": self._initial_thickness,
            },
        )
        self._context = replay(self._commands, start, self._renderers)
        return self

    # Measurement events ------------------------------------------------------

    def on_pointer_down(self, point: Point) -> Drawer:
        """Place (or replace) the measurement anchor at a surface point."""
        self.redraw()
        self._overlay.set_anchor(point)
        self._overlay.draw_cross(self._context.surface, point)
        return self

    def on_pointer_move(self, point: Point) -> Drawer:
        """Show the distance from the anchor to a surface point, if anchored."""
        if not self._overlay.active:
            return self

        anchor = self._overlay.anchor
        result = measure(anchor, point, self._context.scale)

        self.redraw()
        self._overlay.draw_cross(self._context.surface, anchor)
        self._overlay.draw_measurement(self._context.surface, result)
        return self

    def on_cancel(self) -> Drawer:
        """Drop the measurement anchor and erase the overlay."""
        self.redraw()
        self._overlay.clear()
        return self

    # Internals ---------------------------------------------------------------

    def _resolve_thickness(self, thickness: Optional[LineThickness]) -> LineThickness:
        if thickness is None:
            return self._context.current_thickness
        return LineThickness(thickness)

    def _add_command(self, command: DrawingCommand) -> Drawer:
        self._commands.append(command)
        self._context = run_command(command, self._context, self._renderers)
        return self
