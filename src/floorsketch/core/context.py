"""Drawing context threaded through command rendering.

The context is split in two parts. The immutable part (surface handle and world
base offset) is fixed for the lifetime of a context; the mutable part (scale,
pen point and pen thickness) evolves as commands are folded over it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from typing_extensions import TypedDict

from .model import LineThickness, Point

if TYPE_CHECKING:
    from ..surface.base import DrawingSurface

MUTABLE_FIELDS = ("scale", "current_point", "current_thickness")


class ContextUpdate(TypedDict, total=False):
    """Partial update of the mutable part of a drawing context."""

    scale: float
    current_point: Point
    current_thickness: LineThickness


@dataclass(frozen=True)
class DrawingContext:
    """State a renderer needs to draw one command.

    Attributes:
        surface: Drawing surface receiving primitive calls.
        base: World offset applied before scaling.
        scale: World-to-surface scale factor.
        current_point: Pen position in world coordinates.
        current_thickness: Thickness used when a command does not carry one.
    """

    surface: DrawingSurface
    base: Point
    scale: float
    current_point: Point
    current_thickness: LineThickness


def apply_update(context: DrawingContext, update: ContextUpdate) -> DrawingContext:
    """Merge a partial update into the mutable part of a context.

    Args:
        context: The context to update.
        update: Mapping of mutable field names to new values.

    Returns:
        A new DrawingContext; surface and base are carried over unchanged.
    """
    if not update:
        return context

    changes = {key: value for key, value in update.items() if key in MUTABLE_FIELDS}
    return replace(context, **changes)
