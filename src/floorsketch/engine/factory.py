"""Drawer construction from a drawing surface."""

from __future__ import annotations

from typing import Mapping, Optional

from .. import config
from ..core.context import DrawingContext
from ..core.model import LineThickness, Point
from ..surface.base import DrawingSurface
from .drawer import Drawer
from .renderers import Renderer


def initial_context(surface: DrawingSurface) -> DrawingContext:
    """Build the starting context for a surface.

    The scale fits the configured scene into the surface; the pen starts at the
    base offset with a thick stroke.
    """
    kx = surface.width / config.SCENE_WIDTH
    ky = surface.height / config.SCENE_HEIGHT
    base = Point(*config.BASE_OFFSET)

    return DrawingContext(
        surface=surface,
        base=base,
        scale=min(kx, ky),
        current_point=base,
        current_thickness=LineThickness.THICK,
    )


def build_drawer(
    surface: DrawingSurface, renderers: Optional[Mapping[str, Renderer]] = None
) -> Drawer:
    """Create a Drawer bound to a surface.

    Args:
        surface: Drawing surface; its size is read once to compute the scale.
        renderers: Optional renderer mapping overriding the registry.

    Returns:
        A Drawer with an empty command log.
    """
    return Drawer(initial_context(surface), renderers)
