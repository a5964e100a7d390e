"""Image generation for floor sketches.

This module provides functions to render sketches to PNG images through the
matplotlib surface, optionally zoomed and with a distance measurement overlay.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

from .. import config
from ..core.model import Point
from ..engine.drawer import Drawer
from ..engine.factory import build_drawer
from ..geom.transform import to_surface_point
from ..overlay.measurement import Measurement
from ..sample import draw_sample_bedroom
from ..surface.matplotlib_surface import MatplotlibSurface

LOGGER = logging.getLogger(__name__)

SketchBuilder = Callable[[Drawer], Drawer]


def apply_zoom(drawer: Drawer, steps: int) -> Drawer:
    """Zoom in ``steps`` times, or out for negative steps."""
    for _ in range(abs(steps)):
        if steps > 0:
            drawer.zoom_in()
        else:
            drawer.zoom_out()
    return drawer


def measure_world(drawer: Drawer, start: Point, end: Point) -> Optional[Measurement]:
    """Measure between two world points through the interactive overlay.

    The points are mapped to surface coordinates with the drawer's current
    scale, then fed to the pointer events as a user would.
    """
    ctx = drawer.context
    drawer.on_pointer_down(to_surface_point(start, ctx.base, ctx.scale))
    drawer.on_pointer_move(to_surface_point(end, ctx.base, ctx.scale))
    return drawer.measurement


def generate_sketch_image(
    output_path: Path,
    builder: SketchBuilder = draw_sample_bedroom,
    width: int = config.DEFAULT_SURFACE_WIDTH,
    height: int = config.DEFAULT_SURFACE_HEIGHT,
    zoom: int = 0,
    measure_between: Optional[Tuple[Point, Point]] = None,
) -> bool:
    """Generate a PNG image of a sketch.

    Args:
        output_path: Path where to save the PNG image.
        builder: Function appending the sketch commands to a drawer.
        width: Surface width in pixels.
        height: Surface height in pixels.
        zoom: Number of zoom steps (negative zooms out).
        measure_between: Optional pair of world points to measure.

    Returns:
        True if the image was generated successfully, False otherwise.
    """
    surface = MatplotlibSurface(width, height)
    try:
        drawer = builder(build_drawer(surface))
        apply_zoom(drawer, zoom)
        if measure_between is not None:
            measure_world(drawer, *measure_between)
        surface.save(Path(output_path))
        return True
    except OSError as e:
        LOGGER.error("Error in image generation: %s", e)
        return False
    finally:
        surface.close()
