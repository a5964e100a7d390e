"""Sample bedroom sketch used by the CLI and the image generator.

A 5315 x 2770 mm room drawn from its north-west corner, with two windows, a
door in the north-east corner, a double bed and a wardrobe.
"""

from __future__ import annotations

from .core.model import DoorType, Orientation, Point
from .engine.drawer import Drawer


def draw_sample_bedroom(drawer: Drawer) -> Drawer:
    """Append the sample bedroom commands to a drawer.

    Args:
        drawer: The drawer to draw into.

    Returns:
        The same drawer, for chaining.
    """
    return (
        drawer.move_to(Point(0, 0))
        # walls
        .draw_line_vertical(580)
        .draw_window_vertical(1525)
        .draw_line_vertical(665)
        .draw_line_horizontal(1625)
        .draw_window_horizontal(1520)
        .draw_line_horizontal(2170)
        .draw_line_vertical(-2770)
        .draw_line_horizontal(-5315)
        # door
        .move_to(Point(5315, 80))
        .draw_door(800, DoorType.LEFT, Orientation.WEST)
        # bed
        .move_to(Point(800, 0))
        .draw_bed(2120, 2120, Orientation.NORTH)
        # wardrobe
        .draw_line(Point(3720, 0), Point(3720, 2020))
        .draw_line(Point(3720, 2020), Point(4320, 2020))
        .draw_line(Point(4320, 2020), Point(4320, 0))
    )
