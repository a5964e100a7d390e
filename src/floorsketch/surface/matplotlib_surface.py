"""Matplotlib implementation of the drawing surface.

The surface keeps a canvas-like current path made of subpaths. ``stroke`` turns
every subpath into a line artist and ``fill`` turns every closed-able subpath
into a polygon patch. The single axes spans the whole figure with its y axis
pointing down, so surface units map one-to-one onto figure pixels.
"""

from __future__ import annotations

import math
import re
from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np

from .. import config
from ..core.model import Point

_FONT_PATTERN = re.compile(r"^\s*([0-9]+(?:\.[0-9]+)?)pt\s+(.+?)\s*$")

XY = Tuple[float, float]


def arc_points(
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
    anticlockwise: bool = False,
    segments: int = config.ARC_SEGMENTS,
) -> List[XY]:
    """Tessellate a canvas-style arc into a polyline.

    Args:
        center: Arc center in surface coordinates.
        radius: Arc radius in surface units.
        start_angle: Start angle in radians.
        end_angle: End angle in radians.
        anticlockwise: Sweep towards decreasing angles when True.
        segments: Number of segments used for a full circle.

    Returns:
        List of (x, y) tuples from the start angle to the end angle.
    """
    tau = 2 * math.pi
    if anticlockwise:
        if start_angle - end_angle >= tau:
            sweep = -tau
        else:
            sweep = -((start_angle - end_angle) % tau)
    else:
        if end_angle - start_angle >= tau:
            sweep = tau
        else:
            sweep = (end_angle - start_angle) % tau

    count = max(2, math.ceil(abs(sweep) / tau * segments) + 1)
    angles = np.linspace(start_angle, start_angle + sweep, count)
    xs = center.x + radius * np.cos(angles)
    ys = center.y + radius * np.sin(angles)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def parse_font(font: str) -> Tuple[float, str]:
    """Split a ``"<size>pt <family>"`` font string.

    Raises:
        ValueError: If the font string has another format.
    """
    match = _FONT_PATTERN.match(font)
    if not match:
        raise ValueError(f"Invalid font format: {font}")
    return float(match.group(1)), match.group(2)


class MatplotlibSurface:
    """Drawing surface painting onto a matplotlib figure."""

    def __init__(
        self,
        width: float = config.DEFAULT_SURFACE_WIDTH,
        height: float = config.DEFAULT_SURFACE_HEIGHT,
        dpi: int = config.DEFAULT_DPI,
    ):
        import matplotlib.pyplot as plt

        self._width = width
        self._height = height
        self.dpi = dpi
        self.figure = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.axes = self.figure.add_axes([0, 0, 1, 1])
        self.axes.set_xlim(0, width)
        self.axes.set_ylim(height, 0)
        self.axes.set_axis_off()

        self._subpaths: List[List[XY]] = []
        self._closed: List[bool] = []
        self._stroke_color = config.STROKE_COLOR
        self._fill_color = config.STROKE_COLOR
        self._line_width = 1.0
        self._line_dash: Tuple[float, ...] = ()
        self._font_size, self._font_family = parse_font(config.LABEL_FONT)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    # Path building ---------------------------------------------------------

    def _start_subpath(self, xy: XY) -> None:
        self._subpaths.append([xy])
        self._closed.append(False)

    def begin_path(self) -> None:
        self._subpaths = []
        self._closed = []

    def close_path(self) -> None:
        if not self._subpaths or len(self._subpaths[-1]) < 2:
            return
        self._closed[-1] = True
        self._start_subpath(self._subpaths[-1][0])

    def move_to(self, point: Point) -> None:
        self._start_subpath((point.x, point.y))

    def line_to(self, point: Point) -> None:
        if not self._subpaths:
            self._start_subpath((point.x, point.y))
            return
        self._subpaths[-1].append((point.x, point.y))

    def arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        points = arc_points(center, radius, start_angle, end_angle, anticlockwise)
        if not self._subpaths:
            self._start_subpath(points[0])
            points = points[1:]
        # canvas joins the current point to the arc start with a straight line
        self._subpaths[-1].extend(points)

    def rect(self, origin: Point, width: float, height: float) -> None:
        x, y = origin.x, origin.y
        self._subpaths.append([(x, y), (x + width, y), (x + width, y + height), (x, y + height)])
        self._closed.append(True)
        self._start_subpath((x, y))

    # Painting --------------------------------------------------------------

    def stroke(self) -> None:
        linestyle = (0, self._line_dash) if self._line_dash else "-"
        for points, closed in zip(self._subpaths, self._closed):
            if len(points) < 2:
                continue
            if closed:
                points = points + [points[0]]
            xs, ys = zip(*points)
            self.axes.plot(
                xs,
                ys,
                color=self._stroke_color,
                linewidth=self._line_width,
                linestyle=linestyle,
            )

    def fill(self) -> None:
        from matplotlib.patches import Polygon

        for points in self._subpaths:
            if len(points) < 3:
                continue
            self.axes.add_patch(
                Polygon(points, closed=True, facecolor=self._fill_color, edgecolor="none")
            )

    def clear(self, origin: Point, width: float, height: float) -> None:
        """Erase every artist that reaches into the rectangle.

        A rectangle covering the whole surface removes all lines, patches and
        texts, including those running past the surface edges.
        """
        x0, y0 = origin.x, origin.y
        x1, y1 = x0 + width, y0 + height
        covers_surface = x0 <= 0 and y0 <= 0 and x1 >= self._width and y1 >= self._height

        def overlaps(xy: np.ndarray) -> bool:
            xy = np.asarray(xy, dtype=float).reshape(-1, 2)
            if xy.size == 0:
                return False
            xmin, ymin = xy.min(axis=0)
            xmax, ymax = xy.max(axis=0)
            return bool(xmin <= x1 and xmax >= x0 and ymin <= y1 and ymax >= y0)

        artists = (
            [(line, line.get_xydata()) for line in self.axes.lines]
            + [(patch, patch.get_xy()) for patch in self.axes.patches]
            + [(text, text.get_position()) for text in self.axes.texts]
        )
        for artist, xy in artists:
            if covers_surface or overlaps(xy):
                artist.remove()

    # Style -----------------------------------------------------------------

    def set_stroke_color(self, color: str) -> None:
        self._stroke_color = color

    def set_line_width(self, width: float) -> None:
        self._line_width = width

    def set_fill_color(self, color: str) -> None:
        self._fill_color = color

    def set_line_dash(self, pattern: Sequence[float]) -> None:
        self._line_dash = tuple(pattern)

    def set_font(self, font: str) -> None:
        self._font_size, self._font_family = parse_font(font)

    def stroke_text(self, text: str, position: Point) -> None:
        self.axes.text(
            position.x,
            position.y,
            text,
            color=self._stroke_color,
            fontsize=self._font_size,
            fontfamily=[self._font_family, "sans-serif"],
            va="baseline",
            ha="left",
        )

    # Figure lifecycle --------------------------------------------------------

    def refresh(self) -> None:
        """Ask the figure canvas to repaint at the next idle moment."""
        self.figure.canvas.draw_idle()

    def save(self, output_path: Path) -> None:
        """Write the surface to an image file."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(output_path, dpi=self.dpi)

    def close(self) -> None:
        """Release the matplotlib figure."""
        import matplotlib.pyplot as plt

        plt.close(self.figure)
