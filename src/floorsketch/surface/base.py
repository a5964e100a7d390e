"""Drawing surface capability.

The sketching engine never talks to a concrete graphics library. It drives any
object that implements this protocol, passing coordinates that are already
mapped to surface space.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from ..core.model import Point


class DrawingSurface(Protocol):
    """Protocol for canvas-like drawing surfaces.

    Path primitives accumulate into a current path which ``stroke`` and
    ``fill`` paint with the current style; ``begin_path`` discards it.
    """

    @property
    def width(self) -> float:
        """Surface width in surface units."""
        ...

    @property
    def height(self) -> float:
        """Surface height in surface units."""
        ...

    def begin_path(self) -> None: ...

    def close_path(self) -> None: ...

    def move_to(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        """Add a circular arc to the current path.

        Angles are in radians, measured from the positive x axis towards the
        positive y axis (downwards on screen). ``anticlockwise`` selects the
        decreasing-angle direction.
        """
        ...

    def rect(self, origin: Point, width: float, height: float) -> None: ...

    def stroke(self) -> None: ...

    def fill(self) -> None: ...

    def clear(self, origin: Point, width: float, height: float) -> None:
        """Erase everything painted inside the given rectangle."""
        ...

    def set_stroke_color(self, color: str) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_fill_color(self, color: str) -> None: ...

    def set_line_dash(self, pattern: Sequence[float]) -> None:
        """Set the dash pattern; an empty sequence means a solid line."""
        ...

    def set_font(self, font: str) -> None:
        """Set the text font as a CSS-like ``"<size>pt <family>"`` string."""
        ...

    def stroke_text(self, text: str, position: Point) -> None: ...
