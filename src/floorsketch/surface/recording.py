"""Surface that records primitive calls instead of painting them."""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from ..core.model import Point

Call = Tuple[str, Tuple[Any, ...]]


class RecordingSurface:
    """Drawing surface keeping an ordered log of every primitive call.

    Used to inspect exactly what a replay sends to a backend, e.g. to check
    that two replays produce the same primitive sequence.
    """

    def __init__(self, width: float = 1000, height: float = 1000):
        self._width = width
        self._height = height
        self.calls: List[Call] = []

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def names(self) -> List[str]:
        """Primitive names in call order."""
        return [name for name, _ in self.calls]

    def reset(self) -> None:
        """Forget recorded calls."""
        self.calls.clear()

    def begin_path(self) -> None:
        self._record("begin_path")

    def close_path(self) -> None:
        self._record("close_path")

    def move_to(self, point: Point) -> None:
        self._record("move_to", point)

    def line_to(self, point: Point) -> None:
        self._record("line_to", point)

    def arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        self._record("arc", center, radius, start_angle, end_angle, anticlockwise)

    def rect(self, origin: Point, width: float, height: float) -> None:
        self._record("rect", origin, width, height)

    def stroke(self) -> None:
        self._record("stroke")

    def fill(self) -> None:
        self._record("fill")

    def clear(self, origin: Point, width: float, height: float) -> None:
        self._record("clear", origin, width, height)

    def set_stroke_color(self, color: str) -> None:
        self._record("set_stroke_color", color)

    def set_line_width(self, width: float) -> None:
        self._record("set_line_width", width)

    def set_fill_color(self, color: str) -> None:
        self._record("set_fill_color", color)

    def set_line_dash(self, pattern: Sequence[float]) -> None:
        self._record("set_line_dash", tuple(pattern))

    def set_font(self, font: str) -> None:
        self._record("set_font", font)

    def stroke_text(self, text: str, position: Point) -> None:
        self._record("stroke_text", text, position)
