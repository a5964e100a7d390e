"""Input validation at the drawing builder boundary.

Renderers assume well-formed numbers. The builder rejects non-finite values
before a command reaches the log.
"""

from __future__ import annotations

import math
from numbers import Real

from ..core.model import Point


class InvalidCommand(ValueError):
    """Raised when a drawing command is built from invalid inputs."""

    pass


def validate_number(value: float, name: str) -> float:
    """Check that a value is a finite real number.

    Args:
        value: The value to check.
        name: Parameter name used in the error message.

    Returns:
        The value as a float.

    Raises:
        InvalidCommand: If the value is not a finite real number.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidCommand(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidCommand(f"{name} must be finite, got {value!r}")
    return float(value)


def validate_point(point: Point, name: str) -> Point:
    """Check that both coordinates of a point are finite numbers."""
    if not isinstance(point, Point):
        raise InvalidCommand(f"{name} must be a Point, got {point!r}")
    validate_number(point.x, f"{name}.x")
    validate_number(point.y, f"{name}.y")
    return point
