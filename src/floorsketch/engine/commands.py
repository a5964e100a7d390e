"""
Drawing command definitions.

Each command is an immutable record carrying exactly the parameters needed to
reproduce its effect. Commands are tagged with a ``type`` used by the renderer
registry to dispatch them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Union

from ..core.model import DoorType, LineThickness, Orientation, Point


class CommandType(str, Enum):
    """Tags of the built-in drawing commands."""

    MOVE_TO = "moveTo"
    SET_THICKNESS = "setThickness"
    DRAW_LINE = "drawLine"
    DRAW_DOOR = "drawDoor"
    DRAW_WINDOW = "drawWindow"
    DRAW_BED = "drawBed"


def _point_dict(point: Point) -> Dict[str, float]:
    return {"x": point.x, "y": point.y}


@dataclass(frozen=True)
class MoveTo:
    """Moves the pen without drawing."""

    type: ClassVar[CommandType] = CommandType.MOVE_TO

    target: Point

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "target": _point_dict(self.target)}


@dataclass(frozen=True)
class SetThickness:
    """Changes the pen thickness used by later commands."""

    type: ClassVar[CommandType] = CommandType.SET_THICKNESS

    thickness: LineThickness

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "thickness": self.thickness.value}


@dataclass(frozen=True)
class DrawLine:
    """Straight stroke between two explicit world points."""

    type: ClassVar[CommandType] = CommandType.DRAW_LINE

    start: Point
    end: Point
    thickness: LineThickness

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "start": _point_dict(self.start),
            "end": _point_dict(self.end),
            "thickness": self.thickness.value,
        }


@dataclass(frozen=True)
class DrawDoor:
    """Door swing symbol anchored at the pen position."""

    type: ClassVar[CommandType] = CommandType.DRAW_DOOR

    width: float
    door_type: DoorType
    orientation: Orientation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "width": self.width,
            "door_type": self.door_type.value,
            "orientation": self.orientation.value,
        }


@dataclass(frozen=True)
class DrawWindow:
    """Window rectangle starting at the pen position; advances the pen."""

    type: ClassVar[CommandType] = CommandType.DRAW_WINDOW

    length: float
    is_horizontal: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "length": self.length,
            "is_horizontal": self.is_horizontal,
        }


@dataclass(frozen=True)
class DrawBed:
    """Bed outline with headboard anchored at the pen position."""

    type: ClassVar[CommandType] = CommandType.DRAW_BED

    width: float
    length: float
    orientation: Orientation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "width": self.width,
            "length": self.length,
            "orientation": self.orientation.value,
        }


DrawingCommand = Union[MoveTo, SetThickness, DrawLine, DrawDoor, DrawWindow, DrawBed]
