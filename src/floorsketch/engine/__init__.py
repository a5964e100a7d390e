"""Engine module for floor sketching.

This module provides the drawing commands, their renderers and the Drawer that
records, runs and replays them.
"""

from .commands import (
    CommandType,
    DrawBed,
    DrawDoor,
    DrawingCommand,
    DrawLine,
    DrawWindow,
    MoveTo,
    SetThickness,
)
from .drawer import Drawer, replay, run_command
from .factory import build_drawer, initial_context
from .renderers import get_renderer, list_renderers, register_renderer
from .validators import InvalidCommand

__all__ = [
    "CommandType",
    "DrawBed",
    "DrawDoor",
    "DrawLine",
    "DrawWindow",
    "Drawer",
    "DrawingCommand",
    "InvalidCommand",
    "MoveTo",
    "SetThickness",
    "build_drawer",
    "get_renderer",
    "initial_context",
    "list_renderers",
    "register_renderer",
    "replay",
    "run_command",
]
