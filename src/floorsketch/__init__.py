"""Floor Sketch - A Python library for sketching floor plans from drawing commands."""

__version__ = "0.1.0"
__author__ = "Marco"
__email__ = "marco@example.com"

from .core.model import DoorType, LineThickness, Orientation, Point
from .engine.drawer import Drawer
from .engine.factory import build_drawer

__all__ = [
    "DoorType",
    "Drawer",
    "LineThickness",
    "Orientation",
    "Point",
    "build_drawer",
]
