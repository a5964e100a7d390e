"""Core data models for floor sketching."""

from .context import ContextUpdate, DrawingContext, apply_update
from .model import DoorType, LineThickness, Orientation, Point

__all__ = [
    "ContextUpdate",
    "DoorType",
    "DrawingContext",
    "LineThickness",
    "Orientation",
    "Point",
    "apply_update",
]
