"""Drawing surfaces for floor sketching.

This module provides the surface protocol the engine draws on, a recording
surface that captures primitive calls and a matplotlib-backed surface that
produces images and interactive windows.
"""

from .base import DrawingSurface
from .matplotlib_surface import MatplotlibSurface
from .recording import RecordingSurface

__all__ = ["DrawingSurface", "MatplotlibSurface", "RecordingSurface"]
