"""Visualization module for floor sketching.

This module provides functionality to render sketches to images and to view
them in an interactive window with zoom and distance measurement.
"""

from .generator import apply_zoom, generate_sketch_image, measure_world
from .viewer import SketchViewer

__all__ = ["SketchViewer", "apply_zoom", "generate_sketch_image", "measure_world"]
