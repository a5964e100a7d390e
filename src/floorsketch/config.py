"""
Drawing settings for floor sketches.

All world dimensions are in millimetres, all surface dimensions in surface
units (pixels for the matplotlib surface).
"""

# Scene
SCENE_WIDTH = 10_000
SCENE_HEIGHT = 10_000
BASE_OFFSET = (SCENE_WIDTH / 10, SCENE_HEIGHT / 10)  # world origin shift

# Zoom
ZOOM_FACTOR = 1.1
MIN_SCALE = 1e-4  # zoom_out never goes below this

# Strokes
STROKE_COLOR = "black"
THIN_STROKE_WIDTH = 1
THICK_STROKE_WIDTH = 2

# Windows
WINDOW_WIDTH = 100
WINDOW_FILL = "lightblue"

# Beds
HEADBOARD_WIDTH = 80

# Measurement overlay
OVERLAY_COLOR = "red"
OVERLAY_LINE_WIDTH = 1
CROSS_SIZE = 10
DASH_PATTERN = (5, 3)
LABEL_FONT = "12pt Calibri"
LABEL_OFFSET = (5, -5)
DISTANCE_UNIT = "mm"

# Output surface
DEFAULT_SURFACE_WIDTH = 1200
DEFAULT_SURFACE_HEIGHT = 800
DEFAULT_DPI = 100
ARC_SEGMENTS = 64  # tessellation of a full circle on raster surfaces
