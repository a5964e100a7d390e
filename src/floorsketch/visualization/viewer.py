"""Interactive matplotlib window for a sketch.

The viewer adapts matplotlib mouse and key events to the Drawer's event hooks:
click places the measurement anchor, moving the mouse measures, Escape cancels,
``+``/``-`` zoom.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.model import Point
from ..engine.drawer import Drawer
from ..surface.matplotlib_surface import MatplotlibSurface

LOGGER = logging.getLogger(__name__)

ZOOM_IN_KEYS = ("+", "=")
ZOOM_OUT_KEYS = ("-",)
CANCEL_KEYS = ("escape",)


class SketchViewer:
    """Bind a Drawer to the events of its matplotlib surface."""

    def __init__(self, drawer: Drawer, surface: MatplotlibSurface):
        self.drawer = drawer
        self.surface = surface
        self._connections: List[int] = []

    def connect(self) -> SketchViewer:
        canvas = self.surface.figure.canvas
        self._connections = [
            canvas.mpl_connect("button_press_event", self.on_button_press),
            canvas.mpl_connect("motion_notify_event", self.on_motion),
            canvas.mpl_connect("key_press_event", self.on_key_press),
        ]
        return self

    def disconnect(self) -> None:
        canvas = self.surface.figure.canvas
        for cid in self._connections:
            canvas.mpl_disconnect(cid)
        self._connections = []

    def _event_point(self, event) -> Optional[Point]:
        if event.inaxes is not self.surface.axes or event.xdata is None or event.ydata is None:
            return None
        return Point(float(event.xdata), float(event.ydata))

    def on_button_press(self, event) -> None:
        point = self._event_point(event)
        if point is None:
            return
        self.drawer.on_pointer_down(point)
        world = self.drawer.world_point(point)
        LOGGER.info("Anchor at (%.0f, %.0f) mm", world.x, world.y)
        self.surface.refresh()

    def on_motion(self, event) -> None:
        if self.drawer.anchor is None:
            return
        point = self._event_point(event)
        if point is None:
            return
        self.drawer.on_pointer_move(point)
        self.surface.refresh()

    def on_key_press(self, event) -> None:
        if event.key in CANCEL_KEYS:
            self.drawer.on_cancel()
        elif event.key in ZOOM_IN_KEYS:
            self.drawer.zoom_in()
        elif event.key in ZOOM_OUT_KEYS:
            self.drawer.zoom_out()
        else:
            return
        LOGGER.debug("Key %s handled, scale %s", event.key, self.drawer.scale)
        self.surface.refresh()

    def show(self) -> None:
        """Connect the events and block on the matplotlib window."""
        import matplotlib.pyplot as plt

        self.connect()
        plt.show()
