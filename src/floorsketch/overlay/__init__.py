"""Interactive overlays composited over a replayed sketch."""

from .measurement import Measurement, MeasurementOverlay, format_distance, measure

__all__ = ["Measurement", "MeasurementOverlay", "format_distance", "measure"]
