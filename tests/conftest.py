"""Shared test fixtures for floor sketch tests."""
import matplotlib

matplotlib.use("Agg")

import pytest

from floorsketch.engine.factory import build_drawer
from floorsketch.sample import draw_sample_bedroom
from floorsketch.surface.recording import RecordingSurface


@pytest.fixture
def surface():
    """1000 x 1000 recording surface (scale 0.1)."""
    return RecordingSurface(1000, 1000)


@pytest.fixture
def drawer(surface):
    """Fresh drawer with an empty log."""
    return build_drawer(surface)


@pytest.fixture
def sample_drawer(surface):
    """Drawer holding the sample bedroom sketch."""
    return draw_sample_bedroom(build_drawer(surface))
