"""Tests for the measurement overlay and the drawer's pointer events."""
import pytest

from floorsketch.core.model import Point
from floorsketch.overlay.measurement import MeasurementOverlay, format_distance, measure
from floorsketch.surface.recording import RecordingSurface


def red_calls(surface):
    return [call for call in surface.calls if call == ("set_stroke_color", ("red",))]


@pytest.mark.parametrize(
    "distance,label",
    [
        (0, "0 mm"),
        (999.4, "999 mm"),
        (2.5, "3 mm"),
        (1234.6, "1,235 mm"),
        (5315.000000000001, "5,315 mm"),
        (1_000_000, "1,000,000 mm"),
    ],
)
def test_format_distance(distance, label):
    assert format_distance(distance) == label


def test_measure_converts_with_scale():
    result = measure(Point(0, 0), Point(30, 40), 0.1)
    assert result.surface_distance == pytest.approx(50)
    assert result.world_distance == pytest.approx(500)
    assert result.label == "500 mm"


class TestOverlayPrimitives:
    def test_cross_marker(self):
        surface = RecordingSurface()
        MeasurementOverlay().draw_cross(surface, Point(100, 100))

        assert surface.calls == [
            ("set_stroke_color", ("red",)),
            ("set_line_width", (1,)),
            ("begin_path", ()),
            ("move_to", (Point(90, 100),)),
            ("line_to", (Point(110, 100),)),
            ("move_to", (Point(100, 90),)),
            ("line_to", (Point(100, 110),)),
            ("stroke", ()),
            ("close_path", ()),
        ]

    def test_dashed_guide_and_label(self):
        surface = RecordingSurface()
        overlay = MeasurementOverlay()
        result = measure(Point(100, 100), Point(300, 100), 0.1)

        overlay.draw_measurement(surface, result)

        assert surface.calls[1] == ("set_line_dash", ((5, 3),))
        assert ("set_line_dash", ((),)) in surface.calls
        assert ("set_font", ("12pt Calibri",)) in surface.calls
        assert surface.calls[-1] == ("stroke_text", ("2,000 mm", Point(205, 95)))
        assert overlay.measurement == result

    def test_set_anchor_drops_measurement(self):
        overlay = MeasurementOverlay()
        overlay.measurement = measure(Point(0, 0), Point(1, 1), 1.0)
        overlay.set_anchor(Point(5, 5))
        assert overlay.active
        assert overlay.measurement is None


class TestPointerEvents:
    def test_pointer_down_redraws_then_marks_anchor(self, sample_drawer, surface):
        surface.reset()
        sample_drawer.on_pointer_down(Point(100, 100))

        assert surface.names()[0] == "clear"
        assert surface.calls[-4:-2] == [
            ("move_to", (Point(100, 90),)),
            ("line_to", (Point(100, 110),)),
        ]
        assert sample_drawer.anchor == Point(100, 100)
        assert sample_drawer.measurement is None

    def test_pointer_move_shows_distance(self, sample_drawer, surface):
        sample_drawer.on_pointer_down(Point(100, 100))
        surface.reset()

        sample_drawer.on_pointer_move(Point(631.5, 100))

        assert surface.names()[0] == "clear"
        assert len(red_calls(surface)) == 2
        name, (label, position) = surface.calls[-1]
        assert name == "stroke_text"
        assert label == "5,315 mm"
        assert (position.x, position.y) == pytest.approx((370.75, 95))
        assert sample_drawer.measurement.label == "5,315 mm"

    def test_pointer_move_without_anchor_is_ignored(self, sample_drawer, surface):
        surface.reset()
        sample_drawer.on_pointer_move(Point(10, 10))
        assert surface.calls == []
        assert sample_drawer.measurement is None

    def test_distance_uses_current_scale(self, sample_drawer):
        sample_drawer.zoom_in()
        sample_drawer.on_pointer_down(Point(0, 0)).on_pointer_move(Point(0, 110))
        assert sample_drawer.measurement.world_distance == pytest.approx(1000)

    def test_new_anchor_replaces_old(self, sample_drawer):
        sample_drawer.on_pointer_down(Point(0, 0)).on_pointer_move(Point(10, 0))
        sample_drawer.on_pointer_down(Point(50, 50))
        assert sample_drawer.anchor == Point(50, 50)
        assert sample_drawer.measurement is None

    def test_cancel_erases_overlay(self, sample_drawer, surface):
        sample_drawer.on_pointer_down(Point(100, 100)).on_pointer_move(Point(200, 200))
        surface.reset()

        sample_drawer.on_cancel()

        assert sample_drawer.anchor is None
        assert sample_drawer.measurement is None
        assert surface.names()[0] == "clear"
        assert red_calls(surface) == []

    def test_overlay_never_enters_the_log(self, sample_drawer, surface):
        commands = sample_drawer.commands
        sample_drawer.on_pointer_down(Point(100, 100)).on_pointer_move(Point(200, 200))
        surface.reset()

        sample_drawer.redraw()

        assert sample_drawer.commands == commands
        assert red_calls(surface) == []
        assert "stroke_text" not in surface.names()
