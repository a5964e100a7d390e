"""Tests for the per-command renderers."""
import math

import pytest

from floorsketch.core.context import DrawingContext
from floorsketch.core.model import DoorType, LineThickness, Orientation, Point
from floorsketch.engine.commands import (
    CommandType,
    DrawBed,
    DrawDoor,
    DrawLine,
    DrawWindow,
    MoveTo,
    SetThickness,
)
from floorsketch.engine.renderers import (
    bed_corners,
    door_segment,
    get_renderer,
    headboard_segment,
    list_renderers,
    render_bed,
    render_door,
    render_line,
    render_move_to,
    render_set_thickness,
    render_window,
    window_rect,
)
from floorsketch.surface.recording import RecordingSurface


@pytest.fixture
def ctx():
    return DrawingContext(
        surface=RecordingSurface(1000, 1000),
        base=Point(1000, 1000),
        scale=0.1,
        current_point=Point(0, 0),
        current_thickness=LineThickness.THIN,
    )


def at(ctx, point):
    return DrawingContext(ctx.surface, ctx.base, ctx.scale, point, ctx.current_thickness)


def xy(point):
    return (point.x, point.y)


class TestStateOnlyRenderers:
    def test_move_to_sets_point_without_drawing(self, ctx):
        update = render_move_to(MoveTo(Point(5315, 80)), ctx)
        assert update == {"current_point": Point(5315, 80)}
        assert ctx.surface.calls == []

    def test_set_thickness_without_drawing(self, ctx):
        update = render_set_thickness(SetThickness(LineThickness.THICK), ctx)
        assert update == {"current_thickness": LineThickness.THICK}
        assert ctx.surface.calls == []


class TestLine:
    def test_strokes_mapped_endpoints(self, ctx):
        update = render_line(DrawLine(Point(0, 0), Point(0, 580), LineThickness.THICK), ctx)

        assert update == {}
        names = ctx.surface.names()
        assert names == [
            "set_stroke_color",
            "set_line_width",
            "begin_path",
            "move_to",
            "line_to",
            "stroke",
            "close_path",
        ]
        calls = dict(ctx.surface.calls)
        assert calls["set_line_width"] == (2,)
        assert xy(calls["move_to"][0]) == pytest.approx((100, 100))
        assert xy(calls["line_to"][0]) == pytest.approx((100, 158))

    def test_thin_line_width(self, ctx):
        render_line(DrawLine(Point(0, 0), Point(10, 0), LineThickness.THIN), ctx)
        assert dict(ctx.surface.calls)["set_line_width"] == (1,)


class TestWindow:
    def test_horizontal_rect_and_advance(self, ctx):
        cmd = DrawWindow(1520, True)
        origin, width, height = window_rect(cmd, Point(1625, 2770))
        assert (origin, width, height) == (Point(1625, 2720), 1520, 100)

        update = render_window(cmd, at(ctx, Point(1625, 2770)))
        assert update == {"current_point": Point(3145, 2770)}

    def test_vertical_rect_and_advance(self, ctx):
        update = render_window(DrawWindow(1525, False), at(ctx, Point(0, 580)))
        assert update == {"current_point": Point(0, 2105)}

        calls = dict(ctx.surface.calls)
        origin, width, height = calls["rect"]
        assert xy(origin) == pytest.approx((95, 158))
        assert width == pytest.approx(10)
        assert height == pytest.approx(152.5)

    def test_always_thick_and_filled(self, ctx):
        render_window(DrawWindow(1000, True), ctx)
        calls = dict(ctx.surface.calls)
        assert calls["set_line_width"] == (2,)
        assert calls["set_fill_color"] == ("lightblue",)
        names = ctx.surface.names()
        assert names.index("fill") < names.index("stroke")


class TestDoor:
    def test_west_only_shifts_end_x(self):
        start, end = door_segment(
            DrawDoor(800, DoorType.LEFT, Orientation.WEST), Point(5315, 80)
        )
        assert start == Point(5315, 80)
        assert end == Point(4515, 80)

    @pytest.mark.parametrize(
        "orientation,start,end",
        [
            (Orientation.NORTH, (900, 200), (900, -600)),
            (Orientation.EAST, (100, 1000), (900, 1000)),
            (Orientation.SOUTH, (900, 200), (900, 1000)),
        ],
    )
    def test_orientation_offsets(self, orientation, start, end):
        s, e = door_segment(DrawDoor(800, DoorType.RIGHT, orientation), Point(100, 200))
        assert xy(s) == start
        assert xy(e) == end

    def test_negative_width_uses_abs_for_swing_axis(self):
        s, e = door_segment(DrawDoor(-800, DoorType.LEFT, Orientation.NORTH), Point(100, 200))
        assert xy(s) == (-700, 200)
        assert xy(e) == (-700, -600)

    def test_arc_around_unshifted_point(self, ctx):
        update = render_door(
            DrawDoor(800, DoorType.LEFT, Orientation.WEST), at(ctx, Point(5315, 80))
        )
        assert update == {}

        calls = dict(ctx.surface.calls)
        assert xy(calls["move_to"][0]) == pytest.approx((631.5, 108))
        assert xy(calls["line_to"][0]) == pytest.approx((551.5, 108))

        center, radius, start_angle, end_angle, anticlockwise = calls["arc"]
        assert xy(center) == pytest.approx((631.5, 108))
        assert radius == pytest.approx(80)
        assert start_angle == pytest.approx(math.pi)
        assert end_angle == pytest.approx(math.pi / 2)
        assert anticlockwise is True

    def test_uses_current_thickness(self, ctx):
        render_door(DrawDoor(800, DoorType.LEFT, Orientation.NORTH), ctx)
        assert dict(ctx.surface.calls)["set_line_width"] == (1,)


class TestBed:
    def test_north_corner_layout(self):
        cmd = DrawBed(2120, 2120, Orientation.NORTH)
        top_right, bottom_right, bottom_left = bed_corners(cmd, Point(800, 0))
        assert top_right == Point(2920, 0)
        assert bottom_right == Point(2920, 2120)
        assert bottom_left == Point(800, 2120)
        assert headboard_segment(cmd, Point(800, 0)) == (Point(800, 80), Point(2920, 80))

    def test_east_swaps_axes(self):
        cmd = DrawBed(900, 2000, Orientation.EAST)
        assert bed_corners(cmd, Point(0, 0)) == (Point(2000, 0), Point(2000, 900), Point(0, 900))
        assert headboard_segment(cmd, Point(0, 0)) == (Point(1920, 0), Point(1920, 900))

    def test_south_headboard_at_far_edge(self):
        cmd = DrawBed(900, 2000, Orientation.SOUTH)
        assert bed_corners(cmd, Point(0, 0)) == (Point(900, 0), Point(900, 2000), Point(0, 2000))
        assert headboard_segment(cmd, Point(0, 0)) == (Point(0, 1920), Point(900, 1920))

    def test_west_headboard_near_start(self):
        cmd = DrawBed(900, 2000, Orientation.WEST)
        assert headboard_segment(cmd, Point(0, 0)) == (Point(80, 0), Point(80, 900))

    def test_render_outline_then_headboard(self, ctx):
        update = render_bed(DrawBed(2120, 2120, Orientation.NORTH), at(ctx, Point(800, 0)))
        assert update == {}

        calls = ctx.surface.calls
        outline = [
            coord
            for name, args in calls[:9]
            if name in ("move_to", "line_to")
            for coord in xy(args[0])
        ]
        assert outline == pytest.approx([180, 100, 392, 100, 392, 312, 180, 312, 180, 100])
        assert [name for name, _ in calls].count("stroke") == 2
        assert dict(calls)["set_line_width"] == (2,)


class TestRegistry:
    def test_every_command_type_registered(self):
        assert set(list_renderers()) == {t.value for t in CommandType}

    def test_lookup_by_plain_tag(self):
        assert get_renderer("drawBed") is render_bed

    def test_unknown_tag_raises(self):
        with pytest.raises(KeyError):
            get_renderer("drawStairs")
