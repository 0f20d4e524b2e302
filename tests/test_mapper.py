"""Tests for the axis-projection coordinate mapper."""

import pytest

from spanview.mapping.mapper import AxisProjectionMapper
from spanview.models.enums import Dimension
from spanview.models.geometry import LogicalFrame, SurfaceSize, ViewBox
from spanview.models.survey import DIMENSION_ORDER, SurveyState


def make_state(control, accountability, influence, support):
    return SurveyState.from_mapping({
        "control": control,
        "accountability": accountability,
        "influence": influence,
        "support": support,
    })


def test_endpoints_hit_axis_bounds(mapper):
    left = mapper.frame.margins.left
    assert mapper.x_for_value(1) == pytest.approx(left)
    assert mapper.x_for_value(10) == pytest.approx(left + mapper.axis_width)


def test_monotonic_non_decreasing(mapper):
    xs = [mapper.x_for_value(v) for v in range(1, 11)]
    assert xs == sorted(xs)
    assert len(set(xs)) == 10


def test_interpolation_is_linear(mapper):
    step = mapper.axis_width / 9
    assert mapper.x_for_value(4) - mapper.x_for_value(1) == pytest.approx(3 * step)


def test_out_of_range_values_clamped_to_axis(mapper):
    assert mapper.x_for_value(0) == mapper.x_for_value(1)
    assert mapper.x_for_value(99) == mapper.x_for_value(10)


def test_rows_are_fixed_slots(mapper):
    y_control = mapper.point_for(Dimension.CONTROL, 1).y
    assert mapper.point_for(Dimension.CONTROL, 10).y == y_control
    assert mapper.point_for(Dimension.ACCOUNTABILITY, 3).y == pytest.approx(y_control + mapper.row_height)
    assert mapper.point_for(Dimension.SUPPORT, 3).y == pytest.approx(y_control + 3 * mapper.row_height)


def test_points_for_state_in_dimension_order(mapper, overloaded_state):
    points = mapper.points_for(overloaded_state)
    assert list(points) == list(DIMENSION_ORDER)
    assert points[Dimension.CONTROL].x == pytest.approx(mapper.x_for_value(5))
    assert points[Dimension.ACCOUNTABILITY].x == pytest.approx(mapper.x_for_value(8))


def test_deterministic(mapper, overloaded_state):
    assert mapper.points_for(overloaded_state) == mapper.points_for(overloaded_state)


def test_tick_values(mapper):
    assert mapper.tick_values() == list(range(1, 11))


def test_empty_range_rejected():
    with pytest.raises(ValueError):
        AxisProjectionMapper(value_min=5, value_max=5)


def test_custom_frame():
    frame = LogicalFrame(width=500, height=300, margins={"top": 0, "right": 50, "bottom": 0, "left": 50})
    m = AxisProjectionMapper(frame=frame)
    assert m.x_for_value(1) == 50
    assert m.x_for_value(10) == 450


@pytest.mark.parametrize("size", [(320, 200), (960, 600), (1920, 400), (300, 1200)])
def test_resize_preserves_x_ordering(mapper, size):
    state = make_state(3, 9, 6, 1)
    points = mapper.points_for(state)
    logical_order = sorted(DIMENSION_ORDER, key=lambda d: points[d].x)

    vb = ViewBox.fit(mapper.frame, SurfaceSize(width=size[0], height=size[1]))
    physical = {d: vb.to_surface(p) for d, p in points.items()}
    assert sorted(DIMENSION_ORDER, key=lambda d: physical[d].x) == logical_order
