"""Axis-projection mapper: span values to logical frame coordinates.

Every dimension owns a fixed row; the value picks the horizontal position
along a shared axis. Coordinates live in the logical frame, so a surface
resize only changes the fit transform, never these points.
"""

from __future__ import annotations

from spanview.models.enums import Dimension
from spanview.models.geometry import LogicalFrame, Point
from spanview.models.survey import (
    DIMENSION_ORDER,
    VALUE_MAX,
    VALUE_MIN,
    SurveyState,
    dimension_info,
)


class AxisProjectionMapper:
    """Maps (dimension, value) pairs to points in a fixed logical frame."""

    def __init__(
        self,
        frame: LogicalFrame | None = None,
        first_row_y: float = 95.0,
        row_height: float = 94.0,
        value_min: int = VALUE_MIN,
        value_max: int = VALUE_MAX,
    ) -> None:
        if value_max <= value_min:
            raise ValueError(f"Empty value range [{value_min}, {value_max}]")
        self.frame = frame or LogicalFrame()
        self.first_row_y = first_row_y
        self.row_height = row_height
        self.value_min = value_min
        self.value_max = value_max

    @property
    def axis_width(self) -> float:
        return self.frame.axis_width

    def x_for_value(self, value: float) -> float:
        """Horizontal position of a value on the shared axis.

        value_min maps to the left margin, value_max to the end of the axis.
        """
        v = max(self.value_min, min(self.value_max, value))
        t = (v - self.value_min) / (self.value_max - self.value_min)
        return self.frame.margins.left + t * self.axis_width

    def y_for_row(self, row_index: int) -> float:
        return self.first_row_y + row_index * self.row_height

    def point_for(self, dimension: Dimension, value: float) -> Point:
        info = dimension_info(dimension)
        return Point(x=self.x_for_value(value), y=self.y_for_row(info.row_index))

    def points_for(self, state: SurveyState) -> dict[Dimension, Point]:
        """Mapped point of every dimension, in polyline order."""
        return {d: self.point_for(d, state.get_value(d)) for d in DIMENSION_ORDER}

    def tick_values(self) -> list[int]:
        return list(range(self.value_min, self.value_max + 1))
