"""Input and surface collaborators feeding the render loop."""

from __future__ import annotations

import logging
from typing import Callable

from spanview.models.enums import Dimension
from spanview.models.geometry import SurfaceSize
from spanview.models.survey import VALUE_MAX, VALUE_MIN, SurveyState, clamp_value, coerce_value
from spanview.session.events import SurfaceResized, ValueChanged

logger = logging.getLogger(__name__)


class SliderPanel:
    """The four sliders, reduced to their current value and legal range.

    Values are clamped before they are stored and every change is announced
    to the registered listeners, even when the value did not move.
    """

    def __init__(self, state: SurveyState) -> None:
        self.min = VALUE_MIN
        self.max = VALUE_MAX
        self._values: dict[Dimension, int] = dict(state.values)
        self._listeners: list[Callable[[ValueChanged], None]] = []

    def subscribe(self, listener: Callable[[ValueChanged], None]) -> None:
        self._listeners.append(listener)

    def value(self, dimension: Dimension) -> int:
        return self._values[Dimension(dimension)]

    def set_value(self, dimension: Dimension, value: int) -> int:
        """Store a new slider value and notify listeners.

        Fractional input is truncated like a slider step; only values outside
        the legal range are reported as clamped.

        Returns:
            The value actually stored after clamping

        Raises:
            ValueError: If the value is NaN
        """
        dimension = Dimension(dimension)
        number = coerce_value(value)
        stored = clamp_value(number)
        if stored != number:
            logger.warning(
                "Slider %s value %s outside [%d, %d], clamped to %d",
                dimension.value, value, self.min, self.max, stored,
            )
        self._values[dimension] = stored
        event = ValueChanged(dimension=dimension, value=stored)
        for listener in list(self._listeners):
            listener(event)
        return stored

    def snapshot(self) -> SurveyState:
        return SurveyState(values=dict(self._values))


class RenderSurface:
    """Pixel size of the render target, with resize notifications."""

    def __init__(self, width: float = 0.0, height: float = 0.0) -> None:
        self._size = SurfaceSize(width=width, height=height)
        self._listeners: list[Callable[[SurfaceResized], None]] = []

    @property
    def size(self) -> SurfaceSize:
        return self._size

    def subscribe(self, listener: Callable[[SurfaceResized], None]) -> None:
        self._listeners.append(listener)

    def resize(self, width: float, height: float) -> None:
        self._size = SurfaceSize(width=max(width, 0.0), height=max(height, 0.0))
        event = SurfaceResized(width=self._size.width, height=self._size.height)
        for listener in list(self._listeners):
            listener(event)
