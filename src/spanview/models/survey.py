"""Survey state models: the four current span values."""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_serializer, model_validator

from spanview.models.enums import Dimension

logger = logging.getLogger(__name__)

VALUE_MIN = 1
VALUE_MAX = 10

# Fixed polyline order; never reordered at runtime
DIMENSION_ORDER: tuple[Dimension, ...] = (
    Dimension.CONTROL,
    Dimension.ACCOUNTABILITY,
    Dimension.INFLUENCE,
    Dimension.SUPPORT,
)


class DimensionInfo(BaseModel):
    """Display metadata for a single span."""

    model_config = ConfigDict(frozen=True)

    dimension: Dimension
    label: str
    left_hint: str
    right_hint: str
    row_index: int


_DIMENSION_INFO: dict[Dimension, DimensionInfo] = {
    Dimension.CONTROL: DimensionInfo(
        dimension=Dimension.CONTROL,
        label="Span of Control",
        left_hint="Few resources",
        right_hint="Many resources",
        row_index=0,
    ),
    Dimension.ACCOUNTABILITY: DimensionInfo(
        dimension=Dimension.ACCOUNTABILITY,
        label="Span of Accountability",
        left_hint="Narrow measures",
        right_hint="Broad measures",
        row_index=1,
    ),
    Dimension.INFLUENCE: DimensionInfo(
        dimension=Dimension.INFLUENCE,
        label="Span of Influence",
        left_hint="Works alone",
        right_hint="Must sway many",
        row_index=2,
    ),
    Dimension.SUPPORT: DimensionInfo(
        dimension=Dimension.SUPPORT,
        label="Span of Support",
        left_hint="Little help",
        right_hint="Lots of help",
        row_index=3,
    ),
}


def dimension_info(dimension: Dimension) -> DimensionInfo:
    """Return the display metadata for a dimension."""
    return _DIMENSION_INFO[Dimension(dimension)]


def coerce_value(value: Any) -> int | float:
    """Integer part of a raw slider value.

    Infinities pass through unchanged so they clamp to the nearest bound;
    NaN has no nearest bound and is rejected.
    """
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            raise ValueError("Span value must be a number, got NaN")
        return value
    return int(value)


def clamp_value(value: Any) -> int:
    """Clamp a raw value into the legal [VALUE_MIN, VALUE_MAX] range."""
    return int(max(VALUE_MIN, min(VALUE_MAX, coerce_value(value))))


class SurveyState(BaseModel):
    """Current value of every span.

    All four dimensions are always present. Out-of-range values are clamped
    to the nearest bound on construction, so a stored state always satisfies
    VALUE_MIN <= value <= VALUE_MAX. The values mapping is read-only; use
    with_value() to derive a changed state.
    """

    model_config = ConfigDict(frozen=True)

    values: Mapping[Dimension, int]

    @model_validator(mode="before")
    @classmethod
    def _clamp_values(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "values" not in data:
            return data
        raw = data["values"]
        if not isinstance(raw, Mapping):
            return data
        clamped: dict[Any, Any] = {}
        for key, value in raw.items():
            try:
                number = coerce_value(value)
            except (TypeError, ValueError):
                # left for field validation to reject
                clamped[key] = value
                continue
            fixed = clamp_value(number)
            if fixed != number:
                logger.warning(
                    "Value %s for %s outside [%d, %d], clamped to %d",
                    number, key, VALUE_MIN, VALUE_MAX, fixed,
                )
            clamped[key] = fixed
        return {**data, "values": clamped}

    @model_validator(mode="after")
    def _require_all_dimensions(self) -> SurveyState:
        missing = [d.value for d in Dimension if d not in self.values]
        if missing:
            raise ValueError(f"Survey state missing dimensions: {', '.join(missing)}")
        # frozen only guards attribute assignment; seal the mapping as well
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        return self

    @field_serializer("values")
    def _serialize_values(self, values: Mapping[Dimension, int]) -> dict[str, int]:
        return {d.value: values[d] for d in DIMENSION_ORDER}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SurveyState:
        """Build a state from a plain mapping with case-insensitive keys."""
        return cls(values={str(k).strip().lower(): v for k, v in data.items()})

    def get_value(self, dimension: Dimension) -> int:
        return self.values[Dimension(dimension)]

    def with_value(self, dimension: Dimension, value: int) -> SurveyState:
        """Return a copy with one dimension replaced (clamped)."""
        updated = dict(self.values)
        updated[Dimension(dimension)] = value
        return SurveyState(values=updated)

    def as_dict(self) -> dict[str, int]:
        return {d.value: self.values[d] for d in DIMENSION_ORDER}
