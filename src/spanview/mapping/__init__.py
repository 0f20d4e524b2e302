"""Coordinate mapping for SpanView."""

from spanview.mapping.mapper import AxisProjectionMapper

__all__ = ["AxisProjectionMapper"]
