"""Derived indicators: gap and balance classification."""

from spanview.metrics.balance import (
    STATUS_TEXT,
    balance_delta,
    classify_delta,
    classify_geometric,
    compute_indicators,
    demand,
    on_segment,
    orientation,
    segments_intersect,
    supply,
)
from spanview.metrics.gap import compute_gap, format_gap

__all__ = [
    "STATUS_TEXT",
    "balance_delta",
    "classify_delta",
    "classify_geometric",
    "compute_indicators",
    "compute_gap",
    "demand",
    "format_gap",
    "on_segment",
    "orientation",
    "segments_intersect",
    "supply",
]
