"""Entrepreneurial gap: accountability minus control."""

from __future__ import annotations

from spanview.models.enums import Dimension
from spanview.models.survey import SurveyState


def compute_gap(state: SurveyState) -> int:
    """Signed gap in [-9, 9]; positive when accountability exceeds control."""
    return state.get_value(Dimension.ACCOUNTABILITY) - state.get_value(Dimension.CONTROL)


def format_gap(gap: int) -> str:
    """Display form with an explicit sign for positive gaps ("+3", "0", "-2")."""
    if gap > 0:
        return f"+{gap}"
    return str(gap)
