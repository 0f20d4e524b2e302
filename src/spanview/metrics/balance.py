"""Balance classification heuristics.

Two illustrative policies exist and exactly one is active per configuration:

* threshold: compares supply (control + support) against demand
  (accountability + influence) and tolerates a small band around zero.
* geometric: checks whether the control-influence segment meets the
  accountability-support segment on the diagram.

Neither is a validated psychometric model.
"""

from __future__ import annotations

from spanview.models.enums import BalanceClass, BalancePolicy, Dimension
from spanview.models.geometry import Point, Segment
from spanview.models.scene import DerivedIndicators
from spanview.models.survey import SurveyState
from spanview.metrics.gap import compute_gap, format_gap

STATUS_TEXT: dict[BalanceClass, str] = {
    BalanceClass.BALANCED: "This job is balanced.",
    BalanceClass.OVERLOADED: "This job is overloaded.",
    BalanceClass.EXCESS_CAPACITY: "This job has excess capacity.",
    BalanceClass.IMBALANCED: "This job is imbalanced.",
}


# ─── Threshold policy ──────────────────────────────────────────────────


def demand(state: SurveyState) -> int:
    return state.get_value(Dimension.ACCOUNTABILITY) + state.get_value(Dimension.INFLUENCE)


def supply(state: SurveyState) -> int:
    return state.get_value(Dimension.CONTROL) + state.get_value(Dimension.SUPPORT)


def balance_delta(state: SurveyState) -> int:
    """supply - demand; negative means more is asked than provided."""
    return supply(state) - demand(state)


def classify_delta(delta: int, tolerance: int = 1) -> BalanceClass:
    """Classify a supply/demand delta.

    |delta| <= tolerance is balanced, below the band is overloaded and above
    it is excess capacity. Both band edges count as balanced.
    """
    if -tolerance <= delta <= tolerance:
        return BalanceClass.BALANCED
    if delta < -tolerance:
        return BalanceClass.OVERLOADED
    return BalanceClass.EXCESS_CAPACITY


# ─── Geometric policy ──────────────────────────────────────────────────


def orientation(p: Point, q: Point, r: Point) -> float:
    """Cross product of (q - p) and (r - p); sign gives the turn direction."""
    return (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """True if r lies inside the bounding box of segment p-q."""
    return (
        min(p.x, q.x) <= r.x <= max(p.x, q.x)
        and min(p.y, q.y) <= r.y <= max(p.y, q.y)
    )


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def segments_intersect(first: Segment, second: Segment) -> bool:
    """Orientation-sign segment intersection test.

    Proper crossings need strictly opposite signs on both sides. When an
    orientation is exactly zero the third point is accepted if it sits in the
    other segment's bounding box. Overlapping collinear segments whose
    endpoints all fall outside each other are not detected.
    """
    a, b = first.start, first.end
    c, d = second.start, second.end

    o1 = _sign(orientation(a, b, c))
    o2 = _sign(orientation(a, b, d))
    o3 = _sign(orientation(c, d, a))
    o4 = _sign(orientation(c, d, b))

    if o1 != 0 and o2 != 0 and o3 != 0 and o4 != 0:
        return o1 != o2 and o3 != o4

    if o1 == 0 and on_segment(a, b, c):
        return True
    if o2 == 0 and on_segment(a, b, d):
        return True
    if o3 == 0 and on_segment(c, d, a):
        return True
    if o4 == 0 and on_segment(c, d, b):
        return True
    return False


def balance_segments(points: dict[Dimension, Point]) -> tuple[Segment, Segment]:
    """Control-influence and accountability-support segments."""
    return (
        Segment(start=points[Dimension.CONTROL], end=points[Dimension.INFLUENCE]),
        Segment(start=points[Dimension.ACCOUNTABILITY], end=points[Dimension.SUPPORT]),
    )


def classify_geometric(points: dict[Dimension, Point]) -> BalanceClass:
    first, second = balance_segments(points)
    if segments_intersect(first, second):
        return BalanceClass.BALANCED
    return BalanceClass.IMBALANCED


# ─── Snapshot ──────────────────────────────────────────────────────────


def compute_indicators(
    state: SurveyState,
    points: dict[Dimension, Point],
    policy: BalancePolicy = BalancePolicy.THRESHOLD,
    tolerance: int = 1,
) -> DerivedIndicators:
    """Compute every derived indicator for one render pass."""
    gap = compute_gap(state)
    delta = balance_delta(state)
    segments = None

    if policy == BalancePolicy.GEOMETRIC:
        segments = balance_segments(points)
        balance_class = classify_geometric(points)
    else:
        balance_class = classify_delta(delta, tolerance)

    return DerivedIndicators(
        gap=gap,
        gap_text=format_gap(gap),
        policy=policy,
        balance_class=balance_class,
        status_text=STATUS_TEXT[balance_class],
        supply=supply(state),
        demand=demand(state),
        delta=delta,
        segments=segments,
    )
