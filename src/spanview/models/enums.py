"""Shared enumerations for all SpanView domain objects."""

from enum import StrEnum


class Dimension(StrEnum):
    """One of the four survey spans."""

    CONTROL = "control"
    ACCOUNTABILITY = "accountability"
    INFLUENCE = "influence"
    SUPPORT = "support"


class BalanceClass(StrEnum):
    """Outcome of a balance judgment.

    The threshold policy yields BALANCED, OVERLOADED or EXCESS_CAPACITY.
    The geometric policy yields BALANCED or IMBALANCED.
    """

    BALANCED = "balanced"
    OVERLOADED = "overloaded"
    EXCESS_CAPACITY = "excess_capacity"
    IMBALANCED = "imbalanced"


class BalancePolicy(StrEnum):
    """Which balance heuristic drives the status banner."""

    THRESHOLD = "threshold"
    GEOMETRIC = "geometric"


class Layer(StrEnum):
    """Scene layers, listed back to front."""

    GRID = "grid"
    ROWS = "rows"
    POLYLINE = "polyline"
    GAP = "gap"
    STATUS = "status"


LAYER_ORDER: tuple[Layer, ...] = (
    Layer.GRID,
    Layer.ROWS,
    Layer.POLYLINE,
    Layer.GAP,
    Layer.STATUS,
)
