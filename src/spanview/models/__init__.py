"""Domain models for SpanView."""

from spanview.models.enums import BalanceClass, BalancePolicy, Dimension, Layer
from spanview.models.geometry import LogicalFrame, Margins, Point, Segment, SurfaceSize, ViewBox
from spanview.models.scene import DerivedIndicators, Scene
from spanview.models.survey import DIMENSION_ORDER, SurveyState, dimension_info

__all__ = [
    "BalanceClass",
    "BalancePolicy",
    "Dimension",
    "Layer",
    "LogicalFrame",
    "Margins",
    "Point",
    "Segment",
    "SurfaceSize",
    "ViewBox",
    "DerivedIndicators",
    "Scene",
    "DIMENSION_ORDER",
    "SurveyState",
    "dimension_info",
]
