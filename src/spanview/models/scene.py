"""Scene models: drawable primitives produced by one render pass."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from spanview.models.enums import BalanceClass, BalancePolicy, Layer
from spanview.models.geometry import LogicalFrame, Point, Segment, SurfaceSize, ViewBox


class _Primitive(BaseModel):
    """Fields shared by every drawable."""

    layer: Layer
    stroke: str | None = None
    stroke_width: float = 1.0
    fill: str | None = None
    dash: str | None = Field(None, description="SVG dash pattern, e.g. '2 5'")
    css_class: str | None = None


class LinePrimitive(_Primitive):
    kind: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float
    linecap: str | None = None


class PolylinePrimitive(_Primitive):
    kind: Literal["polyline"] = "polyline"
    points: list[Point]
    linecap: str | None = None
    linejoin: str | None = None


class CirclePrimitive(_Primitive):
    kind: Literal["circle"] = "circle"
    cx: float
    cy: float
    r: float


class PathPrimitive(_Primitive):
    """Closed polygon path (used for arrowheads)."""

    kind: Literal["path"] = "path"
    points: list[Point]
    closed: bool = True

    @property
    def d(self) -> str:
        if not self.points:
            return ""
        head, *rest = self.points
        parts = [f"M {head.x:g} {head.y:g}"]
        parts.extend(f"L {p.x:g} {p.y:g}" for p in rest)
        if self.closed:
            parts.append("Z")
        return " ".join(parts)


class RectPrimitive(_Primitive):
    kind: Literal["rect"] = "rect"
    x: float
    y: float
    width: float
    height: float
    rx: float = 0.0


class TextPrimitive(_Primitive):
    kind: Literal["text"] = "text"
    x: float
    y: float
    text: str
    font_size: float = 14.0
    anchor: Literal["start", "middle", "end"] = "start"
    weight: str | None = None


Primitive = Annotated[
    Union[
        LinePrimitive,
        PolylinePrimitive,
        CirclePrimitive,
        PathPrimitive,
        RectPrimitive,
        TextPrimitive,
    ],
    Field(discriminator="kind"),
]


class DerivedIndicators(BaseModel):
    """Indicators computed once per render pass."""

    gap: int
    gap_text: str
    policy: BalancePolicy
    balance_class: BalanceClass
    status_text: str
    supply: int
    demand: int
    delta: int
    segments: tuple[Segment, Segment] | None = Field(
        None, description="Control-Influence and Accountability-Support segments (geometric policy)"
    )


class Scene(BaseModel):
    """Complete output of one render pass, rebuilt from scratch every time."""

    frame: LogicalFrame
    surface: SurfaceSize
    viewbox: ViewBox
    values: dict[str, int]
    points: dict[str, Point]
    indicators: DerivedIndicators
    primitives: list[Primitive] = Field(default_factory=list)

    @property
    def gap_text(self) -> str:
        return self.indicators.gap_text

    @property
    def status_text(self) -> str:
        return self.indicators.status_text

    def layer(self, layer: Layer) -> list[Primitive]:
        """Primitives belonging to one layer, in draw order."""
        return [p for p in self.primitives if p.layer == layer]
