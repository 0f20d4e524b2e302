"""Geometry models: logical frame, render surface and the fit transform between them."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Point(BaseModel):
    """A 2-D point in logical frame coordinates."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Segment(BaseModel):
    """A straight segment between two points."""

    model_config = ConfigDict(frozen=True)

    start: Point
    end: Point


class Margins(BaseModel):
    """Frame margins around the value axis."""

    top: float = Field(48.0, ge=0)
    right: float = Field(96.0, ge=0)
    bottom: float = Field(176.0, ge=0)
    left: float = Field(220.0, ge=0)


class LogicalFrame(BaseModel):
    """Fixed logical coordinate system all geometry is computed in."""

    width: float = Field(960.0, gt=0)
    height: float = Field(600.0, gt=0)
    margins: Margins = Field(default_factory=Margins)

    @property
    def axis_width(self) -> float:
        return self.width - self.margins.left - self.margins.right

    @property
    def axis_start(self) -> float:
        return self.margins.left

    @property
    def axis_end(self) -> float:
        return self.margins.left + self.axis_width

    @property
    def plot_bottom(self) -> float:
        return self.height - self.margins.bottom


class SurfaceSize(BaseModel):
    """Physical pixel size of the render surface."""

    model_config = ConfigDict(frozen=True)

    width: float = 0.0
    height: float = 0.0

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0


class ViewBox(BaseModel):
    """Uniform, centred fit of a logical frame into a surface.

    Equivalent to SVG ``preserveAspectRatio="xMidYMid meet"``: a single scale
    factor for both axes, with the slack on the longer axis split evenly.
    """

    model_config = ConfigDict(frozen=True)

    scale: float
    offset_x: float
    offset_y: float

    @classmethod
    def fit(cls, frame: LogicalFrame, surface: SurfaceSize) -> ViewBox:
        if surface.is_degenerate:
            raise ValueError(
                f"Cannot fit frame into degenerate surface {surface.width}x{surface.height}"
            )
        scale = min(surface.width / frame.width, surface.height / frame.height)
        return cls(
            scale=scale,
            offset_x=(surface.width - frame.width * scale) / 2,
            offset_y=(surface.height - frame.height * scale) / 2,
        )

    def to_surface(self, point: Point) -> Point:
        """Map a logical point to physical surface pixels."""
        return Point(
            x=self.offset_x + point.x * self.scale,
            y=self.offset_y + point.y * self.scale,
        )
