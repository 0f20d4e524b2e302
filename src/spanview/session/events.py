"""Render trigger events."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from spanview.models.enums import Dimension


class ValueChanged(BaseModel):
    """A slider moved."""

    kind: Literal["value_changed"] = "value_changed"
    dimension: Dimension
    value: int

    def describe(self) -> str:
        return f"{self.dimension.value}={self.value}"


class SurfaceResized(BaseModel):
    """The render surface changed size."""

    kind: Literal["surface_resized"] = "surface_resized"
    width: float = Field(ge=0)
    height: float = Field(ge=0)

    def describe(self) -> str:
        return f"resize {self.width:g}x{self.height:g}"


RenderEvent = Annotated[Union[ValueChanged, SurfaceResized], Field(discriminator="kind")]
