"""Diagram configuration: loaded from the packaged config.yaml."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from spanview.models.enums import BalanceClass, BalancePolicy
from spanview.models.geometry import LogicalFrame


class LayoutConfig(BaseModel):
    """Row placement and indicator sizes, in logical units."""

    row_height: float = Field(94.0, gt=0)
    first_row_y: float = 95.0
    label_offset: float = 18.0
    hint_offset: float = 26.0
    value_badge_offset: float = 44.0
    gap_offset: float = 64.0
    gap_label_offset: float = 26.0
    arrow_head_length: float = Field(14.0, ge=0)
    arrow_head_half_width: float = Field(7.0, ge=0)
    marker_radius: float = Field(5.0, ge=0)
    banner_height: float = Field(40.0, gt=0)
    banner_margin: float = Field(16.0, ge=0)


class BalanceConfig(BaseModel):
    """Which balance heuristic is active and its tolerance band."""

    policy: BalancePolicy = BalancePolicy.THRESHOLD
    tolerance: int = Field(1, ge=0)


class StatusColors(BaseModel):
    background: str
    foreground: str


def _default_status_colors() -> dict[BalanceClass, StatusColors]:
    return {
        BalanceClass.BALANCED: StatusColors(background="#dcfce7", foreground="#166534"),
        BalanceClass.OVERLOADED: StatusColors(background="#fee2e2", foreground="#991b1b"),
        BalanceClass.EXCESS_CAPACITY: StatusColors(background="#fef3c7", foreground="#92400e"),
        BalanceClass.IMBALANCED: StatusColors(background="#fee2e2", foreground="#991b1b"),
    }


class Palette(BaseModel):
    grid: str = "rgba(148,163,184,.35)"
    tick_label: str = "rgba(71,85,105,.8)"
    label: str = "#0f172a"
    hint: str = "rgba(71,85,105,.9)"
    separator: str = "rgba(203,213,225,.9)"
    polyline: str = "rgba(17,24,39,.75)"
    marker: str = "#111827"
    gap_stroke: str = "rgba(15,23,42,.45)"
    gap_label: str = "rgba(15,23,42,.55)"
    status: dict[BalanceClass, StatusColors] = Field(default_factory=_default_status_colors)

    def status_colors(self, balance_class: BalanceClass) -> StatusColors:
        return self.status.get(balance_class) or _default_status_colors()[balance_class]


class DiagramConfig(BaseModel):
    """Complete diagram configuration."""

    frame: LogicalFrame = Field(default_factory=LogicalFrame)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    balance: BalanceConfig = Field(default_factory=BalanceConfig)
    palette: Palette = Field(default_factory=Palette)


def load_config(path: Path | str | None = None) -> DiagramConfig:
    """Load diagram configuration from YAML.

    Args:
        path: Config file path (uses the packaged config.yaml if None)

    Returns:
        Validated DiagramConfig
    """
    if path is None:
        with resources.files("spanview").joinpath("config.yaml").open() as f:
            data = yaml.safe_load(f)
    else:
        with open(path) as f:
            data = yaml.safe_load(f)
    return DiagramConfig.model_validate(data or {})
