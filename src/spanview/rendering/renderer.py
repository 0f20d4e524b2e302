"""Scene renderer: full, layered rebuild of the span diagram."""

from __future__ import annotations

import logging

from spanview.config import DiagramConfig
from spanview.mapping.mapper import AxisProjectionMapper
from spanview.metrics.balance import compute_indicators
from spanview.models.enums import Dimension, Layer
from spanview.models.geometry import Point, SurfaceSize, ViewBox
from spanview.models.scene import (
    CirclePrimitive,
    DerivedIndicators,
    LinePrimitive,
    PathPrimitive,
    PolylinePrimitive,
    Primitive,
    RectPrimitive,
    Scene,
    TextPrimitive,
)
from spanview.models.survey import DIMENSION_ORDER, SurveyState, dimension_info

logger = logging.getLogger(__name__)

GAP_LABEL = "Entrepreneurial Gap"
_FONT_NUDGE = 5.0  # baseline shift so row text sits on the row centre


class SceneRenderer:
    """Builds a complete Scene from a survey state and a surface size.

    Each call to render() starts from an empty primitive list, so the output
    depends only on the arguments and the configuration.
    """

    def __init__(self, config: DiagramConfig | None = None) -> None:
        self.config = config or DiagramConfig()
        layout = self.config.layout
        self.mapper = AxisProjectionMapper(
            frame=self.config.frame,
            first_row_y=layout.first_row_y,
            row_height=layout.row_height,
        )

    def render(self, state: SurveyState, surface: SurfaceSize) -> Scene | None:
        """Run one render pass.

        Args:
            state: Current survey values
            surface: Physical size of the render target

        Returns:
            A freshly built Scene, or None when the surface has no area
        """
        if surface.is_degenerate:
            logger.debug(
                "Skipping render pass: degenerate surface %sx%s",
                surface.width, surface.height,
            )
            return None

        viewbox = ViewBox.fit(self.config.frame, surface)
        points = self.mapper.points_for(state)
        indicators = compute_indicators(
            state,
            points,
            policy=self.config.balance.policy,
            tolerance=self.config.balance.tolerance,
        )

        primitives: list[Primitive] = []
        primitives.extend(self._build_grid())
        primitives.extend(self._build_rows(state))
        primitives.extend(self._build_polyline(points))
        primitives.extend(self._build_gap(points, indicators))
        primitives.extend(self._build_status(indicators))

        return Scene(
            frame=self.config.frame,
            surface=surface,
            viewbox=viewbox,
            values=state.as_dict(),
            points={d.value: p for d, p in points.items()},
            indicators=indicators,
            primitives=primitives,
        )

    # ─── Layers ────────────────────────────────────────────────────────

    def _build_grid(self) -> list[Primitive]:
        """Value gridlines with tick labels above the first row."""
        frame = self.config.frame
        palette = self.config.palette
        top = frame.margins.top
        bottom = frame.plot_bottom

        items: list[Primitive] = []
        for value in self.mapper.tick_values():
            x = self.mapper.x_for_value(value)
            items.append(LinePrimitive(
                layer=Layer.GRID,
                x1=x, y1=top, x2=x, y2=bottom,
                stroke=palette.grid,
                stroke_width=1.0,
            ))
            items.append(TextPrimitive(
                layer=Layer.GRID,
                x=x, y=top - 14,
                text=str(value),
                font_size=12,
                anchor="middle",
                fill=palette.tick_label,
            ))
        return items

    def _build_rows(self, state: SurveyState) -> list[Primitive]:
        frame = self.config.frame
        layout = self.config.layout
        palette = self.config.palette

        items: list[Primitive] = []
        for dimension in DIMENSION_ORDER:
            info = dimension_info(dimension)
            y = self.mapper.y_for_row(info.row_index)
            items.append(TextPrimitive(
                layer=Layer.ROWS,
                x=frame.axis_start - layout.label_offset,
                y=y + _FONT_NUDGE,
                text=info.label,
                font_size=16,
                anchor="end",
                weight="600",
                fill=palette.label,
            ))
            items.append(TextPrimitive(
                layer=Layer.ROWS,
                x=frame.axis_start,
                y=y + layout.hint_offset,
                text=info.left_hint,
                font_size=12,
                anchor="start",
                fill=palette.hint,
            ))
            items.append(TextPrimitive(
                layer=Layer.ROWS,
                x=frame.axis_end,
                y=y + layout.hint_offset,
                text=info.right_hint,
                font_size=12,
                anchor="end",
                fill=palette.hint,
            ))
            items.append(TextPrimitive(
                layer=Layer.ROWS,
                x=frame.axis_end + layout.value_badge_offset,
                y=y + _FONT_NUDGE,
                text=str(state.get_value(dimension)),
                font_size=18,
                anchor="middle",
                weight="700",
                fill=palette.label,
                css_class=f"value-{dimension.value}",
            ))
            separator_y = y + layout.row_height / 2
            items.append(LinePrimitive(
                layer=Layer.ROWS,
                x1=0.0, y1=separator_y, x2=frame.width, y2=separator_y,
                stroke=palette.separator,
                stroke_width=1.0,
            ))
        return items

    def _build_polyline(self, points: dict[Dimension, Point]) -> list[Primitive]:
        palette = self.config.palette
        ordered = [points[d] for d in DIMENSION_ORDER]

        items: list[Primitive] = [PolylinePrimitive(
            layer=Layer.POLYLINE,
            points=ordered,
            stroke=palette.polyline,
            stroke_width=2.0,
            dash="2 5",
            linecap="round",
            linejoin="round",
        )]
        for dimension in DIMENSION_ORDER:
            p = points[dimension]
            items.append(CirclePrimitive(
                layer=Layer.POLYLINE,
                cx=p.x, cy=p.y,
                r=self.config.layout.marker_radius,
                fill=palette.marker,
                css_class=f"marker-{dimension.value}",
            ))
        return items

    def _build_gap(
        self, points: dict[Dimension, Point], indicators: DerivedIndicators
    ) -> list[Primitive]:
        """Double-headed arrow between the control and accountability positions."""
        layout = self.config.layout
        palette = self.config.palette

        x_control = points[Dimension.CONTROL].x
        x_account = points[Dimension.ACCOUNTABILITY].x
        left = min(x_control, x_account)
        right = max(x_control, x_account)
        y = self.config.frame.plot_bottom + layout.gap_offset
        mid = (left + right) / 2
        span = right - left

        items: list[Primitive] = []
        if span == 0:
            half = layout.arrow_head_half_width
            items.append(LinePrimitive(
                layer=Layer.GAP,
                x1=left, y1=y - half, x2=left, y2=y + half,
                stroke=palette.gap_stroke,
                stroke_width=3.0,
                linecap="round",
            ))
        else:
            # Heads never overlap; short spans get proportionally smaller heads
            head = min(layout.arrow_head_length, span / 2)
            half = 0.0
            if layout.arrow_head_length:
                half = layout.arrow_head_half_width * head / layout.arrow_head_length
            items.append(LinePrimitive(
                layer=Layer.GAP,
                x1=left + head, y1=y, x2=right - head, y2=y,
                stroke=palette.gap_stroke,
                stroke_width=3.0,
                linecap="round",
            ))
            items.append(PathPrimitive(
                layer=Layer.GAP,
                points=[
                    Point(x=left + head, y=y - half),
                    Point(x=left, y=y),
                    Point(x=left + head, y=y + half),
                ],
                fill=palette.gap_stroke,
            ))
            items.append(PathPrimitive(
                layer=Layer.GAP,
                points=[
                    Point(x=right - head, y=y - half),
                    Point(x=right, y=y),
                    Point(x=right - head, y=y + half),
                ],
                fill=palette.gap_stroke,
            ))

        items.append(TextPrimitive(
            layer=Layer.GAP,
            x=mid, y=y + layout.gap_label_offset,
            text=GAP_LABEL,
            font_size=18,
            anchor="middle",
            fill=palette.gap_label,
        ))
        items.append(TextPrimitive(
            layer=Layer.GAP,
            x=mid, y=y - 12,
            text=indicators.gap_text,
            font_size=16,
            anchor="middle",
            weight="700",
            fill=palette.gap_label,
            css_class="gap-value",
        ))
        return items

    def _build_status(self, indicators: DerivedIndicators) -> list[Primitive]:
        frame = self.config.frame
        layout = self.config.layout
        colors = self.config.palette.status_colors(indicators.balance_class)

        top = frame.height - layout.banner_margin - layout.banner_height
        status_class = f"status-{indicators.balance_class.value}"
        return [
            RectPrimitive(
                layer=Layer.STATUS,
                x=layout.banner_margin,
                y=top,
                width=frame.width - 2 * layout.banner_margin,
                height=layout.banner_height,
                rx=8.0,
                fill=colors.background,
                css_class=status_class,
            ),
            TextPrimitive(
                layer=Layer.STATUS,
                x=frame.width / 2,
                y=top + layout.banner_height / 2 + _FONT_NUDGE + 1,
                text=indicators.status_text,
                font_size=16,
                anchor="middle",
                weight="600",
                fill=colors.foreground,
                css_class=status_class,
            ),
        ]
