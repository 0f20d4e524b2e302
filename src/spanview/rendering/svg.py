"""SVG back end: serializes a Scene as a standalone SVG document.

The document uses the logical frame as its viewBox and the surface size as
its width/height, so the viewer applies the same uniform fit as ViewBox.
"""

from __future__ import annotations

from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

from spanview.models.enums import LAYER_ORDER
from spanview.models.scene import (
    CirclePrimitive,
    LinePrimitive,
    PathPrimitive,
    PolylinePrimitive,
    Primitive,
    RectPrimitive,
    Scene,
    TextPrimitive,
)

SVG_TEMPLATE = """<svg xmlns="http://www.w3.org/2000/svg" width="{{WIDTH}}" height="{{HEIGHT}}" viewBox="{{VIEWBOX}}" preserveAspectRatio="xMidYMid meet" font-family="ui-sans-serif, system-ui, sans-serif">
<title>{{TITLE}}</title>
{{BODY}}
</svg>
"""


def _num(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _attrs(pairs: list[tuple[str, object]]) -> str:
    return " ".join(f"{k}={quoteattr(str(v))}" for k, v in pairs if v is not None)


def _style(p: Primitive) -> list[tuple[str, object]]:
    pairs: list[tuple[str, object]] = []
    if p.stroke is not None:
        pairs.append(("stroke", p.stroke))
        pairs.append(("stroke-width", _num(p.stroke_width)))
    if p.dash is not None:
        pairs.append(("stroke-dasharray", p.dash))
    pairs.append(("class", p.css_class))
    return pairs


class SvgSceneWriter:
    """Renders scenes as SVG markup."""

    def render(self, scene: Scene, output_path: Path | str | None = None) -> str:
        """Render a scene as an SVG document.

        Args:
            scene: Scene produced by SceneRenderer
            output_path: Optional path to write the SVG file

        Returns:
            SVG string
        """
        groups = []
        for layer in LAYER_ORDER:
            elements = [self._element(p) for p in scene.layer(layer)]
            groups.append(f'<g id="layer-{layer.value}">')
            groups.extend(f"  {e}" for e in elements)
            groups.append("</g>")

        svg = (
            SVG_TEMPLATE
            .replace("{{WIDTH}}", _num(scene.surface.width))
            .replace("{{HEIGHT}}", _num(scene.surface.height))
            .replace("{{VIEWBOX}}", f"0 0 {_num(scene.frame.width)} {_num(scene.frame.height)}")
            .replace("{{TITLE}}", escape(f"Gap {scene.gap_text}: {scene.status_text}"))
            .replace("{{BODY}}", "\n".join(groups))
        )

        if output_path:
            Path(output_path).write_text(svg)

        return svg

    def _element(self, p: Primitive) -> str:
        if isinstance(p, LinePrimitive):
            pairs = [
                ("x1", _num(p.x1)), ("y1", _num(p.y1)),
                ("x2", _num(p.x2)), ("y2", _num(p.y2)),
                *_style(p),
                ("stroke-linecap", p.linecap),
            ]
            return f"<line {_attrs(pairs)}/>"

        if isinstance(p, PolylinePrimitive):
            coords = " ".join(f"{_num(pt.x)},{_num(pt.y)}" for pt in p.points)
            pairs = [
                ("points", coords),
                ("fill", p.fill or "none"),
                *_style(p),
                ("stroke-linecap", p.linecap),
                ("stroke-linejoin", p.linejoin),
            ]
            return f"<polyline {_attrs(pairs)}/>"

        if isinstance(p, CirclePrimitive):
            pairs = [
                ("cx", _num(p.cx)), ("cy", _num(p.cy)), ("r", _num(p.r)),
                ("fill", p.fill),
                *_style(p),
            ]
            return f"<circle {_attrs(pairs)}/>"

        if isinstance(p, PathPrimitive):
            pairs = [("d", p.d), ("fill", p.fill or "none"), *_style(p)]
            return f"<path {_attrs(pairs)}/>"

        if isinstance(p, RectPrimitive):
            pairs = [
                ("x", _num(p.x)), ("y", _num(p.y)),
                ("width", _num(p.width)), ("height", _num(p.height)),
                ("rx", _num(p.rx) if p.rx else None),
                ("fill", p.fill),
                *_style(p),
            ]
            return f"<rect {_attrs(pairs)}/>"

        if isinstance(p, TextPrimitive):
            pairs = [
                ("x", _num(p.x)), ("y", _num(p.y)),
                ("font-size", _num(p.font_size)),
                ("text-anchor", p.anchor),
                ("font-weight", p.weight),
                ("fill", p.fill),
                *_style(p),
            ]
            return f"<text {_attrs(pairs)}>{escape(p.text)}</text>"

        raise TypeError(f"Unsupported primitive: {type(p).__name__}")
