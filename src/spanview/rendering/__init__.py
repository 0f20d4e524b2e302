"""Scene rendering for SpanView."""

from spanview.rendering.renderer import GAP_LABEL, SceneRenderer
from spanview.rendering.svg import SvgSceneWriter

__all__ = ["GAP_LABEL", "SceneRenderer", "SvgSceneWriter"]
