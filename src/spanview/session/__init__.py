"""Event-driven render session for SpanView."""

from spanview.session.events import RenderEvent, SurfaceResized, ValueChanged
from spanview.session.inputs import RenderSurface, SliderPanel
from spanview.session.loop import PassRecord, RenderLoop
from spanview.session.recording import RecordedSession, load_session, load_survey

__all__ = [
    "RenderEvent",
    "SurfaceResized",
    "ValueChanged",
    "RenderSurface",
    "SliderPanel",
    "PassRecord",
    "RenderLoop",
    "RecordedSession",
    "load_session",
    "load_survey",
]
