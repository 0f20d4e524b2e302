"""Render loop: single-threaded event queue driving full render passes."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable

from pydantic import BaseModel

from spanview.models.geometry import SurfaceSize
from spanview.models.scene import Scene
from spanview.models.survey import SurveyState
from spanview.rendering.renderer import SceneRenderer
from spanview.session.events import RenderEvent, SurfaceResized, ValueChanged
from spanview.session.inputs import RenderSurface, SliderPanel
from spanview.utils.hashing import hash_values, scene_fingerprint

logger = logging.getLogger(__name__)

SceneSink = Callable[[Scene], None]


class PassRecord(BaseModel):
    """Outcome of one render pass."""

    pass_number: int
    trigger: str
    skipped: bool = False
    failed: bool = False
    fingerprint: str = ""
    gap_text: str = ""
    status_text: str = ""


class RenderLoop:
    """Applies queued events to the current inputs and re-renders after each.

    Every event produces exactly one full render pass. Passes never nest: an
    event posted while a pass is running waits in the queue until the running
    pass has finished. Faults raised while rendering or committing a scene are
    logged and contained here so they never reach the event source.
    """

    def __init__(
        self,
        renderer: SceneRenderer,
        state: SurveyState,
        surface: SurfaceSize,
        sinks: list[SceneSink] | None = None,
    ) -> None:
        self.renderer = renderer
        self.state = state
        self.surface = surface
        self.sinks: list[SceneSink] = list(sinks or [])
        self.last_scene: Scene | None = None
        self.pass_count = 0
        self.skipped_passes = 0
        self.history: list[PassRecord] = []
        self._queue: deque[RenderEvent] = deque()
        self._processing = False

    def attach(self, panel: SliderPanel, surface: RenderSurface) -> None:
        """Subscribe to both collaborators and process their events immediately."""
        panel.subscribe(self.dispatch)
        surface.subscribe(self.dispatch)

    def post(self, event: RenderEvent) -> None:
        self._queue.append(event)

    def dispatch(self, event: RenderEvent) -> None:
        """Queue an event and drain the queue unless a pass is already running."""
        self.post(event)
        self.process_pending()

    def process_pending(self) -> list[PassRecord]:
        """Drain the queue, one render pass per event."""
        if self._processing:
            return []
        records: list[PassRecord] = []
        self._processing = True
        try:
            while self._queue:
                event = self._queue.popleft()
                self._apply(event)
                records.append(self._run_pass(event.describe()))
        finally:
            self._processing = False
        return records

    def render_now(self, trigger: str = "initial") -> PassRecord:
        """Run one pass against the current inputs without an event."""
        if self._processing:
            raise RuntimeError("Render pass already in progress")
        self._processing = True
        try:
            return self._run_pass(trigger)
        finally:
            self._processing = False

    def _apply(self, event: RenderEvent) -> None:
        if isinstance(event, ValueChanged):
            self.state = self.state.with_value(event.dimension, event.value)
        elif isinstance(event, SurfaceResized):
            self.surface = SurfaceSize(width=event.width, height=event.height)

    def _run_pass(self, trigger: str) -> PassRecord:
        self.pass_count += 1
        record = PassRecord(pass_number=self.pass_count, trigger=trigger)
        try:
            scene = self.renderer.render(self.state, self.surface)
            if scene is None:
                self.skipped_passes += 1
                record.skipped = True
                logger.debug("Pass %d (%s) skipped", self.pass_count, trigger)
            else:
                for sink in self.sinks:
                    sink(scene)
                self.last_scene = scene
                record.fingerprint = scene_fingerprint(scene)
                record.gap_text = scene.gap_text
                record.status_text = scene.status_text
                logger.debug(
                    "Pass %d (%s) values=%s scene=%s",
                    self.pass_count, trigger,
                    hash_values(self.state.as_dict()), record.fingerprint,
                )
        except Exception:
            record.failed = True
            logger.exception("Render pass %d (%s) failed", self.pass_count, trigger)
        self.history.append(record)
        return record
