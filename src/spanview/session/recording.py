"""Recorded sessions: an initial state, a surface and a list of events."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from spanview.models.geometry import SurfaceSize
from spanview.models.survey import SurveyState
from spanview.session.events import RenderEvent

logger = logging.getLogger(__name__)


class RecordedSession(BaseModel):
    """Replayable input for the render loop."""

    schema_version: str = "1.0"
    name: str = ""
    values: SurveyState
    surface: SurfaceSize = Field(default_factory=lambda: SurfaceSize(width=960, height=600))
    events: list[RenderEvent] = Field(default_factory=list)

    @field_validator("values", mode="before")
    @classmethod
    def _accept_plain_mapping(cls, data):
        if isinstance(data, dict) and "values" not in data:
            return SurveyState.from_mapping(data)
        return data


def load_survey(path: Path | str) -> SurveyState:
    """Load a survey state from a YAML mapping of dimension -> value."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Survey file {path} must contain a mapping")
    if "values" in data:
        data = data["values"]
    return SurveyState.from_mapping(data)


def load_session(path: Path | str) -> RecordedSession:
    """Load a recorded session from YAML."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    session = RecordedSession.model_validate(data)
    logger.info(
        "Loaded session '%s' from %s with %d events",
        session.name, path, len(session.events),
    )
    return session
