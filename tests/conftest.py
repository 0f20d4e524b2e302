"""Shared test fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from spanview.config import DiagramConfig, load_config
from spanview.mapping.mapper import AxisProjectionMapper
from spanview.models.enums import BalancePolicy
from spanview.models.geometry import SurfaceSize
from spanview.models.survey import SurveyState
from spanview.rendering.renderer import SceneRenderer

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_state(control: int, accountability: int, influence: int, support: int) -> SurveyState:
    return SurveyState(values={
        "control": control,
        "accountability": accountability,
        "influence": influence,
        "support": support,
    })


@pytest.fixture
def overloaded_state() -> SurveyState:
    """Control=5, Accountability=8, Influence=7, Support=4."""
    return make_state(5, 8, 7, 4)


@pytest.fixture
def balanced_state() -> SurveyState:
    return make_state(5, 5, 5, 5)


@pytest.fixture
def config() -> DiagramConfig:
    return load_config()


@pytest.fixture
def geometric_config() -> DiagramConfig:
    cfg = load_config()
    cfg.balance.policy = BalancePolicy.GEOMETRIC
    return cfg


@pytest.fixture
def mapper(config) -> AxisProjectionMapper:
    return AxisProjectionMapper(
        frame=config.frame,
        first_row_y=config.layout.first_row_y,
        row_height=config.layout.row_height,
    )


@pytest.fixture
def renderer(config) -> SceneRenderer:
    return SceneRenderer(config)


@pytest.fixture
def surface() -> SurfaceSize:
    return SurfaceSize(width=960, height=600)


@pytest.fixture(autouse=True)
def _reset_spanview_logging():
    """Drop handlers bound to CliRunner streams between tests."""
    yield
    logger = logging.getLogger("spanview")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
