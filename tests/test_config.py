"""Tests for diagram configuration loading."""

import pytest
from pydantic import ValidationError

from spanview.config import DiagramConfig, load_config
from spanview.models.enums import BalanceClass, BalancePolicy


def test_packaged_config_loads():
    config = load_config()
    assert config.frame.width == 960
    assert config.frame.height == 600
    assert config.frame.margins.left == 220
    assert config.balance.policy == BalancePolicy.THRESHOLD
    assert config.balance.tolerance == 1


def test_packaged_config_covers_every_status():
    config = load_config()
    assert set(config.palette.status) == set(BalanceClass)


def test_packaged_config_matches_defaults():
    packaged = load_config()
    defaults = DiagramConfig()
    assert packaged.frame == defaults.frame
    assert packaged.layout == defaults.layout
    assert packaged.balance == defaults.balance


def test_custom_config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "frame:\n  width: 800\n  height: 400\n"
        "balance:\n  policy: geometric\n"
    )
    config = load_config(path)
    assert config.frame.width == 800
    assert config.balance.policy == BalancePolicy.GEOMETRIC
    assert config.layout.row_height == DiagramConfig().layout.row_height


def test_empty_config_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == DiagramConfig()


def test_unknown_policy_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("balance:\n  policy: vibes\n")
    with pytest.raises(ValidationError):
        load_config(path)


def test_partial_palette_falls_back():
    config = DiagramConfig.model_validate({"palette": {"status": {}}})
    colors = config.palette.status_colors(BalanceClass.OVERLOADED)
    assert colors.background
