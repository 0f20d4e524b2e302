"""Tests for hashing utilities."""

from spanview.models.geometry import SurfaceSize
from spanview.utils.hashing import hash_values, scene_fingerprint


def test_scene_fingerprint_deterministic(renderer, overloaded_state, surface):
    """Two passes over identical inputs share a fingerprint."""
    hash1 = scene_fingerprint(renderer.render(overloaded_state, surface))
    hash2 = scene_fingerprint(renderer.render(overloaded_state, surface))
    assert hash1 == hash2
    assert len(hash1) == 16


def test_scene_fingerprint_changes_with_values(renderer, overloaded_state, balanced_state, surface):
    assert scene_fingerprint(renderer.render(overloaded_state, surface)) != scene_fingerprint(
        renderer.render(balanced_state, surface)
    )


def test_scene_fingerprint_changes_with_surface(renderer, overloaded_state):
    small = renderer.render(overloaded_state, SurfaceSize(width=480, height=300))
    large = renderer.render(overloaded_state, SurfaceSize(width=960, height=600))
    assert scene_fingerprint(small) != scene_fingerprint(large)


def test_scene_fingerprint_non_scene():
    assert scene_fingerprint(None) == ""


def test_hash_values_order_independent():
    a = hash_values({"control": 1, "support": 2})
    b = hash_values({"support": 2, "control": 1})
    assert a == b
