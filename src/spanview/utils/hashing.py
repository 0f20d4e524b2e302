"""Scene fingerprinting utilities for SpanView."""

import hashlib
import json
from typing import Any


def _stable_hash(data: dict[str, Any]) -> str:
    """Generate stable SHA256 hash from dictionary.

    Args:
        data: Dictionary to hash (must be JSON-serializable)

    Returns:
        str: First 16 characters of hex digest
    """
    json_str = json.dumps(data, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(json_str.encode("utf-8")).hexdigest()[:16]


def scene_fingerprint(scene: "Scene") -> str:  # noqa: F821
    """Hash the drawable content of a scene.

    Includes: primitives (in draw order), gap text, status text, surface size.
    Two render passes over the same inputs must yield the same fingerprint.

    Args:
        scene: Scene to hash

    Returns:
        str: Deterministic hash string
    """
    from spanview.models.scene import Scene

    if not isinstance(scene, Scene):
        return ""

    data = {
        "primitives": [p.model_dump(mode="json") for p in scene.primitives],
        "gap_text": scene.gap_text,
        "status_text": scene.status_text,
        "surface": scene.surface.model_dump(mode="json"),
    }
    return _stable_hash(data)


def hash_values(values: dict[str, int]) -> str:
    """Hash a dimension -> value mapping for log correlation."""
    return _stable_hash({str(k): int(v) for k, v in values.items()})
