"""Utility functions for SpanView."""

from spanview.utils.hashing import hash_values, scene_fingerprint
from spanview.utils.logging import configure_logging, get_logger

__all__ = [
    "scene_fingerprint",
    "hash_values",
    "get_logger",
    "configure_logging",
]
