"""Utility helpers."""

from .manifest import clear_manifest_cache, load_manifest

__all__ = ["clear_manifest_cache", "load_manifest"]
