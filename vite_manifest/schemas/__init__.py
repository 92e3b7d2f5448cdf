"""Pydantic schemas."""

from .manifest import ChunkRecord, PreloadType, TagSet

__all__ = [
    "ChunkRecord",
    "PreloadType",
    "TagSet",
]
