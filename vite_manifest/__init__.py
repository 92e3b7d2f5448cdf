"""Resolve Vite's published-asset manifest into preload, stylesheet and script tags."""

from .errors import EntryNotFound, ManifestError, ManifestUnreadable, NotAnEntryPoint
from .schemas import ChunkRecord, PreloadType, TagSet
from .services import ManifestResolver, create_resolver

__version__ = "0.1.0"

__all__ = [
    "ChunkRecord",
    "EntryNotFound",
    "ManifestError",
    "ManifestResolver",
    "ManifestUnreadable",
    "NotAnEntryPoint",
    "PreloadType",
    "TagSet",
    "create_resolver",
]
