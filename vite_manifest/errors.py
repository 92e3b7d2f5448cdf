"""Errors raised while loading or resolving a Vite manifest."""

from __future__ import annotations


class ManifestError(RuntimeError):
    pass


class ManifestUnreadable(ManifestError):
    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class EntryNotFound(ManifestError):
    def __init__(self, entry: str):
        super().__init__(f"Entry not found in manifest: {entry}")
        self.entry = entry


class NotAnEntryPoint(ManifestError):
    def __init__(self, entry: str):
        super().__init__(f"Chunk is not an entry point: {entry}")
        self.entry = entry
