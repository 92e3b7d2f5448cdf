"""Vite manifest file loading, with caching based on mtime."""

from __future__ import annotations

import json
import os
import threading

from loguru import logger

from ..errors import ManifestUnreadable

# resolved path -> (mtime, decoded manifest)
_MANIFEST_CACHE: dict[str, tuple[float, dict]] = {}
_CACHE_LOCK = threading.Lock()


def _read_manifest(path: str) -> dict:
    if not os.path.exists(path):
        raise ManifestUnreadable(path, f"Manifest file not found: {path}")
    if not os.path.isfile(path) or not os.access(path, os.R_OK):
        raise ManifestUnreadable(path, f"Manifest file is not readable: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise ManifestUnreadable(path, f"Manifest file is not readable: {path} ({exc})") from exc
    except ValueError as exc:
        raise ManifestUnreadable(path, f"Manifest file is not valid JSON: {path} ({exc})") from exc

    if not isinstance(data, dict):
        raise ManifestUnreadable(path, f"Manifest file does not contain a JSON object: {path}")
    return data


def load_manifest(path: str | os.PathLike) -> dict:
    """
    Load and decode a Vite `manifest.json` file.

    The decoded manifest is cached per path and reused until the file's mtime
    changes. Callers must treat the returned mapping as read-only.

    Args:
        path: Path to the manifest file

    Returns:
        Mapping of chunk name -> raw manifest record

    Raises:
        ManifestUnreadable: if the file is missing, unreadable or not a JSON object
    """
    manifest_path = os.path.abspath(os.fspath(path))

    try:
        current_mtime = os.path.getmtime(manifest_path)
    except OSError:
        current_mtime = None

    with _CACHE_LOCK:
        cached = _MANIFEST_CACHE.get(manifest_path)
        if cached is not None and current_mtime is not None and cached[0] == current_mtime:
            return cached[1]

        if cached is not None:
            logger.debug(f"Manifest changed on disk, reloading: {manifest_path}")
            del _MANIFEST_CACHE[manifest_path]

        data = _read_manifest(manifest_path)
        if current_mtime is not None:
            _MANIFEST_CACHE[manifest_path] = (current_mtime, data)

    logger.debug(f"Loaded manifest {manifest_path} with {len(data)} entries")
    return data


def clear_manifest_cache() -> None:
    """Clear the manifest cache (useful for testing or hot-reload)."""
    with _CACHE_LOCK:
        _MANIFEST_CACHE.clear()
