"""Shared pytest fixtures and test configuration.

This module provides common fixtures and utilities for all tests.
"""

from __future__ import annotations

import json
import os
import sys

import pytest

# Ensure repo root is on sys.path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def configure_test_env() -> None:
    """Configure environment variables for testing.

    Pins every setting the tests rely on so that a developer's shell or .env
    file cannot change results.
    """
    os.environ["VITE_MANIFEST_DEV"] = "false"
    os.environ["VITE_MANIFEST_BASE_PATH"] = "/dist/"
    os.environ["VITE_MANIFEST_MANIFEST_PATH"] = os.path.join(FIXTURES_DIR, "manifest.json")
    os.environ["VITE_MANIFEST_PRELOAD_IMAGES"] = "false"
    os.environ["VITE_MANIFEST_PRELOAD_FONTS"] = "false"
    os.environ["VITE_MANIFEST_PRELOAD_EXTRA"] = ""
    os.environ.setdefault("VITE_MANIFEST_LOG_LEVEL", "ERROR")


# Configure test environment on import
configure_test_env()


@pytest.fixture(autouse=True)
def _clear_manifest_cache():
    """Each test starts with an empty manifest cache."""
    from vite_manifest.utils import clear_manifest_cache

    clear_manifest_cache()
    yield
    clear_manifest_cache()


@pytest.fixture
def manifest_path() -> str:
    """Path to the sample manifest.json produced by `vite build`."""
    return os.path.join(FIXTURES_DIR, "manifest.json")


@pytest.fixture
def manifest_data(manifest_path) -> dict:
    """Decoded copy of the sample manifest."""
    with open(manifest_path, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def resolver(manifest_path):
    """Production-mode resolver over the sample manifest with image preloading."""
    from vite_manifest import ManifestResolver

    vite = ManifestResolver(False, manifest_path, "/dist/")
    vite.register_image_preload_types()
    return vite


@pytest.fixture
def write_manifest(tmp_path):
    """Write a manifest mapping to a temporary manifest.json and return its path."""

    def _write(data, name: str = "manifest.json") -> str:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write
