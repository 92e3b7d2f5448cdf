"""Service layer."""

from .manifest_service import (
    DEV_CLIENT_PATH,
    FONT_PRELOAD_TYPES,
    IMAGE_PRELOAD_TYPES,
    ManifestResolver,
    create_resolver,
)

__all__ = [
    "DEV_CLIENT_PATH",
    "FONT_PRELOAD_TYPES",
    "IMAGE_PRELOAD_TYPES",
    "ManifestResolver",
    "create_resolver",
]
