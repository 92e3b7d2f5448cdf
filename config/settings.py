"""
Vite Manifest Configuration Management Module

Provides type-safe configuration management using pydantic-settings.
Supports loading configuration from environment variables and .env files.

Usage:
    from config.settings import settings
    print(settings.manifest_path)
    print(settings.preload.images)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent


def parse_preload_types(value: str) -> dict[str, tuple[str, str]]:
    """Parse `ext=mime/type:as` items separated by commas.

    Example: "webm=video/webm:video,json=application/json:fetch"
    """
    types: dict[str, tuple[str, str]] = {}
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        ext, sep, rest = item.partition("=")
        mime_type, sep2, as_attribute = rest.rpartition(":")
        ext = ext.strip().lstrip(".")
        if not sep or not sep2 or not ext or not mime_type.strip() or not as_attribute.strip():
            raise ValueError(f"Invalid preload type {item!r}, expected ext=mime/type:as")
        types[ext] = (mime_type.strip(), as_attribute.strip())
    return types


class PreloadSettings(BaseSettings):
    """Preload type registration"""

    model_config = SettingsConfigDict(
        env_prefix="VITE_MANIFEST_PRELOAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    images: bool = Field(default=False, description="Register common image formats for preloading")
    fonts: bool = Field(default=False, description="Register common web font formats for preloading")
    extra: str = Field(default="", description="Extra preload types (comma-separated ext=mime/type:as)")

    @field_validator("extra")
    @classmethod
    def validate_extra(cls, v: str) -> str:
        parse_preload_types(v)
        return v

    @property
    def extra_types(self) -> dict[str, tuple[str, str]]:
        """Get extra preload types as ext -> (mime_type, as_attribute)"""
        return parse_preload_types(self.extra)


class Settings(BaseSettings):
    """Main configuration class"""

    model_config = SettingsConfigDict(
        env_prefix="VITE_MANIFEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Development mode skips the manifest and points at the Vite dev server
    dev: bool = False
    manifest_path: Path = PROJECT_ROOT / "static" / "dist" / ".vite" / "manifest.json"
    # Public base path of published assets; should match Vite's `base` option
    base_path: str = "/dist/"

    # Log configuration
    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"

    preload: PreloadSettings = Field(default_factory=PreloadSettings)

    @field_validator("manifest_path", mode="before")
    @classmethod
    def resolve_path(cls, v):
        """Resolve path"""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


@lru_cache
def get_settings() -> Settings:
    """Get settings singleton (with cache)"""
    return Settings()


# Global settings instance - explicit type annotation ensures IDE correctly infers type
settings: Settings = get_settings()


def reload_settings() -> Settings:
    """Reload settings (clear cache)"""
    get_settings.cache_clear()
    # Note: this does not update module-level settings variable, caller should use return value
    # To update global settings, use config package's reload_settings
    return get_settings()
