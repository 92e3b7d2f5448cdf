"""Pydantic schemas for Vite manifest records and rendered tags."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ManifestBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class ChunkRecord(ManifestBaseModel):
    """One published file as declared in Vite's `manifest.json`.

    Fields are read only through the manifest's own keys (`file`, `css`, ...),
    so a decoded manifest record can be validated directly. Paths are relative
    to Vite's `build.outDir` and are trusted as-is.
    """

    source_path: str | None = Field(default=None, alias="src")
    # Only set for entry chunks (Rollup's logical chunk name)
    logical_name: str | None = Field(default=None, alias="name")
    is_entry: bool = Field(default=False, alias="isEntry")
    is_dynamic_entry: bool = Field(default=False, alias="isDynamicEntry")
    published_file: str = Field(alias="file")
    style_files: tuple[str, ...] = Field(default=(), alias="css")
    asset_files: tuple[str, ...] = Field(default=(), alias="assets")
    static_imports: tuple[str, ...] = Field(default=(), alias="imports")
    dynamic_imports: tuple[str, ...] = Field(default=(), alias="dynamicImports")

    @field_validator("is_entry", "is_dynamic_entry", mode="before")
    @classmethod
    def null_flag_is_false(cls, v):
        return False if v is None else v

    @field_validator("style_files", "asset_files", "static_imports", "dynamic_imports", mode="before")
    @classmethod
    def null_list_is_empty(cls, v):
        return () if v is None else v

    @classmethod
    def create(cls, record: Mapping[str, Any]) -> ChunkRecord:
        """Build a record from a decoded manifest entry.

        Raises:
            pydantic.ValidationError: if `file` is missing or a field has the wrong type.
        """
        return cls.model_validate(record)


class PreloadType(ManifestBaseModel):
    mime_type: str
    as_attribute: str


class TagSet(ManifestBaseModel):
    """Markup for a page: preload links, stylesheet links and module scripts.

    Each group is a newline-joined string; empty groups are "".
    """

    preload: str = ""
    css: str = ""
    js: str = ""
