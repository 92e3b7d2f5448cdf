"""Vite manifest resolution and tag rendering services."""

from __future__ import annotations

import os
from collections import deque
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from loguru import logger

from ..errors import EntryNotFound, NotAnEntryPoint
from ..schemas.manifest import ChunkRecord, PreloadType, TagSet
from ..utils.manifest import load_manifest

# Vite dev server client, injected ahead of the entries in development mode
DEV_CLIENT_PATH = "@vite/client"

# https://developer.mozilla.org/en-US/docs/Web/HTML/Attributes/rel/preload#what_types_of_content_can_be_preloaded
IMAGE_PRELOAD_TYPES: dict[str, PreloadType] = {
    "apng": PreloadType(mime_type="image/apng", as_attribute="image"),
    "avif": PreloadType(mime_type="image/avif", as_attribute="image"),
    "bmp": PreloadType(mime_type="image/bmp", as_attribute="image"),
    "cur": PreloadType(mime_type="image/x-icon", as_attribute="image"),
    "gif": PreloadType(mime_type="image/gif", as_attribute="image"),
    "ico": PreloadType(mime_type="image/x-icon", as_attribute="image"),
    "jpeg": PreloadType(mime_type="image/jpeg", as_attribute="image"),
    "jpg": PreloadType(mime_type="image/jpeg", as_attribute="image"),
    "png": PreloadType(mime_type="image/png", as_attribute="image"),
    "svg": PreloadType(mime_type="image/svg+xml", as_attribute="image"),
    "tif": PreloadType(mime_type="image/tiff", as_attribute="image"),
    "tiff": PreloadType(mime_type="image/tiff", as_attribute="image"),
    "webp": PreloadType(mime_type="image/webp", as_attribute="image"),
}

FONT_PRELOAD_TYPES: dict[str, PreloadType] = {
    "ttf": PreloadType(mime_type="font/ttf", as_attribute="font"),
    "otf": PreloadType(mime_type="font/otf", as_attribute="font"),
    "woff": PreloadType(mime_type="font/woff", as_attribute="font"),
    "woff2": PreloadType(mime_type="font/woff2", as_attribute="font"),
}


class ManifestResolver:
    """Resolve Vite entry points into preload, stylesheet and script tags.

    In production mode the manifest is read once at construction and every
    entry's static import graph is walked to collect the files a page needs.
    In development mode the manifest is ignored and tags point straight at the
    Vite dev server, which injects CSS itself.

    Typical template usage::

        tags = resolver.create_tags("main.js")
        # <head>: tags.preload, tags.css
        # <body>: tags.js

    The resolver is read-only once preload types are registered, so a single
    instance can be shared between request workers.
    """

    def __init__(self, dev: bool, manifest: str | os.PathLike | Mapping[str, Mapping[str, Any]], base_path: str):
        """
        Args:
            dev: True to bypass the manifest (Vite dev server)
            manifest: Path to `manifest.json`, or an already-decoded manifest mapping
            base_path: Public path prefix for every emitted URL, e.g. "/dist/"

        Raises:
            ManifestUnreadable: production mode and the manifest path cannot be read
            pydantic.ValidationError: a manifest record is missing its `file`
        """
        self._dev = dev
        self._base_path = base_path
        self._preload_types: dict[str, PreloadType] = {}

        if dev:
            # Vite dev server serves sources directly; no manifest needed.
            self._chunks: dict[str, ChunkRecord] = {}
            return

        if isinstance(manifest, Mapping):
            raw = manifest
        else:
            raw = load_manifest(manifest)

        self._chunks = {name: ChunkRecord.create(record) for name, record in raw.items()}
        logger.debug(f"Manifest resolver ready with {len(self._chunks)} chunks (base_path={base_path!r})")

    @property
    def dev(self) -> bool:
        return self._dev

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def chunks(self) -> Mapping[str, ChunkRecord]:
        return MappingProxyType(self._chunks)

    @property
    def preload_types(self) -> dict[str, PreloadType]:
        return dict(self._preload_types)

    def register_preload_type(self, ext: str, mime_type: str, as_attribute: str) -> None:
        """Register a MIME type for preloading assets with the given extension.

        Args:
            ext: File extension without the leading dot
            mime_type: Value of the preload link's `type` attribute
            as_attribute: Value of the preload link's `as` attribute (content type)
        """
        self._preload_types[ext] = PreloadType(mime_type=mime_type, as_attribute=as_attribute)
        logger.debug(f"Registered preload type .{ext} -> {mime_type} (as={as_attribute})")

    def register_image_preload_types(self) -> None:
        """Register all common web image formats for preloading."""
        self._preload_types.update(IMAGE_PRELOAD_TYPES)
        logger.debug(f"Registered {len(IMAGE_PRELOAD_TYPES)} image preload types")

    def register_font_preload_types(self) -> None:
        """Register common web font formats for preloading."""
        self._preload_types.update(FONT_PRELOAD_TYPES)
        logger.debug(f"Registered {len(FONT_PRELOAD_TYPES)} font preload types")

    def create_tags(self, *entries: str) -> TagSet:
        """Create preload, CSS and JS tags for the given entry point(s).

        Entry names are the manifest keys of chunks built from Rollup's `input`
        setting (e.g. "main.js").

        Raises:
            EntryNotFound: an entry is not in the manifest (production mode)
            NotAnEntryPoint: an entry names a chunk that is not an entry point
        """
        if self._dev:
            js = [self._script_tag(self._base_path + DEV_CLIENT_PATH)]
            js.extend(self._script_tag(self._base_path + entry) for entry in entries)
            return TagSet(js="\n".join(js))

        chunks = list(self.resolve_chunks(entries).values())

        return TagSet(
            preload=self._create_preload_tags(chunks),
            css=self._create_style_tags(chunks),
            js=self._create_script_tags(chunks),
        )

    def get_url(self, name: str) -> str:
        """Get the public URL of any published chunk, entry point or not.

        Raises:
            EntryNotFound: `name` is not in the manifest (production mode)
        """
        if self._dev:
            return self._base_path + name

        chunk = self._chunks.get(name)
        if chunk is None:
            raise EntryNotFound(name)
        return self._base_path + chunk.published_file

    def resolve_chunks(self, entries: Iterable[str]) -> dict[str, ChunkRecord]:
        """Collect the entries and every chunk they statically import.

        Each chunk appears once, at the position it was first discovered.
        Dynamic imports are not followed.
        """
        entries = list(entries)
        chunks: dict[str, ChunkRecord] = {}

        for entry in entries:
            chunk = self._chunks.get(entry)
            if chunk is None:
                raise EntryNotFound(entry)
            if not chunk.is_entry:
                raise NotAnEntryPoint(entry)

            chunks[entry] = chunk

            imports = deque(chunk.static_imports)
            while imports:
                name = imports.popleft()
                if name in chunks:
                    continue
                imported = self._chunks.get(name)
                if imported is None:
                    raise EntryNotFound(name)
                chunks[name] = imported
                imports.extend(imported.static_imports)

        logger.debug(f"Resolved {len(chunks)} chunks for entries {entries}")
        return chunks

    def _create_preload_tags(self, chunks: list[ChunkRecord]) -> str:
        tags = []
        for chunk in chunks:
            if chunk.published_file.endswith(".js"):
                tags.append(f'<link rel="modulepreload" href="{self._base_path}{chunk.published_file}" />')

            for asset in chunk.asset_files:
                _, dot, ext = asset.rpartition(".")
                preload = self._preload_types.get(ext) if dot else None
                if preload is None:
                    continue
                tags.append(
                    f'<link rel="preload" as="{preload.as_attribute}" type="{preload.mime_type}" '
                    f'href="{self._base_path}{asset}" />'
                )
        return "\n".join(tags)

    def _create_style_tags(self, chunks: list[ChunkRecord]) -> str:
        tags = []
        for chunk in chunks:
            for css in chunk.style_files:
                tags.append(f'<link rel="stylesheet" href="{self._base_path}{css}" />')
        return "\n".join(tags)

    def _create_script_tags(self, chunks: list[ChunkRecord]) -> str:
        # Shared chunks are pulled in by the entry's own module graph.
        return "\n".join(self._script_tag(self._base_path + chunk.published_file) for chunk in chunks if chunk.is_entry)

    @staticmethod
    def _script_tag(src: str) -> str:
        return f'<script type="module" src="{src}"></script>'


def create_resolver(settings_obj: Any | None = None) -> ManifestResolver:
    """Build a resolver from settings, with configured preload types registered.

    Registration order is images, fonts, then extra types, so extra types win.
    """
    if settings_obj is None:
        from config import settings as settings_obj

    if not settings_obj.base_path.endswith("/"):
        logger.warning(f"Base path {settings_obj.base_path!r} does not end with '/'; URLs are joined without a separator")

    resolver = ManifestResolver(settings_obj.dev, settings_obj.manifest_path, settings_obj.base_path)
    if settings_obj.preload.images:
        resolver.register_image_preload_types()
    if settings_obj.preload.fonts:
        resolver.register_font_preload_types()
    for ext, (mime_type, as_attribute) in settings_obj.preload.extra_types.items():
        resolver.register_preload_type(ext, mime_type, as_attribute)
    return resolver
