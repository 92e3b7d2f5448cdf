"""Unit tests for configuration and settings-driven resolver construction."""

from __future__ import annotations

import pytest
from pydantic import ValidationError


class TestSettings:
    """Tests for Settings loading."""

    def test_reads_environment(self, monkeypatch, tmp_path):
        """Test that VITE_MANIFEST_* variables populate settings."""
        from config.settings import Settings

        monkeypatch.setenv("VITE_MANIFEST_DEV", "true")
        monkeypatch.setenv("VITE_MANIFEST_BASE_PATH", "/static/build/")
        monkeypatch.setenv("VITE_MANIFEST_MANIFEST_PATH", str(tmp_path / "manifest.json"))
        monkeypatch.setenv("VITE_MANIFEST_PRELOAD_FONTS", "1")

        s = Settings()
        assert s.dev is True
        assert s.base_path == "/static/build/"
        assert s.manifest_path == tmp_path / "manifest.json"
        assert s.preload.fonts is True
        assert s.preload.images is False

    def test_log_format_is_normalized(self):
        """Test that log format accepts any casing."""
        from config.settings import Settings

        assert Settings(log_format=" JSON ").log_format == "json"

    def test_invalid_log_format_rejected(self):
        """Test that unknown log formats are rejected."""
        from config.settings import Settings

        with pytest.raises(ValidationError):
            Settings(log_format="xml")

    def test_reload_settings_updates_binding(self, monkeypatch):
        """Test that reload_settings picks up new environment values."""
        import config

        monkeypatch.setenv("VITE_MANIFEST_BASE_PATH", "/reloaded/")
        try:
            reloaded = config.reload_settings()
            assert reloaded.base_path == "/reloaded/"
            assert config.settings is reloaded
        finally:
            monkeypatch.undo()
            config.reload_settings()


class TestPreloadSettings:
    """Tests for preload type settings."""

    def test_extra_types_parsed(self):
        """Test that extra preload types are parsed from the compact syntax."""
        from config.settings import PreloadSettings

        s = PreloadSettings(extra="webm=video/webm:video, .json=application/json:fetch")
        assert s.extra_types == {
            "webm": ("video/webm", "video"),
            "json": ("application/json", "fetch"),
        }

    def test_empty_extra(self):
        """Test that no extra types are the default."""
        from config.settings import PreloadSettings

        assert PreloadSettings(extra="").extra_types == {}

    @pytest.mark.parametrize("value", ["webm", "webm=video/webm", "=video/webm:video", "webm=:video"])
    def test_malformed_extra_rejected(self, value):
        """Test that malformed extra types fail at construction."""
        from config.settings import PreloadSettings

        with pytest.raises(ValidationError):
            PreloadSettings(extra=value)


class TestCreateResolver:
    """Tests for create_resolver."""

    def test_registers_configured_types(self, manifest_path):
        """Test that images, fonts and extra types are registered, extra last."""
        from config.settings import PreloadSettings, Settings
        from vite_manifest import create_resolver

        s = Settings(
            dev=False,
            manifest_path=manifest_path,
            base_path="/dist/",
            preload=PreloadSettings(images=True, fonts=True, extra="png=image/x-custom:image,webm=video/webm:video"),
        )
        vite = create_resolver(s)

        types = vite.preload_types
        assert types["woff2"].mime_type == "font/woff2"
        assert types["jpg"].mime_type == "image/jpeg"
        assert types["png"].mime_type == "image/x-custom"
        assert types["webm"].as_attribute == "video"

    def test_uses_global_settings_by_default(self):
        """Test that the configured test manifest is used when no settings are passed."""
        from vite_manifest import create_resolver

        vite = create_resolver()
        assert vite.dev is False
        assert vite.get_url("main.js") == "/dist/assets/main.4889e940.js"

    def test_dev_settings(self, tmp_path):
        """Test that dev settings never require a manifest."""
        from config.settings import PreloadSettings, Settings
        from vite_manifest import create_resolver

        s = Settings(dev=True, manifest_path=tmp_path / "missing.json", base_path="/", preload=PreloadSettings())
        vite = create_resolver(s)

        assert vite.create_tags("main.js").js.startswith('<script type="module" src="/@vite/client"></script>')

    def test_base_path_without_separator_warns(self, manifest_path):
        """Test that a base path without a trailing slash is logged."""
        from loguru import logger

        from config.settings import PreloadSettings, Settings
        from vite_manifest import create_resolver

        messages = []
        sink_id = logger.add(messages.append, level="WARNING")
        try:
            create_resolver(Settings(manifest_path=manifest_path, base_path="/dist", preload=PreloadSettings()))
        finally:
            logger.remove(sink_id)

        assert any("does not end with '/'" in str(m) for m in messages)
