"""Unit tests for Settings."""
from __future__ import annotations

from keyframe_api.infrastructure.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("PORT", "BASE_URL", "STORAGE_STAGING_DIR", "STORAGE_OUTPUT_DIR", "FFMPEG_TIMEOUT"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.port == 3000
        assert settings.download.timeout == 60
        assert settings.ffmpeg.quality == 2
        assert settings.web.max_upload_size_mb == 500
        assert "video/webm" in settings.web.allowed_mime_types

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("BASE_URL", "https://frames.example.com")
        monkeypatch.setenv("FFMPEG_TIMEOUT", "30")
        settings = Settings()
        assert settings.port == 8080
        assert settings.base_url == "https://frames.example.com"
        assert settings.ffmpeg.timeout == 30

    def test_max_upload_size_bytes(self):
        settings = Settings()
        settings.web.max_upload_size_mb = 2
        assert settings.max_upload_size_bytes == 2 * 1024 * 1024

    def test_cors_origins(self):
        settings = Settings()
        settings.web.allowed_origins = "https://a.com, https://b.com"
        assert settings.cors_origins == ["https://a.com", "https://b.com"]
