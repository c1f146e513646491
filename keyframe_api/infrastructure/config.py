"""
Keyframe API configuration using Pydantic Settings.
Every value can be overridden from the environment or a ``.env`` file.
"""

from __future__ import annotations

from pydantic import Field
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load .env before any BaseSettings subclass reads env vars
load_dotenv()


class StorageSettings(BaseSettings):
    staging_dir: str = "./temp"
    output_dir: str = "./uploads"

    model_config = {"env_prefix": "STORAGE_"}


class DownloadSettings(BaseSettings):
    timeout: int = 60
    chunk_size: int = 1024 * 1024

    model_config = {"env_prefix": "DOWNLOAD_"}


class FFmpegSettings(BaseSettings):
    binary: str = ""
    quality: int = 2
    timeout: int = 600

    model_config = {"env_prefix": "FFMPEG_"}


class WebSettings(BaseSettings):
    host: str = "0.0.0.0"
    max_upload_size_mb: int = 500
    allowed_mime_types: list[str] = Field(
        default_factory=lambda: [
            "video/mp4",
            "video/mpeg",
            "video/quicktime",
            "video/x-msvideo",
            "video/webm",
        ]
    )
    allowed_origins: str = "*"

    model_config = {"env_prefix": "WEB_"}


class LoggingSettings(BaseSettings):
    level: str = "INFO"

    model_config = {"env_prefix": "LOG_"}


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    app_env: str = "development"
    port: int = 3000
    # Public origin used for frame URLs; the request's own origin when empty.
    base_url: str = ""

    storage: StorageSettings = Field(default_factory=StorageSettings)
    download: DownloadSettings = Field(default_factory=DownloadSettings)
    ffmpeg: FFmpegSettings = Field(default_factory=FFmpegSettings)
    web: WebSettings = Field(default_factory=WebSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def max_upload_size_bytes(self) -> int:
        return self.web.max_upload_size_mb * 1024 * 1024

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.web.allowed_origins.split(",") if o.strip()] or ["*"]
