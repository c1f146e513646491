"""
Dependency container.
Wires together ports and adapters based on configuration.
"""
from __future__ import annotations

import logging
from typing import Optional

from keyframe_api.infrastructure.config import Settings

logger = logging.getLogger(__name__)


class ApplicationContainer:
    """Simplified container that builds concrete instances from settings.

    Usage::

        container = ApplicationContainer(settings)
        service = container.extract_keyframes_service()
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._cache: dict[str, object] = {}

    def _get_or_create(self, key: str, factory):
        if key not in self._cache:
            self._cache[key] = factory(self.settings)
        return self._cache[key]

    # ── Lazy factory helpers ──────────────────────────────────────

    @staticmethod
    def _build_video_acquirer(settings: Settings):
        from keyframe_api.adapters.outbound.acquisition.http_video_acquirer import HttpVideoAcquirer
        return HttpVideoAcquirer(
            staging_dir=settings.storage.staging_dir,
            timeout=settings.download.timeout,
            chunk_size=settings.download.chunk_size,
        )

    @staticmethod
    def _build_frame_extraction(settings: Settings):
        from keyframe_api.adapters.outbound.ffmpeg.ffmpeg_frames import FFmpegFrameExtractor
        return FFmpegFrameExtractor(
            binary=settings.ffmpeg.binary or None,
            quality=settings.ffmpeg.quality,
            timeout=settings.ffmpeg.timeout,
        )

    @staticmethod
    def _build_artifact_store(settings: Settings):
        from keyframe_api.adapters.outbound.persistence.local_artifact_store import LocalArtifactStore
        return LocalArtifactStore(base_dir=settings.storage.output_dir)

    # ── Public accessors ──────────────────────────────────────────

    def video_acquirer(self):
        return self._get_or_create("video_acquirer", self._build_video_acquirer)

    def frame_extraction(self):
        return self._get_or_create("frame_extraction", self._build_frame_extraction)

    def artifact_store(self):
        return self._get_or_create("artifact_store", self._build_artifact_store)

    def extract_keyframes_service(self):
        from keyframe_api.application.extract_keyframes_service import ExtractKeyframesService
        if "extract_keyframes_service" not in self._cache:
            self._cache["extract_keyframes_service"] = ExtractKeyframesService(
                acquirer=self.video_acquirer(),
                extractor=self.frame_extraction(),
                store=self.artifact_store(),
            )
        return self._cache["extract_keyframes_service"]

    def frame_service(self):
        from keyframe_api.application.frame_service import FrameService
        if "frame_service" not in self._cache:
            self._cache["frame_service"] = FrameService(store=self.artifact_store())
        return self._cache["frame_service"]
