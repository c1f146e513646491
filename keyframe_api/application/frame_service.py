"""
Frame library use case: serve and delete extracted frames.
"""
from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FrameService:
    """Read and delete access to persisted frame sets."""

    def __init__(self, store):
        self._store = store

    def get_frame(self, video_id: str, frame_name: str) -> Path:
        """Return the local path of one frame. Raises FrameNotFoundError."""
        return self._store.resolve(video_id, frame_name)

    async def delete_frames(self, video_id: str) -> None:
        """Remove every frame of *video_id*; unknown ids are a no-op."""
        await self._store.delete(video_id)
        logger.info("Frames deleted for %s", video_id)
