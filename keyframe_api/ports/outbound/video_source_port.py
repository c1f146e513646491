"""Port for staging a source video on local disk."""
from __future__ import annotations
from typing import Optional, Protocol, runtime_checkable

from keyframe_api.core.value_objects.staged_video import StagedVideo
from keyframe_api.core.value_objects.video_source import VideoSource


@runtime_checkable
class VideoSourcePort(Protocol):
    async def acquire(self, source: Optional[VideoSource]) -> StagedVideo: ...
