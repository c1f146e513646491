"""Port for periodic key frame extraction from video files."""
from __future__ import annotations
from pathlib import Path
from typing import Protocol, runtime_checkable

from keyframe_api.core.entities.frame_set import FrameSet
from keyframe_api.core.value_objects.staged_video import StagedVideo


@runtime_checkable
class FrameExtractionPort(Protocol):
    async def extract(self, staged: StagedVideo, interval: int, output_dir: Path) -> FrameSet: ...
