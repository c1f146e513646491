"""FrameSet entity: the ordered frames produced for one job."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class FrameSet:
    """Frames in temporal order; ``frames[0]`` is the earliest."""

    job_id: str
    frames: list[Path] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def frame_names(self) -> list[str]:
        return [p.name for p in self.frames]

    @property
    def is_empty(self) -> bool:
        return not self.frames

    def to_urls(self, base_url: str) -> list[str]:
        """Map each frame to ``<base>/frames/<job_id>/<name>``."""
        base = base_url.rstrip("/")
        return [f"{base}/frames/{self.job_id}/{name}" for name in self.frame_names]
