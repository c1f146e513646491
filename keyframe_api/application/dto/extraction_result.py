"""DTO for keyframe extraction results."""
from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class ExtractionResult:
    job_id: str
    interval: int
    frame_urls: list[str] = field(default_factory=list)

    @property
    def frame_count(self) -> int:
        return len(self.frame_urls)

    def to_dict(self) -> dict:
        return {
            "success": True,
            "videoId": self.job_id,
            "interval": self.interval,
            "frameCount": self.frame_count,
            "keyFrames": list(self.frame_urls),
        }
