"""ExtractionJob - lifecycle of a single keyframe extraction request."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from keyframe_api.core.value_objects.video_source import VideoSource


class JobState(str, Enum):
    VALIDATING = "validating"
    ACQUIRING = "acquiring"
    ALLOCATING = "allocating"
    EXTRACTING = "extracting"
    SUCCEEDED = "succeeded"
    ROLLED_BACK = "rolled_back"


@dataclass
class ExtractionJob:
    """Ephemeral job record; lives only for the duration of one request.

    ``job_id`` is empty until an output location has been allocated.
    """

    interval: int
    source: Optional[VideoSource] = None
    job_id: str = ""
    state: JobState = JobState.VALIDATING
    error: Optional[str] = None
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None

    def start_acquiring(self) -> None:
        self.state = JobState.ACQUIRING

    def start_allocating(self) -> None:
        self.state = JobState.ALLOCATING

    def start_extracting(self, job_id: str) -> None:
        self.job_id = job_id
        self.state = JobState.EXTRACTING

    def succeed(self) -> None:
        self.state = JobState.SUCCEEDED
        self.finished_at = datetime.now(timezone.utc)

    def roll_back(self, error: str) -> None:
        self.state = JobState.ROLLED_BACK
        self.error = error
        self.finished_at = datetime.now(timezone.utc)

    @property
    def elapsed_seconds(self) -> float:
        end = self.finished_at or datetime.now(timezone.utc)
        return (end - self.started_at).total_seconds()
