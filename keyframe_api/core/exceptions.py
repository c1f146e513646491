"""Custom exception hierarchy for the keyframe extraction service."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class KeyframeError(Exception):
    """Base exception for all keyframe service errors."""


class PipelineFailure(str, Enum):
    INVALID_INTERVAL = "invalid_interval"
    NO_SOURCE_PROVIDED = "no_source_provided"
    ACQUISITION_FAILED = "acquisition_failed"
    EXTRACTION_FAILED = "extraction_failed"


_PIPELINE_MESSAGES = {
    PipelineFailure.INVALID_INTERVAL: "Interval must be between 1 and 60 seconds",
    PipelineFailure.NO_SOURCE_PROVIDED: "Either videoUrl or video file must be provided",
    PipelineFailure.ACQUISITION_FAILED: "Failed to acquire video",
    PipelineFailure.EXTRACTION_FAILED: "Failed to extract keyframes",
}


class PipelineError(KeyframeError):
    """Raised by the extraction pipeline; ``reason`` selects the HTTP status."""

    def __init__(
        self,
        reason: PipelineFailure,
        details: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        self.reason = reason
        self.details = details
        super().__init__(message or _PIPELINE_MESSAGES[reason])

    @property
    def is_client_error(self) -> bool:
        return self.reason in (
            PipelineFailure.INVALID_INTERVAL,
            PipelineFailure.NO_SOURCE_PROVIDED,
        )


class AcquisitionFailure(str, Enum):
    DOWNLOAD_FAILED = "download_failed"
    NO_SOURCE_PROVIDED = "no_source_provided"
    UPLOAD_MISSING = "upload_missing"


class AcquisitionError(KeyframeError):
    """Raised when a source video cannot be staged locally."""

    def __init__(self, reason: AcquisitionFailure, details: str = "") -> None:
        self.reason = reason
        self.details = details
        super().__init__(details or reason.value)


class ExtractionError(KeyframeError):
    """Raised when the frame extraction engine fails."""

    def __init__(self, details: str) -> None:
        self.reason = "engine_failure"
        self.details = details
        super().__init__(f"FFmpeg error: {details}")


class UploadValidationError(KeyframeError):
    """Raised when an uploaded file fails validation."""

    status_code = 400


class UploadTooLargeError(UploadValidationError):
    status_code = 413


class FrameNotFoundError(KeyframeError):
    """Raised when a frame cannot be resolved inside its job directory."""

    def __init__(self, video_id: str, frame_name: str) -> None:
        self.video_id = video_id
        self.frame_name = frame_name
        super().__init__("Frame not found")


class StorageError(KeyframeError):
    """Raised when output artifacts cannot be removed from disk."""


_ACQUISITION_MESSAGES = {
    AcquisitionFailure.DOWNLOAD_FAILED: "Failed to download video from URL",
    AcquisitionFailure.UPLOAD_MISSING: "Uploaded video is no longer available",
}


def acquisition_failed(exc: AcquisitionError) -> PipelineError:
    """Wrap an acquisition failure with a message that names what went wrong."""
    return PipelineError(
        PipelineFailure.ACQUISITION_FAILED,
        exc.details,
        message=_ACQUISITION_MESSAGES.get(exc.reason),
    )
