from keyframe_api.core.entities.extraction_job import ExtractionJob, JobState
from keyframe_api.core.entities.frame_set import FrameSet

__all__ = ["ExtractionJob", "JobState", "FrameSet"]
