from keyframe_api.core.value_objects.output_location import OutputLocation
from keyframe_api.core.value_objects.sampling_interval import SamplingInterval
from keyframe_api.core.value_objects.staged_video import StagedVideo
from keyframe_api.core.value_objects.video_source import SourceKind, VideoSource

__all__ = ["OutputLocation", "SamplingInterval", "StagedVideo", "SourceKind", "VideoSource"]
