from keyframe_api.ports.outbound.artifact_store_port import ArtifactStorePort
from keyframe_api.ports.outbound.frame_extraction_port import FrameExtractionPort
from keyframe_api.ports.outbound.video_source_port import VideoSourcePort

__all__ = [
    "VideoSourcePort",
    "FrameExtractionPort",
    "ArtifactStorePort",
]
