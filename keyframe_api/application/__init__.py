from keyframe_api.application.extract_keyframes_service import ExtractKeyframesService
from keyframe_api.application.frame_service import FrameService

__all__ = ["ExtractKeyframesService", "FrameService"]
