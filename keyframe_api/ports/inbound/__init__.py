from keyframe_api.ports.inbound.extract_keyframes_use_case import ExtractKeyframesUseCase

__all__ = ["ExtractKeyframesUseCase"]
