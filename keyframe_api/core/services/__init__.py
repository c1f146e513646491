from keyframe_api.core.services.frame_ordering import (
    FRAME_OUTPUT_PATTERN,
    frame_index,
    is_frame_name,
    order_frames,
)

__all__ = ["FRAME_OUTPUT_PATTERN", "frame_index", "is_frame_name", "order_frames"]
