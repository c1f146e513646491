from keyframe_api.application.dto.extraction_result import ExtractionResult

__all__ = ["ExtractionResult"]
