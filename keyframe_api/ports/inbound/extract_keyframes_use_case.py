"""Inbound port for keyframe extraction."""
from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable
if TYPE_CHECKING:
    from keyframe_api.application.dto.extraction_result import ExtractionResult
    from keyframe_api.core.value_objects.video_source import VideoSource


@runtime_checkable
class ExtractKeyframesUseCase(Protocol):
    async def run_extraction(
        self, interval: int, source: Optional[VideoSource], base_url: str
    ) -> ExtractionResult: ...
