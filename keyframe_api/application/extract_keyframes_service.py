"""
Keyframe extraction use case.
Stages a source video, runs frame extraction into a fresh output location
and always releases the staged input.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from keyframe_api.application.dto.extraction_result import ExtractionResult
from keyframe_api.core.entities.extraction_job import ExtractionJob
from keyframe_api.core.exceptions import (
    AcquisitionError,
    AcquisitionFailure,
    ExtractionError,
    KeyframeError,
    PipelineError,
    PipelineFailure,
    acquisition_failed,
)
from keyframe_api.core.value_objects.output_location import OutputLocation
from keyframe_api.core.value_objects.sampling_interval import SamplingInterval
from keyframe_api.core.value_objects.staged_video import StagedVideo
from keyframe_api.core.value_objects.video_source import VideoSource

logger = logging.getLogger(__name__)


class ExtractKeyframesService:
    """Implements :class:`ExtractKeyframesUseCase`.

    Flow: validate interval -> acquire -> allocate -> extract -> map URLs.
    A failed or cancelled extraction rolls back its output directory.
    """

    def __init__(self, acquirer, extractor, store):
        self._acquirer = acquirer
        self._extractor = extractor
        self._store = store

    async def run_extraction(
        self,
        interval: int,
        source: Optional[VideoSource],
        base_url: str,
    ) -> ExtractionResult:
        seconds = SamplingInterval(interval).seconds
        job = ExtractionJob(interval=seconds, source=source)

        job.start_acquiring()
        async with self.staged_video(source) as staged:
            job.start_allocating()
            location = self._store.allocate()
            job.start_extracting(location.job_id)
            logger.info(
                "Job %s: extracting every %ds from %s",
                job.job_id, seconds, staged.filename,
            )

            try:
                frame_set = await self._extractor.extract(staged, seconds, location.path)
            except BaseException as exc:
                job.roll_back(str(exc))
                await self._rollback(location)
                if isinstance(exc, ExtractionError):
                    logger.error("Job %s failed: %s", job.job_id, exc.details)
                    raise PipelineError(PipelineFailure.EXTRACTION_FAILED, exc.details) from exc
                raise

            frame_set.job_id = location.job_id
            if frame_set.is_empty:
                logger.warning(
                    "Job %s produced no frames; video may be shorter than %ds",
                    job.job_id, seconds,
                )
            job.succeed()

        logger.info(
            "Job %s succeeded: %d frames in %.2fs",
            job.job_id, len(frame_set), job.elapsed_seconds,
        )
        return ExtractionResult(
            job_id=location.job_id,
            interval=seconds,
            frame_urls=frame_set.to_urls(base_url),
        )

    @asynccontextmanager
    async def staged_video(self, source: Optional[VideoSource]) -> AsyncIterator[StagedVideo]:
        """Acquire *source* and delete the staged file when the scope exits."""
        try:
            staged = await self._acquirer.acquire(source)
        except AcquisitionError as exc:
            if exc.reason is AcquisitionFailure.NO_SOURCE_PROVIDED:
                raise PipelineError(PipelineFailure.NO_SOURCE_PROVIDED) from exc
            logger.warning("Acquisition failed (%s): %s", exc.reason.value, exc.details)
            raise acquisition_failed(exc) from exc

        try:
            yield staged
        finally:
            self._release(staged)

    @staticmethod
    def _release(staged: StagedVideo) -> None:
        # Synchronous so a cancelled task cannot skip it.
        if not staged.owned:
            return
        try:
            staged.path.unlink(missing_ok=True)
            logger.debug("Removed staged video %s", staged.path)
        except OSError as exc:
            logger.warning("Failed to cleanup %s: %s", staged.path, exc)

    async def _rollback(self, location: OutputLocation) -> None:
        try:
            await self._store.delete(location.job_id)
        except (KeyframeError, OSError) as exc:
            logger.warning("Rollback of %s failed: %s", location.path, exc)
