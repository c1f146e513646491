"""Local filesystem implementation of ArtifactStorePort."""

from __future__ import annotations

import asyncio
import logging
import re
import shutil
import uuid
from pathlib import Path

from keyframe_api.core.exceptions import FrameNotFoundError, StorageError
from keyframe_api.core.services.frame_ordering import is_frame_name
from keyframe_api.core.value_objects.output_location import OutputLocation

logger = logging.getLogger(__name__)

_JOB_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class LocalArtifactStore:
    """Implements :class:`ArtifactStorePort` using the local filesystem.

    Every job owns one directory ``<base_dir>/<job_id>`` holding its frames.
    """

    def __init__(self, base_dir: str | Path) -> None:
        self._base = Path(base_dir).resolve()
        self._base.mkdir(parents=True, exist_ok=True)
        logger.info("LocalArtifactStore initialised at %s", self._base)

    @property
    def base_dir(self) -> Path:
        return self._base

    # -- helpers ---------------------------------------------------------------

    def _job_dir(self, job_id: str) -> Path:
        """Return the directory for *job_id*, refusing anything but a plain name."""
        if not _JOB_ID_RE.match(job_id):
            raise FrameNotFoundError(job_id, "")
        target = (self._base / job_id).resolve()
        if target.parent != self._base:
            raise FrameNotFoundError(job_id, "")
        return target

    # -- ArtifactStorePort implementation --------------------------------------

    def allocate(self) -> OutputLocation:
        job_id = str(uuid.uuid4())
        path = self._base / job_id
        # exist_ok=False: a collision must fail loudly rather than merge jobs.
        path.mkdir(parents=True, exist_ok=False)
        logger.debug("Allocated output directory %s", path)
        return OutputLocation(job_id=job_id, path=path)

    async def delete(self, job_id: str) -> None:
        """Recursively remove a job's directory. Missing directories are fine."""
        try:
            target = self._job_dir(job_id)
        except FrameNotFoundError:
            logger.debug("Ignoring delete for invalid job id %r", job_id)
            return

        if not target.exists():
            logger.debug("Output directory already absent: %s", target)
            return

        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, shutil.rmtree, target)
        except FileNotFoundError:
            return
        except OSError as exc:
            raise StorageError(f"Failed to delete frames for {job_id}: {exc}") from exc
        logger.info("Deleted output directory %s", target)

    def resolve(self, job_id: str, frame_name: str) -> Path:
        """Return the path of an existing frame inside the job's directory."""
        if not is_frame_name(frame_name):
            raise FrameNotFoundError(job_id, frame_name)
        job_dir = self._job_dir(job_id)
        candidate = (job_dir / frame_name).resolve()
        if candidate.parent != job_dir or not candidate.is_file():
            raise FrameNotFoundError(job_id, frame_name)
        return candidate

