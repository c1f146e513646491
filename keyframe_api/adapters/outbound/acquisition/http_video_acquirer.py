"""Stages source videos on local disk from a remote URL or an upload."""

from __future__ import annotations

import asyncio
import logging
import os
import threading
import uuid
from pathlib import Path
from typing import Callable, Optional

import requests

from keyframe_api.core.exceptions import AcquisitionError, AcquisitionFailure
from keyframe_api.core.value_objects.staged_video import StagedVideo
from keyframe_api.core.value_objects.video_source import VideoSource

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 60
_DEFAULT_CHUNK_SIZE = 1024 * 1024
# Downloads are always staged as .mp4; ffmpeg probes the real container.
_STAGED_SUFFIX = ".mp4"


class HttpVideoAcquirer:
    """Implements :class:`VideoSourcePort`.

    Remote videos are streamed with ``requests`` into *staging_dir* under a
    fresh UUID name. Uploaded files are trusted as already staged by the
    upload boundary.

    Each download opens its own session from *session_factory*; sessions are
    never shared between executor threads.
    """

    def __init__(
        self,
        staging_dir: str | Path,
        timeout: float = _DEFAULT_TIMEOUT,
        chunk_size: int = _DEFAULT_CHUNK_SIZE,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self._staging = Path(staging_dir).resolve()
        self._timeout = timeout
        self._chunk_size = chunk_size
        self._session_factory = session_factory

    @property
    def staging_dir(self) -> Path:
        return self._staging

    async def acquire(self, source: Optional[VideoSource]) -> StagedVideo:
        if source is None:
            raise AcquisitionError(
                AcquisitionFailure.NO_SOURCE_PROVIDED,
                "Either videoUrl or video file must be provided",
            )
        if source.is_url:
            target = self._staging / f"{uuid.uuid4()}{_STAGED_SUFFIX}"
            await self._download_in_executor(source.value, target)
            return StagedVideo(path=target, owned=True)

        path = Path(source.value)
        if not path.is_file():
            raise AcquisitionError(
                AcquisitionFailure.UPLOAD_MISSING,
                f"Uploaded file not found: {path.name}",
            )
        return StagedVideo(path=path, owned=True)

    # -- internal --------------------------------------------------------------

    async def _download_in_executor(self, url: str, target: Path) -> None:
        """Run the blocking download in a worker thread.

        If the awaiting task is cancelled, the thread is told to stop and
        *target* is removed once the thread has let go of it.
        """
        loop = asyncio.get_running_loop()
        stop = threading.Event()
        future = loop.run_in_executor(None, self._download, url, target, stop)
        try:
            await asyncio.shield(future)
        except asyncio.CancelledError:
            stop.set()
            future.add_done_callback(lambda f: self._abandon(f, target))
            logger.info("Download of %s cancelled", url)
            raise

    def _download(self, url: str, target: Path, stop: threading.Event) -> None:
        """Stream *url* to *target* (runs in executor)."""
        self._staging.mkdir(parents=True, exist_ok=True)
        logger.info("Downloading %s -> %s", url, target.name)

        session = self._session_factory()
        written = 0
        try:
            with session.get(url, stream=True, timeout=self._timeout) as response:
                response.raise_for_status()
                with open(target, "wb") as f:
                    for chunk in response.iter_content(chunk_size=self._chunk_size):
                        if stop.is_set():
                            raise AcquisitionError(
                                AcquisitionFailure.DOWNLOAD_FAILED, "Download cancelled"
                            )
                        if chunk:
                            f.write(chunk)
                            written += len(chunk)
                    f.flush()
                    os.fsync(f.fileno())
        except (requests.RequestException, OSError) as exc:
            self._discard(target)
            logger.warning("Download failed for %s: %s", url, exc)
            raise AcquisitionError(AcquisitionFailure.DOWNLOAD_FAILED, str(exc)) from exc
        except BaseException:
            self._discard(target)
            raise
        finally:
            session.close()

        logger.debug("Downloaded %d bytes to %s", written, target)

    def _abandon(self, future: asyncio.Future, target: Path) -> None:
        # Consume the outcome so a failed thread is not reported as unretrieved.
        if not future.cancelled():
            future.exception()
        self._discard(target)

    @staticmethod
    def _discard(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Failed to remove partial download %s: %s", path, exc)
