"""FFmpeg-based periodic key frame extraction adapter."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

from keyframe_api.adapters.outbound.ffmpeg.ffmpeg_base import FFmpegRunError, run_ffmpeg
from keyframe_api.core.entities.frame_set import FrameSet
from keyframe_api.core.exceptions import ExtractionError
from keyframe_api.core.services.frame_ordering import FRAME_OUTPUT_PATTERN, order_frames
from keyframe_api.core.value_objects.staged_video import StagedVideo

logger = logging.getLogger(__name__)

_DEFAULT_QUALITY: int = 2


class FFmpegFrameExtractor:
    """Samples one JPEG frame every *interval* seconds with ffmpeg.

    Satisfies :class:`~keyframe_api.ports.outbound.frame_extraction_port.FrameExtractionPort`.
    """

    def __init__(
        self,
        binary: Optional[str] = None,
        quality: int = _DEFAULT_QUALITY,
        timeout: Optional[float] = None,
    ) -> None:
        self._binary = binary
        self._quality = quality
        self._timeout = timeout

    async def extract(self, staged: StagedVideo, interval: int, output_dir: Path) -> FrameSet:
        out = Path(output_dir)
        args = [
            "-i", str(staged.path),
            "-vf", f"fps=1/{interval}",
            "-q:v", str(self._quality),
            str(out / FRAME_OUTPUT_PATTERN),
        ]
        try:
            await run_ffmpeg(args, binary=self._binary, timeout=self._timeout)
        except FFmpegRunError as exc:
            raise ExtractionError(str(exc)) from exc

        loop = asyncio.get_running_loop()
        frames = await loop.run_in_executor(None, self._list_frames, out)
        logger.info(
            "Extracted %d frames from %s (every %ds)", len(frames), staged.filename, interval
        )
        return FrameSet(job_id=out.name, frames=frames)

    @staticmethod
    def _list_frames(output_dir: Path) -> list[Path]:
        if not output_dir.is_dir():
            return []
        return order_frames(p for p in output_dir.iterdir() if p.is_file())
