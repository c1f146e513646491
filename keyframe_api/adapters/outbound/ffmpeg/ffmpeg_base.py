"""
Shared FFmpeg path resolution and command execution utilities.
"""
from __future__ import annotations

import asyncio
import logging
import os
import shutil
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# Common install locations when ffmpeg is not on PATH
_FALLBACK_FFMPEG_PATHS = [
    "/usr/bin/ffmpeg",
    "/usr/local/bin/ffmpeg",
    "/opt/homebrew/bin/ffmpeg",
    r"C:\Program Files\ffmpeg\bin\ffmpeg.exe",
    r"C:\ffmpeg\bin\ffmpeg.exe",
]

# Keep only the tail of stderr in error messages
_STDERR_TAIL = 500


def get_ffmpeg_path(override: Optional[str] = None) -> str:
    """Resolve ffmpeg executable path. Checks the override, PATH, then known locations."""
    if override:
        return override

    path = shutil.which("ffmpeg")
    if path:
        return path

    for candidate in _FALLBACK_FFMPEG_PATHS:
        if os.path.exists(candidate):
            logger.info("Found FFmpeg at: %s", candidate)
            return candidate

    return "ffmpeg"


def has_ffmpeg(override: Optional[str] = None) -> bool:
    path = get_ffmpeg_path(override)
    return os.path.isfile(path) or shutil.which(path) is not None


class FFmpegRunError(RuntimeError):
    """Raised when an ffmpeg invocation does not complete successfully."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


@dataclass
class FFmpegResult:
    returncode: int
    stderr: str


async def run_ffmpeg(
    args: list[str],
    *,
    binary: Optional[str] = None,
    timeout: Optional[float] = None,
) -> FFmpegResult:
    """Run an FFmpeg command as an asyncio subprocess.

    Args:
        args: Command arguments *without* the ffmpeg binary itself.
        binary: Explicit ffmpeg path; resolved automatically when omitted.
        timeout: Optional timeout in seconds.

    The child is killed and reaped when the timeout expires or the awaiting
    task is cancelled.

    Raises:
        FFmpegRunError: on a missing binary, a timeout or a non-zero exit.
    """
    cmd = [get_ffmpeg_path(binary), "-y", *args]
    logger.debug("Running: %s", " ".join(cmd))

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise FFmpegRunError(f"Could not start ffmpeg: {exc}") from exc

    try:
        _, err = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        await _kill(process)
        raise FFmpegRunError(f"FFmpeg timed out after {timeout}s")
    except BaseException:
        await _kill(process)
        raise

    stderr = err.decode("utf-8", errors="replace").strip()
    if process.returncode != 0:
        logger.error("FFmpeg error: %s", stderr)
        tail = stderr[-_STDERR_TAIL:]
        raise FFmpegRunError(
            f"FFmpeg failed (rc={process.returncode}): {tail}",
            returncode=process.returncode,
            stderr=stderr,
        )
    return FFmpegResult(returncode=process.returncode, stderr=stderr)


async def _kill(process: asyncio.subprocess.Process) -> None:
    if process.returncode is None:
        try:
            process.kill()
        except ProcessLookupError:
            pass
    await process.wait()
