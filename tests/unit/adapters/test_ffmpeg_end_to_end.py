"""End-to-end extraction against a real ffmpeg binary."""
from __future__ import annotations

import subprocess

import pytest

from keyframe_api.adapters.outbound.ffmpeg.ffmpeg_base import get_ffmpeg_path, has_ffmpeg
from keyframe_api.adapters.outbound.ffmpeg.ffmpeg_frames import FFmpegFrameExtractor
from keyframe_api.core.exceptions import ExtractionError
from keyframe_api.core.services.frame_ordering import frame_index
from keyframe_api.core.value_objects.staged_video import StagedVideo

pytestmark = pytest.mark.skipif(not has_ffmpeg(), reason="ffmpeg not installed")


@pytest.fixture
def ten_second_video(tmp_path):
    path = tmp_path / "clip.mp4"
    subprocess.run(
        [
            get_ffmpeg_path(), "-y", "-f", "lavfi",
            "-i", "testsrc=duration=10:size=64x48:rate=10",
            "-pix_fmt", "yuv420p", str(path),
        ],
        check=True,
        capture_output=True,
        timeout=60,
    )
    return path


@pytest.mark.asyncio
@pytest.mark.parametrize("interval", [1, 2, 3, 5])
async def test_frame_count_tracks_duration(ten_second_video, tmp_path, interval):
    out = tmp_path / "out"
    out.mkdir()
    extractor = FFmpegFrameExtractor(timeout=120)

    frame_set = await extractor.extract(StagedVideo(path=ten_second_video), interval, out)

    expected = 10 // interval
    assert abs(len(frame_set) - expected) <= 1
    indices = [frame_index(name) for name in frame_set.frame_names]
    assert indices == list(range(1, len(indices) + 1))


@pytest.mark.asyncio
async def test_interval_longer_than_video(ten_second_video, tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    frame_set = await FFmpegFrameExtractor(timeout=120).extract(
        StagedVideo(path=ten_second_video), 60, out
    )
    assert len(frame_set) <= 1


@pytest.mark.asyncio
async def test_garbage_input_fails(tmp_path):
    bogus = tmp_path / "bogus.mp4"
    bogus.write_bytes(b"this is not a video")
    out = tmp_path / "out"
    out.mkdir()
    with pytest.raises(ExtractionError):
        await FFmpegFrameExtractor(timeout=120).extract(StagedVideo(path=bogus), 5, out)
