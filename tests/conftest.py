"""Shared test fixtures for all tests."""
from __future__ import annotations

import pytest
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

from keyframe_api.core.entities.frame_set import FrameSet
from keyframe_api.core.value_objects.output_location import OutputLocation
from keyframe_api.core.value_objects.staged_video import StagedVideo
from keyframe_api.core.value_objects.video_source import VideoSource
from keyframe_api.infrastructure.config import Settings


# ── Settings Fixtures ──────────────────────────────────────────────────────

@pytest.fixture
def staging_dir(tmp_path) -> Path:
    path = tmp_path / "temp"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def test_settings(staging_dir, output_dir) -> Settings:
    settings = Settings(app_env="test", base_url="")
    settings.storage.staging_dir = str(staging_dir)
    settings.storage.output_dir = str(output_dir)
    return settings


# ── Domain Fixtures ────────────────────────────────────────────────────────

@pytest.fixture
def staged_file(staging_dir) -> Path:
    path = staging_dir / "staged-input.mp4"
    path.write_bytes(b"\x00" * 256)
    return path


@pytest.fixture
def staged_video(staged_file) -> StagedVideo:
    return StagedVideo(path=staged_file, owned=True)


@pytest.fixture
def url_source() -> VideoSource:
    return VideoSource.from_url("https://example.com/video.mp4")


def write_frames(directory: Path, count: int) -> list[Path]:
    """Create ``frame_1.jpg`` .. ``frame_<count>.jpg`` in *directory*."""
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for i in range(1, count + 1):
        path = directory / f"frame_{i}.jpg"
        path.write_bytes(b"\xff\xd8\xff\xd9")
        paths.append(path)
    return paths


@pytest.fixture
def frame_writer():
    return write_frames


# ── Mock Port Fixtures ─────────────────────────────────────────────────────

@pytest.fixture
def mock_acquirer(staged_video):
    mock = AsyncMock()
    mock.acquire.return_value = staged_video
    return mock


@pytest.fixture
def mock_extractor():
    """Extractor fake that writes three frames into the output directory."""
    mock = AsyncMock()

    async def _extract(staged, interval, out_dir):
        return FrameSet(job_id=Path(out_dir).name, frames=write_frames(Path(out_dir), 3))

    mock.extract.side_effect = _extract
    return mock


@pytest.fixture
def mock_store(output_dir):
    mock = MagicMock()
    location = OutputLocation(job_id="job-123", path=output_dir / "job-123")
    location.path.mkdir()
    mock.allocate.return_value = location
    mock.delete = AsyncMock(return_value=None)
    return mock
