"""Integration test fixtures for API testing."""
from __future__ import annotations

import pytest
import requests
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock
from httpx import AsyncClient, ASGITransport

from keyframe_api.adapters.inbound.fastapi_app import app
from keyframe_api.adapters.outbound.acquisition.http_video_acquirer import HttpVideoAcquirer
from keyframe_api.core.entities.frame_set import FrameSet
from keyframe_api.infrastructure.container import ApplicationContainer


@pytest.fixture
def mock_session():
    """requests.Session fake serving a small body for every GET."""
    session = MagicMock(spec=requests.Session)

    def _get(url, stream=True, timeout=None):
        response = MagicMock()
        response.__enter__.return_value = response
        response.__exit__.return_value = False
        response.iter_content.return_value = iter([b"\x00" * 128])
        return response

    session.get.side_effect = _get
    return session


@pytest.fixture
def fake_extractor(frame_writer):
    """Stands in for ffmpeg: writes three frames and records the interval."""
    mock = AsyncMock()

    async def _extract(staged, interval, out_dir):
        assert Path(staged.path).exists()
        return FrameSet(job_id=Path(out_dir).name, frames=frame_writer(Path(out_dir), 3))

    mock.extract.side_effect = _extract
    return mock


@pytest.fixture
def test_container(test_settings, staging_dir, mock_session, fake_extractor):
    """Create a test container with the network and ffmpeg swapped for fakes."""
    container = ApplicationContainer(test_settings)
    container._cache["video_acquirer"] = HttpVideoAcquirer(
        staging_dir=staging_dir, session_factory=lambda: mock_session
    )
    container._cache["frame_extraction"] = fake_extractor
    return container


@pytest.fixture
async def async_client(test_container):
    """Create an async test client for the FastAPI app."""
    app.state.container = test_container

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
