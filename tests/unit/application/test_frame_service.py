"""Unit tests for FrameService."""
from __future__ import annotations

import pytest
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

from keyframe_api.application.frame_service import FrameService
from keyframe_api.core.exceptions import FrameNotFoundError


class TestFrameService:

    @pytest.fixture
    def store(self):
        mock = MagicMock()
        mock.resolve.return_value = Path("/uploads/v1/frame_1.jpg")
        mock.delete = AsyncMock(return_value=None)
        return mock

    def test_get_frame(self, store):
        service = FrameService(store=store)
        assert service.get_frame("v1", "frame_1.jpg") == Path("/uploads/v1/frame_1.jpg")
        store.resolve.assert_called_once_with("v1", "frame_1.jpg")

    def test_get_frame_not_found_propagates(self, store):
        store.resolve.side_effect = FrameNotFoundError("v1", "nope.jpg")
        with pytest.raises(FrameNotFoundError):
            FrameService(store=store).get_frame("v1", "nope.jpg")

    @pytest.mark.asyncio
    async def test_delete_frames(self, store):
        await FrameService(store=store).delete_frames("v1")
        store.delete.assert_awaited_once_with("v1")
