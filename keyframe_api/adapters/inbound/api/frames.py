"""
Frame retrieval and deletion API routes.
"""
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

router = APIRouter()


@router.get("/{video_id}/{frame_name}")
async def get_frame(video_id: str, frame_name: str, request: Request):
    """Return the raw image bytes of one extracted frame."""
    frame_service = request.app.state.container.frame_service()
    path = frame_service.get_frame(video_id, frame_name)
    return FileResponse(path, media_type="image/jpeg")


@router.delete("/{video_id}")
async def delete_frames(video_id: str, request: Request):
    """Delete every frame of a video. Unknown ids succeed."""
    frame_service = request.app.state.container.frame_service()
    await frame_service.delete_frames(video_id)
    return {"success": True, "message": "Frames deleted successfully"}
