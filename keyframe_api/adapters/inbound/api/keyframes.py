"""
Keyframe extraction API routes.
"""
from __future__ import annotations

import json
import logging
import os
import re
import uuid
from pathlib import Path
from typing import Any, Optional

from fastapi import APIRouter, Request
from starlette.datastructures import UploadFile

from keyframe_api.core.exceptions import UploadTooLargeError, UploadValidationError
from keyframe_api.core.value_objects.sampling_interval import SamplingInterval
from keyframe_api.core.value_objects.video_source import VideoSource

logger = logging.getLogger(__name__)

router = APIRouter()

CHUNK_SIZE = 8 * 1024 * 1024  # 8MB


def _sanitize_extension(filename: str) -> str:
    """Return a safe lowercase extension from an uploaded filename."""
    filename = os.path.basename(filename).replace("\x00", "")
    ext = Path(filename).suffix.lower()
    if not re.fullmatch(r"\.[a-z0-9]{1,8}", ext):
        return ""
    return ext


def _request_base_url(request: Request) -> str:
    configured = request.app.state.container.settings.base_url
    if configured:
        return configured.rstrip("/")
    return f"{request.url.scheme}://{request.url.netloc}"


async def _read_fields(request: Request) -> tuple[dict[str, Any], Optional[UploadFile], Any]:
    """Decode the request body into plain fields plus an optional upload.

    Returns ``(fields, upload, form)``; *form* must be closed by the caller.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise UploadValidationError(f"Invalid JSON body: {exc}") from exc
        if not isinstance(body, dict):
            raise UploadValidationError("JSON body must be an object")
        return body, None, None

    if content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        form = await request.form()
        upload = form.get("video")
        if not isinstance(upload, UploadFile):
            upload = None
        fields = {k: v for k, v in form.items() if isinstance(v, str)}
        return fields, upload, form

    return {}, None, None


async def _stage_upload(request: Request, upload: UploadFile) -> Path:
    """Validate and stream an uploaded video into the staging directory."""
    settings = request.app.state.container.settings

    mime = (upload.content_type or "").split(";")[0].strip().lower()
    if mime not in settings.web.allowed_mime_types:
        raise UploadValidationError("Invalid file type. Only video files are allowed.")

    # Validate file size from Content-Length header (early rejection)
    max_size_bytes = settings.max_upload_size_bytes
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > max_size_bytes:
        raise UploadTooLargeError(
            f"File too large. Maximum size: {settings.web.max_upload_size_mb}MB"
        )

    staging_dir = Path(settings.storage.staging_dir)
    staging_dir.mkdir(parents=True, exist_ok=True)
    video_path = staging_dir / f"{uuid.uuid4()}{_sanitize_extension(upload.filename or '')}"

    # Stream file in chunks instead of reading all into memory
    total_written = 0
    try:
        with open(video_path, "wb") as f:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                total_written += len(chunk)
                if total_written > max_size_bytes:
                    raise UploadTooLargeError(
                        f"File too large. Maximum size: {settings.web.max_upload_size_mb}MB"
                    )
                f.write(chunk)
    except BaseException:
        # Clean up partial file on validation failure
        if video_path.exists():
            video_path.unlink()
        raise

    logger.debug("Staged upload %s (%d bytes)", video_path.name, total_written)
    return video_path


@router.post("/extract-keyframes")
async def extract_keyframes(request: Request):
    """Extract key frames from a video given by URL or multipart upload."""
    container = request.app.state.container

    fields, upload, form = await _read_fields(request)
    try:
        interval = SamplingInterval.parse(fields.get("interval")).seconds

        video_url = fields.get("videoUrl")
        if isinstance(video_url, str) and video_url.strip():
            source = VideoSource.from_url(video_url.strip())
        elif upload is not None:
            source = VideoSource.from_upload(await _stage_upload(request, upload))
        else:
            source = None
    finally:
        if form is not None:
            await form.close()

    service = container.extract_keyframes_service()
    result = await service.run_extraction(interval, source, _request_base_url(request))
    return result.to_dict()
