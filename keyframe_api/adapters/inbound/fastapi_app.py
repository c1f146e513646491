"""
FastAPI application - primary inbound adapter.
"""
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from keyframe_api.infrastructure.config import Settings
from keyframe_api.infrastructure.logging_config import setup_logging

logger = logging.getLogger(__name__)

settings = Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown lifecycle."""
    setup_logging(settings.logging.level)
    logger.info("Keyframe extraction API starting up on port %d", settings.port)
    from keyframe_api.infrastructure.container import ApplicationContainer
    app.state.container = ApplicationContainer(settings)
    logger.info("POST /extract-keyframes - Extract frames from video")
    logger.info("GET /frames/{videoId}/{frameName} - Retrieve frame image")
    logger.info("DELETE /frames/{videoId} - Delete all frames")
    logger.info("GET /health - Health check")
    yield
    logger.info("Keyframe extraction API shutting down...")


app = FastAPI(
    title="Keyframe Extraction API",
    description="Periodic key frame extraction from uploaded or remote videos",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Log each request with method, path, status, and duration."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s -> %d (%.1fms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


from keyframe_api.core.exceptions import (
    FrameNotFoundError,
    PipelineError,
    StorageError,
    UploadValidationError,
)


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    content = {"error": error}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(PipelineError)
async def pipeline_error_handler(request: Request, exc: PipelineError):
    status_code = 400 if exc.is_client_error else 500
    return _error(status_code, str(exc), exc.details)


@app.exception_handler(UploadValidationError)
async def upload_validation_handler(request: Request, exc: UploadValidationError):
    return _error(exc.status_code, str(exc))


@app.exception_handler(FrameNotFoundError)
async def frame_not_found_handler(request: Request, exc: FrameNotFoundError):
    return _error(404, "Frame not found")


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    return _error(500, "Failed to delete frames", str(exc))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unmatched frame paths (e.g. encoded separators) read as a missing frame.
    if exc.status_code == 404 and request.url.path.startswith("/frames/"):
        return _error(404, "Frame not found")
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _error(400, "Invalid request", str(exc.errors()))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    return _error(500, "Internal server error", str(exc))


# ── API routes ─────────────────────────────────────────────────

from keyframe_api.adapters.inbound.api.keyframes import router as keyframes_router
from keyframe_api.adapters.inbound.api.frames import router as frames_router

app.include_router(keyframes_router, tags=["keyframes"])
app.include_router(frames_router, prefix="/frames", tags=["frames"])


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }
