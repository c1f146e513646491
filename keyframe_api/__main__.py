"""Run the keyframe extraction API with uvicorn."""
from __future__ import annotations

import uvicorn

from keyframe_api.infrastructure.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(
        "keyframe_api.adapters.inbound.fastapi_app:app",
        host=settings.web.host,
        port=settings.port,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
