"""Port for per-job output directories."""
from __future__ import annotations
from pathlib import Path
from typing import Protocol, runtime_checkable

from keyframe_api.core.value_objects.output_location import OutputLocation


@runtime_checkable
class ArtifactStorePort(Protocol):
    def allocate(self) -> OutputLocation: ...
    async def delete(self, job_id: str) -> None: ...
    def resolve(self, job_id: str, frame_name: str) -> Path: ...
