"""OutputLocation value object: the per-job directory that holds a frame set."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class OutputLocation:
    job_id: str
    path: Path
