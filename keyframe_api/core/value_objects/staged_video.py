"""StagedVideo value object: a local, readable copy of the input video."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StagedVideo:
    path: Path
    # True when the pipeline created the file and must delete it afterwards.
    owned: bool = True

    @property
    def filename(self) -> str:
        return self.path.name
