"""VideoSource value object: where the input video comes from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SourceKind(str, Enum):
    URL = "url"
    UPLOADED_FILE = "uploaded_file"


@dataclass(frozen=True)
class VideoSource:
    """Tagged union of a remote URL or an already staged upload path."""

    kind: SourceKind
    value: str

    @classmethod
    def from_url(cls, url: str) -> VideoSource:
        return cls(kind=SourceKind.URL, value=url)

    @classmethod
    def from_upload(cls, path: str | Path) -> VideoSource:
        return cls(kind=SourceKind.UPLOADED_FILE, value=str(path))

    @property
    def is_url(self) -> bool:
        return self.kind is SourceKind.URL
