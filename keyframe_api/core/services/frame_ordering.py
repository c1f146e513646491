"""
Frame naming and ordering - pure domain logic.
Frame files are named ``frame_<n>.jpg`` with ``n`` starting at 1.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Optional

FRAME_PREFIX = "frame_"
FRAME_EXTENSION = ".jpg"
FRAME_OUTPUT_PATTERN = f"{FRAME_PREFIX}%d{FRAME_EXTENSION}"

_FRAME_NAME_RE = re.compile(r"^frame_(\d+)\.jpg$")


def frame_index(name: str) -> Optional[int]:
    """Return the numeric index encoded in a frame filename, or None."""
    match = _FRAME_NAME_RE.match(name)
    if match is None:
        return None
    return int(match.group(1))


def is_frame_name(name: str) -> bool:
    return frame_index(name) is not None


def order_frames(paths: Iterable[Path]) -> list[Path]:
    """Keep frame files only and sort them by index (numeric, not lexicographic)."""
    indexed = [(frame_index(p.name), p) for p in paths]
    indexed = [(idx, p) for idx, p in indexed if idx is not None]
    indexed.sort(key=lambda item: item[0])
    return [p for _, p in indexed]
