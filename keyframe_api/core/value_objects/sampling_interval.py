"""SamplingInterval value object: seconds between two extracted frames."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar

from keyframe_api.core.exceptions import PipelineError, PipelineFailure

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class SamplingInterval:
    """Immutable sampling interval bounded to [MIN_SECONDS, MAX_SECONDS]."""

    seconds: int

    MIN_SECONDS: ClassVar[int] = 1
    MAX_SECONDS: ClassVar[int] = 60
    DEFAULT_SECONDS: ClassVar[int] = 5

    def __post_init__(self) -> None:
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, int):
            raise PipelineError(
                PipelineFailure.INVALID_INTERVAL,
                f"Interval must be an integer, got {self.seconds!r}",
            )
        if not self.MIN_SECONDS <= self.seconds <= self.MAX_SECONDS:
            raise PipelineError(
                PipelineFailure.INVALID_INTERVAL,
                f"Got {self.seconds}",
            )

    @classmethod
    def parse(cls, raw: Any) -> SamplingInterval:
        """Build an interval from a raw form or JSON value.

        Absent (``None`` or blank) values fall back to the default; anything
        present but not an integer literal is rejected.
        """
        if raw is None:
            return cls(cls.DEFAULT_SECONDS)
        if isinstance(raw, str):
            text = raw.strip()
            if not text:
                return cls(cls.DEFAULT_SECONDS)
            if not _INTEGER_RE.match(text):
                raise PipelineError(
                    PipelineFailure.INVALID_INTERVAL,
                    f"Interval must be an integer, got {raw!r}",
                )
            return cls(int(text))
        return cls(raw)
