"""Shared type aliases and errors for the life clock engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Callable

WallSource = Callable[[], datetime]


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    dt_ms: float
    timestamp_ms: float
    now: datetime
    request_stop: Callable[[], None]


class MissingResourceError(KeyError):
    """Raised when reading a resource that was never inserted."""

    def __init__(self, rtype: type, message: str) -> None:
        self.rtype = rtype
        super().__init__(message)


if TYPE_CHECKING:
    from lifeclock.world import World

System = Callable[["World", FrameContext], None]
