"""Frame clock and wall-clock sources."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

from lifeclock.types import FrameContext, WallSource


def system_now() -> datetime:
    return datetime.now(timezone.utc)


class ManualWall:
    """Deterministic wall source. Time only moves when told to.

    With ``step`` set, every call to :meth:`now` returns the current instant
    and then advances by ``step``, so a frame loop sees a steadily moving
    clock without touching the system time.
    """

    def __init__(self, start: datetime, step: timedelta | None = None) -> None:
        if start.tzinfo is None:
            start = start.replace(tzinfo=timezone.utc)
        self._instant = start
        self._step = step

    @classmethod
    def ticking(cls, start: datetime, step: timedelta) -> ManualWall:
        return cls(start, step=step)

    def now(self) -> datetime:
        instant = self._instant
        if self._step is not None:
            self._instant = instant + self._step
        return instant

    def peek(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> None:
        self._instant += delta

    def set(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant

    def __call__(self) -> datetime:
        return self.now()


class FrameClock:
    """Fixed refresh cadence. One wall sample per frame."""

    def __init__(self, fps: int, wall: WallSource = system_now) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._dt_ms = 1000 / fps
        self._frame_number = 0
        self._wall = wall

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def dt_ms(self) -> float:
        return self._dt_ms

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def timestamp_ms(self) -> float:
        return self._frame_number * self._dt_ms

    def advance(self) -> int:
        self._frame_number += 1
        return self._frame_number

    def context(self, stop_fn: Callable[[], None]) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            dt_ms=self._dt_ms,
            timestamp_ms=self.timestamp_ms,
            now=self._wall(),
            request_stop=stop_fn,
        )

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number
