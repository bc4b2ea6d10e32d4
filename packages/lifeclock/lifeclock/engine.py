"""Engine - frame loop, pacing, and lifecycle hooks."""

import logging
import time
from typing import Callable

from lifeclock.clock import FrameClock, system_now
from lifeclock.types import FrameContext, System, WallSource
from lifeclock.world import World

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, fps: int = 60, wall: WallSource = system_now) -> None:
        self._clock = FrameClock(fps, wall)
        self._world = World()
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[World, FrameContext], None]] = []
        self._stop_hooks: list[Callable[[World, FrameContext], None]] = []
        self._stop_requested: bool = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> FrameClock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[World, FrameContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[World, FrameContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def stop(self) -> None:
        """Request a stop from outside a system (e.g. a window close)."""
        self._request_stop()

    def _frame(self) -> None:
        self._clock.advance()
        # The wall sample happens here, before any system sees the frame.
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

    def _run_hooks(self, hooks: list[Callable[[World, FrameContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(self._world, ctx)

    def start(self) -> None:
        """Run start hooks. For callers that drive ``step()`` themselves."""
        self._stop_requested = False
        logger.info("engine starting at %d fps", self._clock.fps)
        self._run_hooks(self._start_hooks)

    def shutdown(self) -> None:
        """Run stop hooks. Pairs with ``start()``."""
        logger.info("engine stopping after %d frames", self._clock.frame_number)
        self._run_hooks(self._stop_hooks)

    def step(self) -> None:
        self._stop_requested = False
        self._frame()

    def run(self, n: int) -> None:
        self.start()
        for _ in range(n):
            self._frame()
            if self._stop_requested:
                break
        self.shutdown()

    def run_forever(self) -> None:
        self.start()
        dt = self._clock.dt
        while not self._stop_requested:
            started = time.monotonic()
            self._frame()
            if self._stop_requested:
                break
            sleep_time = dt - (time.monotonic() - started)
            if sleep_time > 0:
                time.sleep(sleep_time)
        self.shutdown()
