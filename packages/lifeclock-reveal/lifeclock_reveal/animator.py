"""RevealAnimator: sole writer of the displayed fill count."""
from __future__ import annotations

import logging
import math
from collections.abc import Hashable
from typing import Callable, Union

from lifeclock_reveal.components import STAGED_DURATION, DurationPolicy, RevealAnimation

logger = logging.getLogger(__name__)

ReducedMotion = Union[bool, Callable[[], bool]]


class RevealAnimator:
    """Interpolates ``displayed`` from 0 toward a target count.

    At most one :class:`RevealAnimation` handle exists at a time; every
    start cancels the previous handle before issuing a new one. The
    ``context`` passed to :meth:`start` identifies what the run is for
    (the birth date and expectancy), so callers can tell a parameter
    change, which restarts, from a clock-driven target change, which
    only retargets.
    """

    def __init__(
        self,
        policy: DurationPolicy = STAGED_DURATION,
        reduced_motion: ReducedMotion = False,
    ) -> None:
        self._policy = policy
        self._reduced_motion = reduced_motion
        self._displayed = 0
        self._target = 0
        self._handle: RevealAnimation | None = None
        self._context: Hashable | None = None
        self._engaged = False
        self._runs = 0

    @property
    def policy(self) -> DurationPolicy:
        return self._policy

    @property
    def displayed(self) -> int:
        return self._displayed

    @property
    def target(self) -> int:
        return self._target

    @property
    def handle(self) -> RevealAnimation | None:
        return self._handle

    @property
    def animating(self) -> bool:
        return self._handle is not None

    @property
    def engaged(self) -> bool:
        """True between a start and the next teardown."""
        return self._engaged

    @property
    def context(self) -> Hashable | None:
        return self._context

    def prefers_reduced_motion(self) -> bool:
        if callable(self._reduced_motion):
            return bool(self._reduced_motion())
        return bool(self._reduced_motion)

    def start(self, target: int, context: Hashable | None = None) -> RevealAnimation | None:
        """Begin a fresh run from zero. Returns the handle, or None when the
        target was applied instantly (empty target or reduced motion)."""
        self.cancel()
        target = max(0, int(target))
        self._engaged = True
        self._context = context
        self._target = target
        self._displayed = 0

        if target <= 0 or self.prefers_reduced_motion():
            self._displayed = target
            logger.debug("reveal set to %d without animation", target)
            return None

        self._runs += 1
        self._handle = RevealAnimation(
            start_value=0,
            target=target,
            duration=self._policy.duration_for(target),
            run=self._runs,
        )
        logger.debug(
            "reveal run %d: 0 -> %d over %.0f ms", self._runs, target, self._handle.duration
        )
        return self._handle

    def retarget(self, target: int) -> None:
        """Move the goal without restarting: the running animation heads for
        the new target, an idle one snaps to it. A target below what is
        already shown ends the run there, so a run never counts down."""
        target = max(0, int(target))
        if target == self._target:
            return
        self._target = target
        handle = self._handle
        if handle is None:
            self._displayed = target
        elif target < self._displayed:
            handle.cancelled = True
            self._handle = None
            self._displayed = target
            logger.debug("reveal run %d cut short at %d", handle.run, target)
        else:
            handle.target = target

    def sample(self, timestamp_ms: float) -> int:
        """Advance the running animation to ``timestamp_ms``."""
        handle = self._handle
        if handle is None:
            return self._displayed
        if handle.start_time is None:
            handle.start_time = timestamp_ms

        p = min(1.0, max(0.0, (timestamp_ms - handle.start_time) / handle.duration))
        if p >= 1:
            self._displayed = handle.target
            self._handle = None
            logger.debug("reveal run %d complete at %d", handle.run, handle.target)
            return self._displayed

        span = handle.target - handle.start_value
        value = math.floor(handle.start_value + span * p + 0.5)
        # A lowered target must not pull the count back below what was shown.
        self._displayed = max(self._displayed, value)
        return self._displayed

    def cancel(self) -> None:
        handle = self._handle
        if handle is not None:
            handle.cancelled = True
            self._handle = None
            logger.debug("reveal run %d cancelled at %d", handle.run, self._displayed)

    def teardown(self) -> None:
        """Cancel and forget everything; the display goes back to empty."""
        self.cancel()
        self._displayed = 0
        self._target = 0
        self._context = None
        self._engaged = False
