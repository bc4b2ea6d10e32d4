"""WizardController: step sequencing with timed, single-flight transitions."""
from __future__ import annotations

import logging

from lifeclock_wizard.components import Timer
from lifeclock_wizard.policy import STAGED, WizardPolicy

logger = logging.getLogger(__name__)

# Transition phases
SETTLED = "settled"
LEAVING = "leaving"
ENTERING = "entering"

# Prep message phases
PREP_HIDDEN = "hidden"
PREP_IN = "in"
PREP_OUT = "out"

# Grid entrance phases
GRID_HIDDEN = "hidden"
GRID_REVEALING = "revealing"
GRID_READY = "ready"

# Timer names
LEAVE_TIMER = "leave"
ENTER_TIMER = "enter"
PREP_FADE_TIMER = "prep_fade"
PREP_ADVANCE_TIMER = "prep_advance"
GRID_TIMER = "grid_ready"


class WizardController:
    """Owns the current step and every timer that can change it.

    A request moves through a *leave* phase (the old step exits), then the
    step is swapped and an *enter* phase settles. While a leave phase is in
    flight further requests are dropped, never queued. Timers are advanced
    by the system returned from ``make_wizard_system``.
    """

    def __init__(self, policy: WizardPolicy = STAGED, initial: str | None = None) -> None:
        start = policy.initial if initial is None else initial
        self._check_step(policy, start)
        self._policy = policy
        self._step = start
        self._pending: str | None = None
        self._phase = SETTLED
        self._prep_phase = PREP_HIDDEN
        self._grid_phase = GRID_HIDDEN
        self._timers: dict[str, Timer] = {}
        self._seq = 0
        self._committed: list[tuple[str, str]] = []
        self._begin_enter()
        self._on_enter(start)

    # --- Queries ---

    @property
    def policy(self) -> WizardPolicy:
        return self._policy

    @property
    def step(self) -> str:
        return self._step

    @property
    def pending(self) -> str | None:
        """Step being moved to during a leave phase."""
        return self._pending

    @property
    def phase(self) -> str:
        return self._phase

    @property
    def in_flight(self) -> bool:
        return self._phase == LEAVING

    @property
    def prep_phase(self) -> str:
        return self._prep_phase

    @property
    def grid_phase(self) -> str:
        return self._grid_phase

    @property
    def is_visual(self) -> bool:
        return self._step == self._policy.visual

    @property
    def reveal_ready(self) -> bool:
        """True once the visual step's grid entrance has finished."""
        return self.is_visual and self._grid_phase == GRID_READY

    def pending_timers(self) -> list[str]:
        return list(self._timers)

    def time_remaining(self, name: str) -> float:
        """Milliseconds left on a timer. 0 if not scheduled."""
        timer = self._timers.get(name)
        return timer.remaining if timer is not None else 0.0

    # --- Requests ---

    def go_to_step(self, target: str) -> bool:
        """Request a move to ``target``. Returns False when the request is dropped."""
        self._check_step(self._policy, target)
        if target == self._step or self._phase == LEAVING:
            logger.debug("ignoring go_to_step(%s) from %s (%s)", target, self._step, self._phase)
            return False
        if not self._policy.allows(self._step, target):
            logger.debug("no edge %s -> %s in %s policy", self._step, target, self._policy.name)
            return False

        if self._policy.leave_ms <= 0:
            self._commit(target)
            return True

        self._cancel(ENTER_TIMER)
        self._pending = target
        self._phase = LEAVING
        self._schedule(LEAVE_TIMER, self._policy.leave_ms)
        logger.debug("leaving %s for %s", self._step, target)
        return True

    def go_back(self) -> bool:
        """Step to the previous collection step, if there is one."""
        steps = self._policy.collection_steps
        if self._step in steps:
            idx = steps.index(self._step)
            if idx == 0:
                return False
            return self.go_to_step(steps[idx - 1])
        return self.go_to_step(steps[-1]) if steps else False

    def teardown(self) -> None:
        """Cancel every owned timer. The controller stays on its current step."""
        for name in list(self._timers):
            self._cancel(name)
        self._pending = None
        self._phase = SETTLED
        self._prep_phase = PREP_HIDDEN
        self._grid_phase = GRID_HIDDEN

    # --- Internal (called by system) ---

    def _expire(self, timer: Timer) -> None:
        """Fire a due timer unless it has been cancelled or superseded."""
        if timer.cancelled or self._timers.get(timer.name) is not timer:
            return
        del self._timers[timer.name]

        if timer.name == LEAVE_TIMER:
            target = self._pending
            if target is not None:
                self._commit(target)
        elif timer.name == ENTER_TIMER:
            self._phase = SETTLED
        elif timer.name == PREP_FADE_TIMER:
            self._prep_phase = PREP_OUT
        elif timer.name == PREP_ADVANCE_TIMER:
            self.go_to_step(self._policy.visual)
        elif timer.name == GRID_TIMER:
            self._grid_phase = GRID_READY

    def _drain_transitions(self) -> list[tuple[str, str]]:
        committed = self._committed
        self._committed = []
        return committed

    def _commit(self, target: str) -> None:
        old = self._step
        self._on_exit(old)
        self._step = target
        self._pending = None
        self._committed.append((old, target))
        logger.debug("step %s -> %s", old, target)
        self._begin_enter()
        self._on_enter(target)

    def _begin_enter(self) -> None:
        if self._policy.enter_ms > 0:
            self._phase = ENTERING
            self._schedule(ENTER_TIMER, self._policy.enter_ms)
        else:
            self._phase = SETTLED

    def _on_enter(self, step: str) -> None:
        if step == self._policy.prep:
            self._prep_phase = PREP_IN
            self._schedule(PREP_FADE_TIMER, self._policy.prep_fade_ms)
            self._schedule(PREP_ADVANCE_TIMER, self._policy.prep_advance_ms)
        elif step == self._policy.visual:
            if self._policy.grid_delay_ms > 0:
                self._grid_phase = GRID_REVEALING
                self._schedule(GRID_TIMER, self._policy.grid_delay_ms)
            else:
                self._grid_phase = GRID_READY

    def _on_exit(self, step: str) -> None:
        if step == self._policy.prep:
            self._cancel(PREP_FADE_TIMER)
            self._cancel(PREP_ADVANCE_TIMER)
            self._prep_phase = PREP_HIDDEN
        elif step == self._policy.visual:
            self._cancel(GRID_TIMER)
            self._grid_phase = GRID_HIDDEN

    def _schedule(self, name: str, delay_ms: float) -> None:
        """Issue a fresh timer token, cancelling any previous one of that name."""
        self._cancel(name)
        self._seq += 1
        self._timers[name] = Timer(name=name, remaining=delay_ms, seq=self._seq)

    def _cancel(self, name: str) -> None:
        timer = self._timers.pop(name, None)
        if timer is not None:
            timer.cancelled = True

    @staticmethod
    def _check_step(policy: WizardPolicy, step: str) -> None:
        if step not in policy.steps:
            raise ValueError(f"unknown step {step!r} for {policy.name} policy")
