"""Wire the life clock packages onto one engine."""
from __future__ import annotations

import logging
from datetime import date

from lifeclock import Engine
from lifeclock_reveal import QUICK_DURATION, STAGED_DURATION, RevealAnimator, make_reveal_system
from lifeclock_stats import (
    BirthPicker,
    LifeStats,
    Parameters,
    StatsView,
    clamp_expectancy,
    make_stats_system,
    parse_deep_link,
)
from lifeclock_wizard import (
    DAY,
    MONTH,
    YEAR,
    WizardController,
    make_wizard_system,
    policy_named,
)

logger = logging.getLogger(__name__)

FIELDS = (YEAR, MONTH, DAY)
LOG_LIMIT = 6


class AppState:
    """Holds the engine, the wizard, the animator, and the picker input."""

    def __init__(
        self,
        policy: str = "staged",
        link: str | None = None,
        dob: date | None = None,
        expectancy: object = None,
        reduced_motion: bool = False,
        fps: int = 60,
    ) -> None:
        params = parse_deep_link(link)
        birth = dob if dob is not None else params.birth
        self.expectancy = (
            clamp_expectancy(expectancy) if expectancy is not None else params.expectancy
        )
        self.picker = BirthPicker(birth) if birth is not None else BirthPicker()
        # Parameters reach the world once a birth date is confirmed.
        self.confirmed = birth is not None
        self.field = 0  # picker field edited on a combined form step
        self.log_entries: list[str] = []

        wizard_policy = policy_named(policy)
        duration = STAGED_DURATION if wizard_policy.name == "staged" else QUICK_DURATION
        self.engine = Engine(fps=fps)
        self.wizard = WizardController(
            wizard_policy, initial=wizard_policy.visual if self.confirmed else None
        )
        self.animator = RevealAnimator(duration, reduced_motion=reduced_motion)

        # Wire systems (order matters)
        self.engine.add_system(make_stats_system())
        self.engine.add_system(make_wizard_system(self.wizard, on_transition=self._on_transition))
        self.engine.add_system(
            make_reveal_system(
                self.animator,
                lambda: self.wizard.reveal_ready,
                on_complete=self._on_reveal_complete,
            )
        )
        self.engine.on_stop(self._on_stop)
        self._sync_parameters()

    # --- Callbacks ---

    def _on_transition(self, world, ctx, old: str, new: str) -> None:
        self.log(f"{old} -> {new}")

    def _on_reveal_complete(self, world, ctx, displayed: int) -> None:
        self.log(f"revealed {displayed} weeks")

    def _on_stop(self, world, ctx) -> None:
        self.wizard.teardown()
        self.animator.teardown()

    def log(self, text: str) -> None:
        logger.info(text)
        self.log_entries.append(text)
        del self.log_entries[:-LOG_LIMIT]

    # --- Queries ---

    @property
    def stats(self) -> LifeStats | None:
        return self.engine.world.find(LifeStats)

    @property
    def view(self) -> StatsView:
        return StatsView.of(self.stats)

    @property
    def editing(self) -> str | None:
        """Picker field under edit, or None when the form is not shown."""
        step = self.wizard.step
        if step in FIELDS:
            return step
        if step in self.wizard.policy.collection_steps:
            return FIELDS[self.field]
        return None

    # --- Input ---

    def adjust(self, delta: int) -> None:
        """Nudge the field under edit by ``delta``."""
        editing = self.editing
        if editing is None or self.wizard.in_flight:
            return
        if editing == YEAR:
            self.picker.set_year(self.picker.year + delta)
        elif editing == MONTH:
            self.picker.set_month((self.picker.month - 1 + delta) % 12 + 1)
        else:
            days = len(self.picker.day_choices())
            self.picker.set_day((self.picker.day - 1 + delta) % days + 1)
        self._sync_parameters()

    def next_field(self) -> None:
        self.field = (self.field + 1) % len(FIELDS)

    def confirm(self) -> None:
        """Advance from the current form step."""
        wizard = self.wizard
        steps = wizard.policy.collection_steps
        if wizard.step not in steps:
            return
        idx = steps.index(wizard.step)
        if idx + 1 < len(steps):
            wizard.go_to_step(steps[idx + 1])
            return
        target = wizard.policy.prep or wizard.policy.visual
        if wizard.go_to_step(target):
            self.confirmed = True
            self._sync_parameters()

    def back(self) -> None:
        self.wizard.go_back()

    def jump(self, step: str) -> None:
        """Return to a picker field from the grid."""
        policy = self.wizard.policy
        if step in policy.steps:
            self.wizard.go_to_step(step)
        elif policy.collection_steps:
            self.field = FIELDS.index(step)
            self.wizard.go_to_step(policy.collection_steps[0])

    def change_expectancy(self, delta: float) -> None:
        self.expectancy = clamp_expectancy(self.expectancy + delta)
        self._sync_parameters()

    def _sync_parameters(self) -> None:
        world = self.engine.world
        birth = self.picker.date if self.confirmed else None
        params = Parameters.of(birth, self.expectancy)
        if world.find(Parameters) != params:
            world.insert(params)
            logger.debug("parameters now %s", params)
