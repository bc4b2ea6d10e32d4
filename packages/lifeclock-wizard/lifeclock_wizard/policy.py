"""Step policies: which steps exist, how they connect, and their timings."""
from __future__ import annotations

from dataclasses import dataclass

YEAR = "year"
MONTH = "month"
DAY = "day"
PREP = "prep"
VISUAL = "visual"
COLLECTING = "collecting"


@dataclass(frozen=True)
class WizardPolicy:
    """Step table and phase timings for one flavour of the input wizard.

    ``transitions`` maps each step to the steps a request may move to.
    ``prep`` names the non-interactive waypoint that auto-advances to
    ``visual``; ``None`` when the policy has no such step. All durations
    are in milliseconds; zero means "immediately".
    """

    name: str
    steps: tuple[str, ...]
    transitions: dict[str, tuple[str, ...]]
    initial: str
    visual: str = VISUAL
    prep: str | None = PREP
    leave_ms: float = 700.0
    enter_ms: float = 40.0
    prep_fade_ms: float = 2200.0
    prep_advance_ms: float = 4400.0
    grid_delay_ms: float = 1400.0

    def __post_init__(self) -> None:
        known = set(self.steps)
        if self.initial not in known:
            raise ValueError(f"initial step {self.initial!r} not in {self.steps}")
        if self.visual not in known:
            raise ValueError(f"visual step {self.visual!r} not in {self.steps}")
        if self.prep is not None and self.prep not in known:
            raise ValueError(f"prep step {self.prep!r} not in {self.steps}")
        for src, targets in self.transitions.items():
            for step in (src, *targets):
                if step not in known:
                    raise ValueError(f"transition uses unknown step {step!r}")
        for label in ("leave_ms", "enter_ms", "prep_fade_ms", "prep_advance_ms", "grid_delay_ms"):
            if getattr(self, label) < 0:
                raise ValueError(f"{label} must not be negative")

    @property
    def collection_steps(self) -> tuple[str, ...]:
        """Steps where the user enters data, in order."""
        return tuple(s for s in self.steps if s not in (self.visual, self.prep))

    def allows(self, src: str, dst: str) -> bool:
        return dst in self.transitions.get(src, ())


STAGED = WizardPolicy(
    name="staged",
    steps=(YEAR, MONTH, DAY, PREP, VISUAL),
    transitions={
        YEAR: (MONTH,),
        MONTH: (YEAR, DAY),
        DAY: (MONTH, PREP),
        PREP: (VISUAL, YEAR, MONTH, DAY),
        VISUAL: (YEAR, MONTH, DAY),
    },
    initial=YEAR,
)

# Single toggle between the form and the grid; requests commit at once.
IMMEDIATE = WizardPolicy(
    name="immediate",
    steps=(COLLECTING, VISUAL),
    transitions={COLLECTING: (VISUAL,), VISUAL: (COLLECTING,)},
    initial=COLLECTING,
    prep=None,
    leave_ms=0,
    enter_ms=0,
    prep_fade_ms=0,
    prep_advance_ms=0,
    grid_delay_ms=0,
)

POLICIES: dict[str, WizardPolicy] = {p.name: p for p in (STAGED, IMMEDIATE)}


def policy_named(name: str) -> WizardPolicy:
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(
            f"unknown wizard policy {name!r}, expected one of {sorted(POLICIES)}"
        ) from None
