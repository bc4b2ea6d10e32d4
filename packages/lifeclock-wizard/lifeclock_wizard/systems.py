"""System factory for wizard timers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from lifeclock_wizard.controller import WizardController

if TYPE_CHECKING:
    from lifeclock import FrameContext, World


def make_wizard_system(
    wizard: WizardController,
    on_transition: Callable[[World, FrameContext, str, str], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that advances wizard timers by one frame.

    Frame execution order:
    1. Count down every scheduled timer by ``ctx.dt_ms``
    2. Fire due timers, earliest expiry first; a timer cancelled by an
       earlier one in the same frame is skipped
    3. Report committed step changes (on_transition), including ones made
       synchronously by requests since the previous frame
    """

    def wizard_system(world: World, ctx: FrameContext) -> None:
        due = []
        for timer in list(wizard._timers.values()):
            timer.remaining -= ctx.dt_ms
            if timer.remaining <= 0:
                due.append(timer)

        due.sort(key=lambda t: (t.remaining, t.seq))
        for timer in due:
            wizard._expire(timer)

        for old, new in wizard._drain_transitions():
            if on_transition is not None:
                on_transition(world, ctx, old, new)

    return wizard_system
