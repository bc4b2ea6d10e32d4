"""System factory for the week-grid reveal."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from lifeclock_stats import LifeStats, Parameters

from lifeclock_reveal.animator import RevealAnimator

if TYPE_CHECKING:
    from lifeclock import FrameContext, World


def make_reveal_system(
    animator: RevealAnimator,
    is_ready: Callable[[], bool],
    on_complete: Callable[[World, FrameContext, int], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that drives ``animator`` from the current LifeStats.

    Must run after the stats system so each frame animates toward the
    freshest target. Per frame:
    1. Not ready or no stats: tear the animator down (display empty)
    2. New Parameters (birth or expectancy) or first frame ready: restart
       from zero
    3. Same Parameters but a different target (the live clock crossed a
       week boundary): retarget in place
    4. Sample the running animation at ``ctx.timestamp_ms``
    """

    def _complete(world: World, ctx: FrameContext) -> None:
        if on_complete is not None:
            on_complete(world, ctx, animator.displayed)

    def reveal_system(world: World, ctx: FrameContext) -> None:
        stats = world.find(LifeStats)
        if stats is None or not is_ready():
            if animator.engaged:
                animator.teardown()
            return

        target = min(max(stats.lived_weeks, 0), stats.total_weeks)
        params = world.find(Parameters)
        context = (params.birth, params.expectancy) if params is not None else None

        if not animator.engaged or animator.context != context:
            if animator.start(target, context) is None:
                _complete(world, ctx)
                return
        elif target != animator.target:
            running = animator.animating
            animator.retarget(target)
            if running and not animator.animating:
                _complete(world, ctx)
                return

        if not animator.animating:
            return
        animator.sample(ctx.timestamp_ms)
        if not animator.animating:
            _complete(world, ctx)

    return reveal_system
