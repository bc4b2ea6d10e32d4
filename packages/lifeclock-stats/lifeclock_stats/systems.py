"""System factory for per-frame statistics."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from lifeclock_stats.params import Parameters
from lifeclock_stats.stats import LifeStats, compute_life_stats

if TYPE_CHECKING:
    from lifeclock import FrameContext, World


def make_stats_system(
    on_stats: Callable[[World, FrameContext, LifeStats], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that recomputes LifeStats from ``ctx.now`` each frame.

    Without Parameters, or with no birth date chosen, LifeStats is removed
    from the world so consumers fall back to placeholders.
    """

    def stats_system(world: World, ctx: FrameContext) -> None:
        params = world.find(Parameters)
        if params is None or params.birth is None:
            world.remove(LifeStats)
            return
        stats = compute_life_stats(params.birth, ctx.now, params.expectancy)
        world.insert(stats)
        if on_stats is not None:
            on_stats(world, ctx, stats)

    return stats_system
