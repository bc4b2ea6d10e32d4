"""Countdown -- live statistics from a deep link, one frame at a time.

Demonstrates:
- Parsing a deep-link query string into Parameters
- Recomputing LifeStats every frame from the sampled wall clock
- Formatting the result with StatsView

Run: python -m examples.countdown
"""

from datetime import datetime, timedelta, timezone

from lifeclock import Engine, FrameContext, ManualWall, World
from lifeclock_stats import LifeStats, StatsView, make_stats_system, parse_deep_link


def print_stats(world: World, ctx: FrameContext, stats: LifeStats) -> None:
    view = StatsView.of(stats)
    print(f"  frame {ctx.frame_number}  |  {ctx.now:%Y-%m-%d %H:%M}  |  {view.countdown}")


def main() -> None:
    print("=== Countdown ===\n")

    # A wall clock that jumps an hour per frame, so the countdown visibly moves.
    wall = ManualWall.ticking(datetime(2024, 6, 1, tzinfo=timezone.utc), timedelta(hours=1))
    engine = Engine(fps=10, wall=wall)
    engine.add_system(make_stats_system(on_stats=print_stats))
    engine.world.insert(parse_deep_link("dob=1990-05-17&exp=85"))

    engine.run(5)

    view = StatsView.of(engine.world.get(LifeStats))
    print(f"\nAge {view.age}, {view.percent} lived, weeks {view.weeks}.")


if __name__ == "__main__":
    main()
