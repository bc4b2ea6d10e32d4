"""Plain-text views of LifeStats for rendering."""
from __future__ import annotations

import math
from dataclasses import dataclass

from lifeclock_stats.stats import LifeStats

PLACEHOLDER = "—"


@dataclass(frozen=True)
class StatsView:
    age: str
    left: str
    percent: str
    countdown: str
    weeks: str

    @classmethod
    def of(cls, stats: LifeStats | None) -> StatsView:
        if stats is None:
            return cls(
                age=PLACEHOLDER,
                left=PLACEHOLDER,
                percent=PLACEHOLDER,
                countdown=PLACEHOLDER,
                weeks=PLACEHOLDER,
            )
        parts = stats.left_parts
        return cls(
            age=f"{stats.age_years:.2f} y",
            left=f"{stats.left_years:.2f} y",
            percent=f"{stats.percent:.2f}%",
            # Days are shown within the current year.
            countdown=(
                f"{math.floor(stats.left_years)}y {parts.days % 365}d "
                f"{parts.hours}h {parts.minutes}m {parts.seconds}s"
            ),
            weeks=f"{stats.lived_weeks} / {stats.total_weeks}",
        )


def week_cells(total_weeks: int, displayed: int) -> list[bool]:
    """One flag per week of the expected lifespan; True means filled."""
    return [i < displayed for i in range(max(0, total_weeks))]


def progress_fraction(stats: LifeStats | None) -> float:
    if stats is None:
        return 0.0
    return stats.percent / 100
