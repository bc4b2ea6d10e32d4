"""lifeclock-stats - Life statistics, parameters, and display views."""
from __future__ import annotations

from lifeclock_stats.display import PLACEHOLDER, StatsView, progress_fraction, week_cells
from lifeclock_stats.params import (
    BirthPicker,
    Parameters,
    days_in_month,
    make_birth_date,
    parse_date,
    parse_deep_link,
)
from lifeclock_stats.stats import (
    LeftParts,
    LifeStats,
    clamp_expectancy,
    compute_life_stats,
)
from lifeclock_stats.systems import make_stats_system

__all__ = [
    "LifeStats",
    "LeftParts",
    "compute_life_stats",
    "clamp_expectancy",
    "Parameters",
    "BirthPicker",
    "days_in_month",
    "make_birth_date",
    "parse_date",
    "parse_deep_link",
    "StatsView",
    "PLACEHOLDER",
    "week_cells",
    "progress_fraction",
    "make_stats_system",
]
