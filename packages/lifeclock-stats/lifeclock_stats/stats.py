"""LifeStats value type and the pure statistics calculator."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
# Tropical year; all year arithmetic uses this fixed length.
MS_PER_YEAR = 365.2425 * MS_PER_DAY
WEEKS_PER_YEAR = 52

DEFAULT_EXPECTANCY = 82.0
MIN_EXPECTANCY = 30.0
MAX_EXPECTANCY = 120.0

_ONE_MS = timedelta(milliseconds=1)
_DECIMAL = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")


@dataclass(frozen=True, slots=True)
class LeftParts:
    """Remaining time split on fixed 24-hour days."""

    days: int
    hours: int
    minutes: int
    seconds: int


@dataclass(frozen=True, slots=True)
class LifeStats:
    age_ms: int
    age_years: float
    left_ms: float
    left_years: float
    percent: float  # 0..100
    left_parts: LeftParts
    total_weeks: int
    lived_weeks: int


def clamp(n: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, n))


def clamp_expectancy(value: object) -> float:
    """Default missing, zero, NaN or non-numeric values to 82, then clamp.

    Strings count as numeric only when they are plain decimal literals, so
    "inf" or "1_000" fall back to the default.
    """
    if isinstance(value, str) and _DECIMAL.match(value) is None:
        return DEFAULT_EXPECTANCY
    try:
        years = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        years = 0.0
    if math.isnan(years) or years == 0:
        years = DEFAULT_EXPECTANCY
    return clamp(years, MIN_EXPECTANCY, MAX_EXPECTANCY)


def round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def as_instant(value: date | datetime) -> datetime:
    """Birth dates are midnight UTC; naive datetimes are read as UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def split_left(left_ms: float) -> LeftParts:
    return LeftParts(
        days=math.floor(left_ms / MS_PER_DAY),
        hours=math.floor((left_ms % MS_PER_DAY) / MS_PER_HOUR),
        minutes=math.floor((left_ms % MS_PER_HOUR) / MS_PER_MINUTE),
        seconds=math.floor((left_ms % MS_PER_MINUTE) / MS_PER_SECOND),
    )


def compute_life_stats(
    birth: date | datetime, now: date | datetime, expectancy_years: object
) -> LifeStats:
    """Compute life statistics for ``birth`` observed at ``now``.

    Pure: identical inputs give identical output. A birth after ``now``
    yields a negative age, which clamps to zero lived weeks and percent.
    """
    expectancy = clamp_expectancy(expectancy_years)
    age_ms = (as_instant(now) - as_instant(birth)) // _ONE_MS
    age_years = age_ms / MS_PER_YEAR

    left_years = max(0.0, expectancy - age_years)
    left_ms = max(0.0, expectancy * MS_PER_YEAR - age_ms)

    total_weeks = round_half_up(expectancy * WEEKS_PER_YEAR)
    lived_weeks = min(total_weeks, max(0, math.floor(age_years * WEEKS_PER_YEAR)))

    percent = clamp(age_years / expectancy * 100, 0.0, 100.0)

    return LifeStats(
        age_ms=age_ms,
        age_years=age_years,
        left_ms=left_ms,
        left_years=left_years,
        percent=percent,
        left_parts=split_left(left_ms),
        total_weeks=total_weeks,
        lived_weeks=lived_weeks,
    )
