"""User-selected parameters, birth date input, and deep-link parsing."""
from __future__ import annotations

import calendar
import logging
import re
from dataclasses import dataclass
from datetime import date
from urllib.parse import parse_qs

from lifeclock_stats.stats import DEFAULT_EXPECTANCY, clamp_expectancy

logger = logging.getLogger(__name__)

MIN_BIRTH_YEAR = 1900
MAX_BIRTH_YEAR = 9999
DEFAULT_BIRTH = date(1999, 1, 1)

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


@dataclass(frozen=True)
class Parameters:
    """Birth date and life expectancy, as chosen by the user.

    ``birth`` is ``None`` until a date has been chosen; no statistics are
    computed in that case.
    """

    birth: date | None
    expectancy: float = DEFAULT_EXPECTANCY

    @classmethod
    def of(cls, birth: date | None, expectancy: object = DEFAULT_EXPECTANCY) -> Parameters:
        return cls(birth=birth, expectancy=clamp_expectancy(expectancy))


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def make_birth_date(year: int, month: int, day: int, max_year: int = MAX_BIRTH_YEAR) -> date:
    """Build a date, pulling every component into range instead of failing."""
    year = min(max_year, max(MIN_BIRTH_YEAR, int(year)))
    month = min(12, max(1, int(month)))
    day = min(days_in_month(year, month), max(1, int(day)))
    return date(year, month, day)


def parse_date(text: str | None) -> date | None:
    """Parse ``YYYY-MM-DD``. Anything else, including impossible dates, is None."""
    if not text:
        return None
    match = _ISO_DATE.match(text.strip())
    if match is None:
        return None
    year, month, day = (int(g) for g in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_deep_link(query: str | None, today: date | None = None) -> Parameters:
    """Read ``dob`` and ``exp`` from a query string.

    Malformed values are dropped silently: the birth date stays unset and
    the expectancy falls back to the default. A well-formed date is pulled
    into the years the picker offers, 1900 through ``today``.
    """
    fields = parse_qs((query or "").lstrip("?"), keep_blank_values=True)

    raw_dob = fields.get("dob", [None])[0]
    birth = parse_date(raw_dob)
    if raw_dob is not None and birth is None:
        logger.debug("ignoring malformed dob=%r", raw_dob)
    elif birth is not None:
        max_year = (today or date.today()).year
        birth = make_birth_date(birth.year, birth.month, birth.day, max_year=max_year)

    raw_exp = fields.get("exp", [None])[0]
    expectancy = clamp_expectancy(raw_exp)
    logger.debug("deep link %r -> dob=%s exp=%s", query, birth, expectancy)

    return Parameters(birth=birth, expectancy=expectancy)


class BirthPicker:
    """Year/month/day selection. The day is re-clamped whenever the month
    or year changes, so the picker always holds a real date. Years run from
    1900 through the year of ``today``."""

    def __init__(self, initial: date = DEFAULT_BIRTH, today: date | None = None) -> None:
        self._max_year = (today or date.today()).year
        start = make_birth_date(initial.year, initial.month, initial.day, max_year=self._max_year)
        self._year = start.year
        self._month = start.month
        self._day = start.day

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def date(self) -> date:
        return date(self._year, self._month, self._day)

    def set_year(self, year: int) -> None:
        self._year = min(self._max_year, max(MIN_BIRTH_YEAR, int(year)))
        self._clamp_day()

    def set_month(self, month: int) -> None:
        self._month = min(12, max(1, int(month)))
        self._clamp_day()

    def set_day(self, day: int) -> None:
        self._day = int(day)
        self._clamp_day()

    def _clamp_day(self) -> None:
        self._day = min(days_in_month(self._year, self._month), max(1, self._day))

    def year_choices(self, today: date) -> list[int]:
        """Current year first, back to the earliest supported year."""
        return list(range(today.year, MIN_BIRTH_YEAR - 1, -1))

    def month_choices(self) -> list[int]:
        return list(range(1, 13))

    def day_choices(self) -> list[int]:
        return list(range(1, days_in_month(self._year, self._month) + 1))
