"""Tests for lifeclock_stats.params: parameters, birth input, deep links."""
from __future__ import annotations

from datetime import date

import pytest

from lifeclock_stats.params import (
    BirthPicker,
    Parameters,
    days_in_month,
    make_birth_date,
    parse_date,
    parse_deep_link,
)

_TODAY = date(2026, 10, 17)


class TestParameters:
    def test_of_clamps_expectancy(self) -> None:
        assert Parameters.of(date(2000, 1, 1), 200).expectancy == 120.0
        assert Parameters.of(date(2000, 1, 1), 0).expectancy == 82.0

    def test_default_expectancy(self) -> None:
        assert Parameters(birth=None).expectancy == 82.0

    def test_equality_drives_change_detection(self) -> None:
        a = Parameters.of(date(2000, 1, 1), 82)
        b = Parameters.of(date(2000, 1, 1), 82.0)
        assert a == b
        assert a != Parameters.of(date(2000, 1, 2), 82)


class TestBirthDate:
    def test_days_in_month(self) -> None:
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30

    def test_day_clamped_to_month(self) -> None:
        assert make_birth_date(2023, 2, 31) == date(2023, 2, 28)

    def test_month_clamped(self) -> None:
        assert make_birth_date(2000, 13, 1) == date(2000, 12, 1)
        assert make_birth_date(2000, 0, 1) == date(2000, 1, 1)

    def test_year_clamped(self) -> None:
        assert make_birth_date(1800, 5, 5).year == 1900

    def test_day_floor(self) -> None:
        assert make_birth_date(2000, 5, 0) == date(2000, 5, 1)


class TestParseDate:
    def test_valid(self) -> None:
        assert parse_date("1990-07-14") == date(1990, 7, 14)

    @pytest.mark.parametrize(
        "text", [None, "", "1990-7-14", "14.07.1990", "1990-02-30", "abcd-ef-gh"]
    )
    def test_invalid(self, text: str | None) -> None:
        assert parse_date(text) is None


class TestDeepLink:
    def test_full_link(self) -> None:
        p = parse_deep_link("?dob=1990-07-14&exp=90")
        assert p == Parameters(birth=date(1990, 7, 14), expectancy=90.0)

    def test_without_question_mark(self) -> None:
        assert parse_deep_link("dob=1990-07-14").birth == date(1990, 7, 14)

    def test_missing_everything(self) -> None:
        assert parse_deep_link("") == Parameters(birth=None, expectancy=82.0)
        assert parse_deep_link(None) == Parameters(birth=None, expectancy=82.0)

    def test_expectancy_clamped(self) -> None:
        assert parse_deep_link("exp=5").expectancy == 30.0
        assert parse_deep_link("exp=1000").expectancy == 120.0

    def test_malformed_values_fall_back(self) -> None:
        p = parse_deep_link("dob=not-a-date&exp=lots")
        assert p.birth is None
        assert p.expectancy == 82.0

    def test_blank_values_fall_back(self) -> None:
        p = parse_deep_link("dob=&exp=")
        assert p == Parameters(birth=None, expectancy=82.0)

    def test_unknown_keys_ignored(self) -> None:
        p = parse_deep_link("theme=dark&dob=2001-02-03")
        assert p.birth == date(2001, 2, 3)

    def test_dob_before_first_year_is_clamped(self) -> None:
        p = parse_deep_link("dob=1850-06-01&exp=80", today=_TODAY)
        assert p.birth == date(1900, 6, 1)
        assert p.expectancy == 80.0

    def test_dob_after_current_year_is_clamped(self) -> None:
        assert parse_deep_link("dob=2150-03-04", today=_TODAY).birth == date(2026, 3, 4)

    def test_dob_matches_picker_limits(self) -> None:
        p = parse_deep_link("dob=1850-06-01", today=_TODAY)
        picker = BirthPicker(date(1850, 6, 1), today=_TODAY)
        assert picker.date == p.birth

    @pytest.mark.parametrize("exp", ["inf", "infinity", "1_000"])
    def test_non_decimal_expectancy_falls_back(self, exp: str) -> None:
        assert parse_deep_link(f"exp={exp}").expectancy == 82.0


class TestBirthPicker:
    def test_defaults(self) -> None:
        picker = BirthPicker()
        assert picker.date == date(1999, 1, 1)

    def test_day_follows_month_length(self) -> None:
        picker = BirthPicker(date(2001, 1, 31))
        picker.set_month(2)
        assert picker.date == date(2001, 2, 28)

    def test_leap_day_follows_year(self) -> None:
        picker = BirthPicker(date(2024, 2, 29))
        picker.set_year(2023)
        assert picker.day == 28

    def test_set_day_clamped(self) -> None:
        picker = BirthPicker(date(2000, 4, 1))
        picker.set_day(31)
        assert picker.day == 30
        picker.set_day(-4)
        assert picker.day == 1

    def test_choices(self) -> None:
        picker = BirthPicker(date(2000, 2, 1))
        years = picker.year_choices(date(2026, 10, 17))
        assert years[0] == 2026
        assert years[-1] == 1900
        assert picker.month_choices() == list(range(1, 13))
        assert picker.day_choices()[-1] == 29

    def test_initial_date_clamped_to_offered_years(self) -> None:
        assert BirthPicker(date(1850, 6, 1), today=_TODAY).date == date(1900, 6, 1)
        assert BirthPicker(date(2150, 6, 1), today=_TODAY).date == date(2026, 6, 1)

    def test_set_year_stops_at_current_year(self) -> None:
        picker = BirthPicker(date(2000, 1, 1), today=_TODAY)
        picker.set_year(2100)
        assert picker.year == 2026
        picker.set_year(1000)
        assert picker.year == 1900
