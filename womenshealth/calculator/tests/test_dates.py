"""Tests for calendar-date parsing and arithmetic."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from womenshealth.calculator.dates import (
    date_range,
    days_between,
    format_calendar_date,
    parse_calendar_date,
    shift_date,
    weeks_between,
)
from womenshealth.calculator.errors import CalculatorError, DateOutOfRange, InvalidDateFormat


class TestParseCalendarDate:
    def test_parses_iso_string(self) -> None:
        assert parse_calendar_date("2024-01-01") == date(2024, 1, 1)

    def test_leap_day_accepted(self) -> None:
        assert parse_calendar_date("2024-02-29") == date(2024, 2, 29)

    def test_date_passes_through(self) -> None:
        d = date(2025, 3, 9)
        assert parse_calendar_date(d) is d

    def test_datetime_truncated_to_date(self) -> None:
        assert parse_calendar_date(datetime(2025, 3, 9, 23, 59)) == date(2025, 3, 9)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "not-a-date",
            "2024/01/01",
            "2024-1-1",
            "20240101",
            "01-01-2024",
            " 2024-01-01",
            "2024-01-01T00:00:00",
            "2024-13-01",
            "2024-04-31",
            "2023-02-29",
        ],
    )
    def test_rejects_malformed_or_impossible(self, value: str) -> None:
        with pytest.raises(InvalidDateFormat) as exc_info:
            parse_calendar_date(value)
        assert exc_info.value.value == value

    def test_rejects_non_string(self) -> None:
        with pytest.raises(InvalidDateFormat):
            parse_calendar_date(20240101)  # type: ignore[arg-type]

    def test_error_is_value_error(self) -> None:
        """Callers catching ValueError still see date failures."""
        with pytest.raises(ValueError):
            parse_calendar_date("nope")
        assert issubclass(InvalidDateFormat, CalculatorError)


class TestDateArithmetic:
    def test_format_round_trips_padding(self) -> None:
        assert format_calendar_date(date(2024, 3, 5)) == "2024-03-05"

    def test_format_pads_early_years(self) -> None:
        assert format_calendar_date(date(1, 1, 1)) == "0001-01-01"

    def test_shift_date_moves_both_ways(self) -> None:
        assert shift_date(date(2024, 2, 28), 1) == date(2024, 2, 29)
        assert shift_date(date(2024, 3, 1), -1) == date(2024, 2, 29)

    @pytest.mark.parametrize(
        ("start", "days"),
        [(date(9999, 12, 31), 1), (date(1, 1, 1), -1)],
    )
    def test_shift_date_outside_calendar_raises(self, start: date, days: int) -> None:
        with pytest.raises(DateOutOfRange) as exc_info:
            shift_date(start, days)
        assert exc_info.value.days == days
        assert isinstance(exc_info.value, CalculatorError)

    def test_date_range_is_inclusive_and_ascending(self) -> None:
        days = date_range(date(2023, 12, 30), date(2024, 1, 2))
        assert days == [
            date(2023, 12, 30),
            date(2023, 12, 31),
            date(2024, 1, 1),
            date(2024, 1, 2),
        ]

    def test_date_range_single_day(self) -> None:
        assert date_range(date(2024, 1, 1), date(2024, 1, 1)) == [date(2024, 1, 1)]

    def test_date_range_reversed_is_empty(self) -> None:
        assert date_range(date(2024, 1, 2), date(2024, 1, 1)) == []

    def test_days_between_is_signed(self) -> None:
        assert days_between(date(2024, 1, 1), date(2024, 1, 11)) == 10
        assert days_between(date(2024, 1, 11), date(2024, 1, 1)) == -10

    def test_weeks_between_floors(self) -> None:
        assert weeks_between(date(2024, 1, 1), date(2024, 1, 14)) == 1
        assert weeks_between(date(2024, 1, 1), date(2024, 1, 15)) == 2
        # Three days in the future is already week -1
        assert weeks_between(date(2024, 1, 4), date(2024, 1, 1)) == -1
