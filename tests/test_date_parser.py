"""Tests del intérprete de fechas del portal."""

from datetime import date, datetime, timedelta

import pytest

from evaluation_compliance.core.services import (
    coerce_date,
    format_date,
    parse_date,
    with_year
)


class TestParseDate:
    """Formatos aceptados y rechazos."""

    def test_year_first(self):
        assert parse_date("2023-08-15") == date(2023, 8, 15)

    def test_day_first_with_slashes(self):
        assert parse_date("15/08/2023") == date(2023, 8, 15)

    def test_day_first_with_dashes(self):
        assert parse_date("05-01-2024") == date(2024, 1, 5)

    def test_leap_day(self):
        assert parse_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("text", [
        "2023-02-30",
        "2023-02-29",
        "31-04-2023",
        "2023/13/01",
        "00-01-2023",
        "10-01-23",
        "0023-01-10",
        "9999-12-01",
    ])
    def test_impossible_dates_are_rejected(self, text):
        assert parse_date(text) is None

    @pytest.mark.parametrize("value", [
        "",
        None,
        20230101,
        "2023-01",
        "2023-01-01-01",
        "2023-aa-01",
        "2023--01",
        "hoy",
    ])
    def test_malformed_input_returns_none(self, value):
        assert parse_date(value) is None

    def test_round_trip_both_styles(self):
        current = date(2019, 1, 1)
        while current < date(2025, 1, 1):
            assert parse_date(format_date(current)) == current
            assert parse_date(format_date(current, "display")) == current
            current += timedelta(days=13)


class TestCoerceDate:

    def test_datetime_is_truncated(self):
        assert coerce_date(datetime(2023, 5, 1, 23, 59)) == date(2023, 5, 1)

    def test_date_passes_through(self):
        assert coerce_date(date(2023, 5, 1)) == date(2023, 5, 1)

    def test_text_is_parsed(self):
        assert coerce_date("01/05/2023") == date(2023, 5, 1)

    def test_invalid_text_raises(self):
        with pytest.raises(ValueError):
            coerce_date("2023-02-30")

    def test_date_beyond_working_range_raises(self):
        with pytest.raises(ValueError, match="fuera de rango"):
            coerce_date(date(9999, 6, 1))


class TestYearArithmetic:

    def test_leap_day_clamps_in_common_year(self):
        assert with_year(date(2020, 2, 29), 2023) == date(2023, 2, 28)

    def test_leap_day_kept_in_leap_year(self):
        assert with_year(date(2020, 2, 29), 2024) == date(2024, 2, 29)

    def test_year_rolls_forward_at_upper_bound(self):
        assert with_year(date(9998, 3, 1), 9999) == date(9999, 3, 1)
