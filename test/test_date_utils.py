"""Tests for date coercion helpers."""

from datetime import date, datetime

import pandas as pd
import pytest

from fiscalweek.utils.date import add_days, day_of_week, to_date


class TestToDate:
    @pytest.mark.parametrize(
        "value",
        [
            "2024-08-15",
            "20240815",
            datetime(2024, 8, 15, 18, 30),
            pd.Timestamp("2024-08-15 07:00"),
            date(2024, 8, 15),
        ],
    )
    def test_normalizes_to_date(self, value):
        result = to_date(value)
        assert result == date(2024, 8, 15)
        assert type(result) is date

    def test_bad_string(self):
        with pytest.raises(ValueError):
            to_date("15/08/2024")

    def test_bad_type(self):
        with pytest.raises(TypeError):
            to_date(20240815)


def test_day_of_week_counts_from_sunday():
    assert day_of_week(date(2024, 6, 29)) == 6
    assert day_of_week(date(2024, 6, 30)) == 0
    assert day_of_week(date(2024, 7, 1)) == 1


def test_add_days_crosses_leap_day():
    assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
    assert add_days(date(2024, 3, 1), -1) == date(2024, 2, 29)
