"""Tests for fiscal year and fiscal period resolution."""

from datetime import date

import pytest

from fiscalweek.business_calendar.core import FiscalPeriod
from fiscalweek.business_calendar.range import fiscal_week_range
from fiscalweek.business_calendar.week import fiscal_week_number
from fiscalweek.business_calendar.year import (
    current_fiscal_week,
    current_fiscal_year,
    fiscal_period,
    fiscal_year,
)
from fiscalweek.conventions.types import PeriodConvention, Weekday


class TestFiscalYear:
    @pytest.mark.parametrize(
        "dt, expected",
        [
            (date(2024, 8, 15), 2025),
            (date(2025, 1, 15), 2025),
            (date(2025, 6, 30), 2025),
            (date(2025, 7, 1), 2026),
            (date(2024, 12, 31), 2025),
            (date(2025, 6, 1), 2025),
        ],
    )
    def test_known_years(self, dt, expected):
        assert fiscal_year(dt, Weekday.SATURDAY) == expected

    def test_extreme_dates(self):
        assert fiscal_year(date.min) == 1
        assert fiscal_year(date.max) == 10000

    def test_every_day_1990_to_2050(self, daterange):
        for dt in daterange(date(1990, 1, 1), date(2050, 12, 31)):
            year = fiscal_year(dt)
            assert year in (dt.year, dt.year + 1)


class TestJuneRolloverDivergence:
    """The rollover week keeps the ending fiscal year but reports week 1."""

    def test_year_and_week_disagree(self):
        dt = date(2024, 6, 29)
        assert fiscal_year(dt) == 2024
        assert fiscal_week_number(dt) == 1
        assert not fiscal_week_range(2024, 1).contains(dt)
        assert fiscal_week_range(2025, 1).contains(dt)

    def test_split_period_matches_stored_codes(self):
        assert fiscal_period(date(2024, 6, 29)) == FiscalPeriod(2024, 1)

    def test_unified_period_moves_to_next_year(self):
        period = fiscal_period(date(2024, 6, 29), convention=PeriodConvention.UNIFIED)
        assert period == FiscalPeriod(2025, 1)

    def test_conventions_agree_outside_rollover(self, daterange):
        for dt in daterange(date(2024, 1, 1), date(2024, 6, 28)):
            assert fiscal_period(dt) == fiscal_period(dt, convention=PeriodConvention.UNIFIED)


class TestFiscalPeriod:
    def test_period_of_august(self):
        period = fiscal_period(date(2024, 8, 15))
        assert period == FiscalPeriod(2025, 7)
        assert tuple(period) == (2025, 7)
        assert period.code == "202507"

    def test_periods_order_chronologically(self):
        assert fiscal_period(date(2024, 8, 15)) < fiscal_period(date(2025, 1, 15))

    def test_period_is_immutable(self):
        period = FiscalPeriod(2025, 7)
        with pytest.raises(AttributeError):
            period.week = 8  # type: ignore[misc]


class TestCurrent:
    def test_current_with_fixed_today(self):
        assert current_fiscal_week(today=date(2024, 8, 15)) == 7
        assert current_fiscal_year(today=date(2024, 8, 15)) == 2025

    def test_current_with_week_start(self):
        assert current_fiscal_week(Weekday.SUNDAY, today=date(2024, 7, 7)) == 2

    def test_current_defaults_to_today(self):
        assert 1 <= current_fiscal_week() <= 52
        assert current_fiscal_year() in (date.today().year, date.today().year + 1)
