"""Tests for year-month and trend display labels."""

import logging

import pytest

from fiscalweek.codec.month import month_label, month_trend_label


class TestMonthLabel:
    @pytest.mark.parametrize(
        "year_month, expected",
        [("2406", "Jun`24"), (2412, "Dec`24"), ("2501", "Jan`25"), ("0007", "Jul`00")],
    )
    def test_labels(self, year_month, expected):
        assert month_label(year_month) == expected

    @pytest.mark.parametrize("year_month", ["2413", "2400", "24061", "ab12", ""])
    def test_malformed_returned_unchanged(self, year_month, caplog):
        with caplog.at_level(logging.WARNING, logger="fiscalweek.codec.month"):
            assert month_label(year_month) == year_month
        assert caplog.records


class TestMonthTrendLabel:
    def test_whole_month(self):
        assert month_trend_label("240699") == "Jun`24"
        assert month_trend_label(241299) == "Dec`24"

    def test_week_bucket(self):
        assert month_trend_label("250112") == "WW12 Jan`25"

    def test_malformed(self, caplog):
        with caplog.at_level(logging.WARNING, logger="fiscalweek.codec.month"):
            assert month_trend_label("2401") == "2401"
        assert caplog.records
