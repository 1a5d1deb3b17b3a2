"""Tests for inspection number encoding."""

from datetime import date

import pytest

from fiscalweek.codec.inspection import (
    format_inspection_number,
    inspection_prefix,
    next_running_number,
)
from fiscalweek.errors import RangeError


class TestInspectionPrefix:
    def test_week_from_date(self):
        assert inspection_prefix("OQA", date(2024, 8, 30)) == "OQA250809-30"

    def test_explicit_week(self):
        assert inspection_prefix("OQA", date(2025, 1, 3), week=1) == "OQA250101-03"

    def test_rollover_week_keeps_ending_fiscal_year(self):
        assert inspection_prefix("FVI", date(2024, 6, 29)) == "FVI240601-29"

    def test_string_date(self):
        assert inspection_prefix("OQA", "2024-08-30") == "OQA250809-30"

    def test_invalid_week(self):
        with pytest.raises(RangeError):
            inspection_prefix("OQA", date(2024, 8, 30), week=53)


class TestInspectionNumber:
    def test_format(self):
        assert format_inspection_number("OQA250809-30", 1) == "OQA250809-300001"
        assert format_inspection_number("OQA250809-30", 9999) == "OQA250809-309999"

    @pytest.mark.parametrize("running", [0, 10000, -5])
    def test_running_out_of_range(self, running):
        with pytest.raises(RangeError):
            format_inspection_number("OQA250809-30", running)

    def test_next_running_number(self):
        existing = ["OQA250809-300001", "OQA250809-300007", "OQA250809-300003"]
        assert next_running_number(existing) == 8

    def test_next_running_number_empty(self):
        assert next_running_number([]) == 1

    def test_next_running_number_skips_malformed(self):
        assert next_running_number(["OQA250809-30abcd", "OQA250809-300002"]) == 3

    def test_next_running_number_skips_non_ascii_digits(self):
        assert next_running_number(["OQA250809-30001²"]) == 1
        assert next_running_number(["OQA250809-30001²", "OQA250809-300002"]) == 3
