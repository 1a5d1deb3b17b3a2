from datetime import date, timedelta

import pytest


def _daterange(start: date, end: date):
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


@pytest.fixture
def daterange():
    """Inclusive day-by-day iterator factory."""
    return _daterange
