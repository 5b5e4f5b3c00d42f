"""
Business-hours rule tests, including users outside the business time zone.
"""

from datetime import datetime

from scheduling_core.core.config import settings
from scheduling_core.services.business_hours import (
    business_hours_errors,
    is_within_business_hours,
)


def test_hours_inside_business_day_accepted():
    assert is_within_business_hours(
        datetime(2024, 3, 4, 8, 0),
        datetime(2024, 3, 4, 9, 0),
    )


def test_multi_day_range_rejected():
    errors = business_hours_errors(
        datetime(2024, 3, 4, 21, 0),
        datetime(2024, 3, 5, 9, 0),
    )

    assert errors == ["appointment spans multiple days"]


def test_local_times_converted_to_business_zone(monkeypatch):
    monkeypatch.setattr(settings, "LOCAL_TIMEZONE", "America/Los_Angeles")

    # 06:00-07:00 Pacific is 09:00-10:00 Eastern
    assert is_within_business_hours(
        datetime(2024, 3, 4, 6, 0),
        datetime(2024, 3, 4, 7, 0),
    )
    # 19:30-20:00 Pacific is 22:30-23:00 Eastern
    assert business_hours_errors(
        datetime(2024, 3, 4, 19, 30),
        datetime(2024, 3, 4, 20, 0),
    ) == ["end time is after business hours"]
