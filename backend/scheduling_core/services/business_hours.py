"""
Business-hours rule for appointment times.

Appointments may only be booked between BUSINESS_START_HOUR and
BUSINESS_END_HOUR (both below 24) in the business time zone, on a single day.
Appointment times are naive datetimes in LOCAL_TIMEZONE.
"""

from datetime import datetime, time
from typing import List
from zoneinfo import ZoneInfo

from scheduling_core.core.config import settings


def to_business_time(value: datetime) -> datetime:
    """Convert a naive local datetime to the business time zone."""
    local_zone = ZoneInfo(settings.LOCAL_TIMEZONE)
    business_zone = ZoneInfo(settings.BUSINESS_TIMEZONE)
    return value.replace(tzinfo=local_zone).astimezone(business_zone)


def business_hours_errors(start: datetime, end: datetime) -> List[str]:
    """
    Return the ways in which [start, end) falls outside business hours.

    Args:
        start: Naive local start time
        end: Naive local end time

    Returns:
        List of problem descriptions; empty when the range is acceptable
    """
    errors = []
    business_start = to_business_time(start)
    business_end = to_business_time(end)

    if business_start.time() < time(settings.BUSINESS_START_HOUR):
        errors.append("start time is before business hours")

    if business_end.date() != business_start.date():
        errors.append("appointment spans multiple days")
    elif business_end.time() > time(settings.BUSINESS_END_HOUR):
        errors.append("end time is after business hours")

    return errors


def is_within_business_hours(start: datetime, end: datetime) -> bool:
    """True when [start, end) lies entirely within one day's business hours."""
    return not business_hours_errors(start, end)
