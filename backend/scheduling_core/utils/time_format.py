"""
Date and time display formats shared by entities and filters.
"""

from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.strftime(DATE_FORMAT)


def format_time(value: datetime) -> str:
    """Format a time of day as 24-hour HH:MM."""
    return value.strftime(TIME_FORMAT)


def format_date_time(value: datetime) -> str:
    """Format a datetime as 'YYYY-MM-DD HH:MM'."""
    return f"{format_date(value)} {format_time(value)}"
