"""
Time-window filters for browsing appointments by month or by week.

A filter keeps a reference to the caller's appointment list and derives the
visible subset from it on demand, so a list that is refilled in place stays
current. Navigation bounds come from the earliest and latest start times in
the list, whatever order the list happens to be in.
"""

from datetime import date, timedelta
from enum import Enum
from typing import List, Optional, Sequence

from scheduling_core.schemas.appointment import Appointment
from scheduling_core.utils.time_format import format_date

WEEK = timedelta(days=7)


class FilterMode(str, Enum):
    """Appointment view modes."""
    ALL = "ALL"
    MONTHLY = "MONTHLY"
    WEEKLY = "WEEKLY"


class AppointmentFilter:
    """
    Base filter: the "all" view, showing everything with no navigation.

    Subclasses narrow the view to a window and can step it backward and
    forward. ``next_view``/``previous_view`` move unconditionally; check
    ``has_next_view``/``has_previous_view`` first.
    """

    mode = FilterMode.ALL

    def __init__(self, appointments: Sequence[Appointment]):
        self.appointments = appointments

    def get_subtitle(self) -> Optional[str]:
        """Label for the current window, or None when unfiltered."""
        return None

    def get_filtered_list(self) -> List[Appointment]:
        """Appointments in the current window, in the order of the source list."""
        return [a for a in self.appointments if self.is_in_view(a)]

    def has_next_view(self) -> bool:
        return False

    def has_previous_view(self) -> bool:
        return False

    def next_view(self) -> None:
        pass

    def previous_view(self) -> None:
        pass

    def is_in_view(self, appointment: Appointment) -> bool:
        return True

    def _first_date(self) -> Optional[date]:
        if not self.appointments:
            return None
        return min(a.start_time for a in self.appointments).date()

    def _last_date(self) -> Optional[date]:
        if not self.appointments:
            return None
        return max(a.start_time for a in self.appointments).date()


class AllFilter(AppointmentFilter):
    """Shows every appointment."""


class MonthlyFilter(AppointmentFilter):
    """Shows one calendar month at a time, starting at the latest month with data."""

    mode = FilterMode.MONTHLY

    def __init__(self, appointments: Sequence[Appointment], today: Optional[date] = None):
        super().__init__(appointments)
        anchor = self._last_date() or today or date.today()
        self.month = anchor.replace(day=1)

    def get_subtitle(self) -> Optional[str]:
        return self.month.strftime("%B %Y")

    def has_next_view(self) -> bool:
        last_date = self._last_date()
        return last_date is not None and _month_of(last_date) > self.month

    def has_previous_view(self) -> bool:
        first_date = self._first_date()
        return first_date is not None and _month_of(first_date) < self.month

    def next_view(self) -> None:
        self.month = _add_months(self.month, 1)

    def previous_view(self) -> None:
        self.month = _add_months(self.month, -1)

    def is_in_view(self, appointment: Appointment) -> bool:
        return _month_of(appointment.start_time.date()) == self.month


class WeeklyFilter(AppointmentFilter):
    """
    Shows one Monday-to-Sunday week at a time, starting at the week of the
    latest appointment.
    """

    mode = FilterMode.WEEKLY

    def __init__(self, appointments: Sequence[Appointment], today: Optional[date] = None):
        super().__init__(appointments)
        anchor = self._last_date() or today or date.today()
        # ISO weekday 1 is Monday
        self.week_start = anchor - timedelta(days=anchor.isoweekday() - 1)

    def get_subtitle(self) -> Optional[str]:
        return f"Week of {format_date(self.week_start)}"

    def has_next_view(self) -> bool:
        last_date = self._last_date()
        return last_date is not None and last_date >= self.week_start + WEEK

    def has_previous_view(self) -> bool:
        first_date = self._first_date()
        return first_date is not None and first_date < self.week_start

    def next_view(self) -> None:
        self.week_start += WEEK

    def previous_view(self) -> None:
        self.week_start -= WEEK

    def is_in_view(self, appointment: Appointment) -> bool:
        return self.week_start <= appointment.start_time.date() < self.week_start + WEEK


def create_filter(
    mode: FilterMode,
    appointments: Sequence[Appointment],
    today: Optional[date] = None,
) -> AppointmentFilter:
    """
    Build the filter for a view mode.

    Args:
        mode: View mode
        appointments: Caller-maintained appointment list
        today: Fallback anchor when the list is empty; defaults to date.today()
    """
    if mode == FilterMode.MONTHLY:
        return MonthlyFilter(appointments, today)
    if mode == FilterMode.WEEKLY:
        return WeeklyFilter(appointments, today)
    return AllFilter(appointments)


def _month_of(value: date) -> date:
    return value.replace(day=1)


def _add_months(month: date, count: int) -> date:
    index = month.year * 12 + month.month - 1 + count
    return date(index // 12, index % 12 + 1, 1)
