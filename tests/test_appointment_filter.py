"""
Time-window filter tests: initial window, navigation bounds, visible subsets.
"""

from datetime import date, datetime, timedelta

import pytest

from scheduling_core.schemas.appointment import Appointment
from scheduling_core.services.appointment_filter import (
    AllFilter,
    FilterMode,
    MonthlyFilter,
    WeeklyFilter,
    create_filter,
)


def appointment_at(start: datetime, id: int = 0) -> Appointment:
    return Appointment.model_construct(
        id=id,
        title="Check-in",
        type="Call",
        start_time=start,
        end_time=start + timedelta(hours=1),
    )


@pytest.fixture
def jan_to_mar():
    return [
        appointment_at(datetime(2024, 1, 10, 9), 1),
        appointment_at(datetime(2024, 1, 25, 9), 2),
        appointment_at(datetime(2024, 2, 14, 9), 3),
        appointment_at(datetime(2024, 3, 5, 9), 4),
    ]


def test_all_filter_shows_everything(jan_to_mar):
    view = AllFilter(jan_to_mar)

    assert view.get_filtered_list() == jan_to_mar
    assert view.get_subtitle() is None
    assert not view.has_next_view()
    assert not view.has_previous_view()


def test_monthly_starts_at_last_month_with_data(jan_to_mar):
    view = MonthlyFilter(jan_to_mar)

    assert view.get_subtitle() == "March 2024"
    assert [a.id for a in view.get_filtered_list()] == [4]
    assert not view.has_next_view()
    assert view.has_previous_view()


def test_monthly_navigation_stops_at_data_bounds(jan_to_mar):
    view = MonthlyFilter(jan_to_mar)

    view.previous_view()
    assert view.get_subtitle() == "February 2024"
    assert view.has_previous_view()
    assert view.has_next_view()

    view.previous_view()
    assert [a.id for a in view.get_filtered_list()] == [1, 2]
    assert not view.has_previous_view()
    assert view.has_next_view()


def test_monthly_navigation_crosses_year_boundary():
    appointments = [
        appointment_at(datetime(2023, 12, 20, 9), 1),
        appointment_at(datetime(2024, 1, 3, 9), 2),
    ]
    view = MonthlyFilter(appointments)

    view.previous_view()

    assert view.get_subtitle() == "December 2023"
    assert [a.id for a in view.get_filtered_list()] == [1]
    view.next_view()
    assert view.get_subtitle() == "January 2024"


@pytest.mark.parametrize("day", range(4, 11))
def test_weekly_snaps_to_monday(day):
    # March 4, 2024 is a Monday; March 10 is the following Sunday
    view = WeeklyFilter([appointment_at(datetime(2024, 3, day, 10))])

    assert view.week_start == date(2024, 3, 4)
    assert view.week_start.isoweekday() == 1
    assert view.get_subtitle() == "Week of 2024-03-04"


def test_weekly_window_is_seven_days():
    appointments = [
        appointment_at(datetime(2024, 3, 3, 21), 1),   # Sunday before
        appointment_at(datetime(2024, 3, 4, 8), 2),    # Monday
        appointment_at(datetime(2024, 3, 10, 21), 3),  # Sunday
        appointment_at(datetime(2024, 3, 11, 8), 4),   # next Monday
    ]
    view = WeeklyFilter(appointments)
    view.previous_view()

    assert [a.id for a in view.get_filtered_list()] == [2, 3]
    assert view.has_next_view()
    assert view.has_previous_view()


def test_weekly_navigation_bounds(jan_to_mar):
    view = WeeklyFilter(jan_to_mar)

    assert view.week_start == date(2024, 3, 4)
    assert not view.has_next_view()
    steps = 0
    while view.has_previous_view():
        view.previous_view()
        steps += 1

    assert view.week_start == date(2024, 1, 8)
    assert steps == 8
    assert [a.id for a in view.get_filtered_list()] == [1]


def test_bounds_do_not_depend_on_list_order(jan_to_mar):
    shuffled = [jan_to_mar[2], jan_to_mar[3], jan_to_mar[0], jan_to_mar[1]]

    view = MonthlyFilter(shuffled)

    assert view.get_subtitle() == "March 2024"
    view.previous_view()
    view.previous_view()
    assert not view.has_previous_view()
    assert [a.id for a in view.get_filtered_list()] == [1, 2]


def test_empty_collection_defaults_to_today():
    today = date(2024, 5, 15)  # a Wednesday

    monthly = MonthlyFilter([], today=today)
    weekly = WeeklyFilter([], today=today)

    assert monthly.get_subtitle() == "May 2024"
    assert weekly.week_start == date(2024, 5, 13)
    for view in (monthly, weekly):
        assert view.get_filtered_list() == []
        assert not view.has_next_view()
        assert not view.has_previous_view()


def test_filter_follows_list_refilled_in_place(jan_to_mar):
    appointments = list(jan_to_mar)
    view = MonthlyFilter(appointments)

    appointments.append(appointment_at(datetime(2024, 4, 2, 9), 5))

    assert view.has_next_view()
    view.next_view()
    assert [a.id for a in view.get_filtered_list()] == [5]


def test_create_filter_by_mode(jan_to_mar):
    assert isinstance(create_filter(FilterMode.ALL, jan_to_mar), AllFilter)
    assert isinstance(create_filter(FilterMode.MONTHLY, jan_to_mar), MonthlyFilter)
    assert isinstance(create_filter(FilterMode.WEEKLY, jan_to_mar), WeeklyFilter)
