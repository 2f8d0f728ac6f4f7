from datetime import datetime, timedelta

import pytest

from lms_calendar.events import CalendarView
from lms_calendar.gridmath import (
    add_months,
    hours_of_day,
    month_grid,
    start_of_week,
    step,
    week_dates,
    weekday_labels,
)
from lms_calendar.locales import EN_US, PT_BR

SUNDAY = 6  # datetime.weekday()


def _sample_dates() -> list[datetime]:
    """Two years of dates at odd times of day, including leap days."""
    first = datetime(2023, 1, 1, 13, 37)
    return [first + timedelta(days=i * 3) for i in range(250)] + [datetime(2024, 2, 29, 23, 59)]


def test_month_grid_is_six_sunday_weeks() -> None:
    for d in _sample_dates():
        grid = month_grid(d)
        assert len(grid) == 42
        assert grid[0].weekday() == SUNDAY
        assert all(b - a == timedelta(days=1) for a, b in zip(grid, grid[1:]))
        assert datetime(d.year, d.month, 1) in grid


def test_month_grid_march_2024_bounds() -> None:
    grid = month_grid(datetime(2024, 3, 15, 10, 0))

    assert grid[0] == datetime(2024, 2, 25)
    assert grid[-1] == datetime(2024, 4, 6)


def test_month_grid_month_starting_on_sunday() -> None:
    # September 2024 starts on a Sunday, so the grid starts on the 1st
    grid = month_grid(datetime(2024, 9, 20))
    assert grid[0] == datetime(2024, 9, 1)


def test_week_dates_contains_date_and_starts_sunday() -> None:
    for d in _sample_dates():
        week = week_dates(d)
        assert len(week) == 7
        assert week[0].weekday() == SUNDAY
        assert d.date() in [day.date() for day in week]


def test_week_dates_for_a_sunday_starts_that_day() -> None:
    assert start_of_week(datetime(2024, 3, 10, 18, 0)) == datetime(2024, 3, 10)
    assert week_dates(datetime(2024, 3, 16))[0] == datetime(2024, 3, 10)


def test_weekday_labels_start_on_sunday() -> None:
    assert weekday_labels(EN_US) == ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]
    assert weekday_labels(PT_BR)[0] == "do"


def test_hours_of_day_filters_to_visible_range() -> None:
    hours = hours_of_day(datetime(2024, 3, 11, 13, 37), 5, 22)

    assert len(hours) == 18
    assert hours[0] == datetime(2024, 3, 11, 5, 0)
    assert hours[-1] == datetime(2024, 3, 11, 22, 0)


def test_hours_of_day_full_range() -> None:
    hours = hours_of_day(datetime(2024, 3, 11), 0, 23)
    assert [h.hour for h in hours] == list(range(24))


@pytest.mark.parametrize("view", ["day", "week", "month", "year"])
def test_step_round_trip(view: str) -> None:
    for d in _sample_dates():
        if d.day > 28:
            continue  # month/year steps clamp the day at month end
        assert step(step(d, view, +1), view, -1) == d


def test_step_units() -> None:
    d = datetime(2024, 3, 11, 9, 30)

    assert step(d, CalendarView.DAY, +1) == datetime(2024, 3, 12, 9, 30)
    assert step(d, CalendarView.WEEK, -1) == datetime(2024, 3, 4, 9, 30)
    assert step(d, CalendarView.MONTH, +1) == datetime(2024, 4, 11, 9, 30)
    assert step(d, CalendarView.YEAR, -1) == datetime(2023, 3, 11, 9, 30)


def test_step_month_clamps_to_month_end() -> None:
    assert step(datetime(2024, 1, 31), "month", +1) == datetime(2024, 2, 29)
    assert step(datetime(2023, 1, 31), "month", +1) == datetime(2023, 2, 28)
    assert step(datetime(2024, 2, 29), "year", +1) == datetime(2025, 2, 28)


def test_add_months_crosses_year_boundaries() -> None:
    assert add_months(datetime(2024, 12, 15), 1) == datetime(2025, 1, 15)
    assert add_months(datetime(2024, 1, 15), -1) == datetime(2023, 12, 15)
    assert add_months(datetime(2024, 5, 31), -3) == datetime(2024, 2, 29)


def test_step_rejects_unknown_view() -> None:
    with pytest.raises(ValueError):
        step(datetime(2024, 3, 11), "decade", +1)
