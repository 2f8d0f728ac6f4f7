"""
Date and grid arithmetic for the calendar views.

All functions are pure and work on naive local datetimes. Weeks always
start on Sunday.
"""

import calendar
from datetime import datetime, timedelta
from typing import List

from lms_calendar.events import CalendarView, parse_view
from lms_calendar.locales import Locale

MONTH_GRID_DAYS = 42  # 6 full weeks


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(value: datetime) -> datetime:
    """Midnight of the Sunday on or before ``value``."""
    # Python weekday: Monday == 0 ... Sunday == 6
    days_since_sunday = (value.weekday() + 1) % 7
    return start_of_day(value) - timedelta(days=days_since_sunday)


def start_of_month(value: datetime) -> datetime:
    return start_of_day(value).replace(day=1)


def same_day(a: datetime, b: datetime) -> bool:
    return a.date() == b.date()


def same_hour(a: datetime, b: datetime) -> bool:
    return a.date() == b.date() and a.hour == b.hour


def same_month(a: datetime, b: datetime) -> bool:
    return a.year == b.year and a.month == b.month


def add_months(value: datetime, months: int) -> datetime:
    """Shift by calendar months, clamping the day to the target month's end."""
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return value.replace(year=year, month=month, day=min(value.day, last_day))


def month_grid(value: datetime) -> List[datetime]:
    """The 42 days shown by the month view for ``value``'s month."""
    first = start_of_week(start_of_month(value))
    return [first + timedelta(days=i) for i in range(MONTH_GRID_DAYS)]


def week_dates(value: datetime) -> List[datetime]:
    """The Sunday-starting week containing ``value``."""
    first = start_of_week(value)
    return [first + timedelta(days=i) for i in range(7)]


def weekday_labels(locale: Locale) -> List[str]:
    """Abbreviated weekday names, Sunday first."""
    return list(locale.weekday_short)


def hours_of_day(value: datetime, start: int, end: int) -> List[datetime]:
    """Hourly instants on ``value``'s day, from ``start`` to ``end`` inclusive."""
    day = start_of_day(value)
    return [day.replace(hour=h) for h in range(24) if start <= h <= end]


def step(value: datetime, view: "CalendarView | str", direction: int) -> datetime:
    """
    Move the navigation cursor one unit of ``view`` forward (+1) or back (-1).

    Day and week steps are plain day arithmetic. Month and year steps keep
    the day of month where possible and clamp it otherwise (31 Jan + 1 month
    is 28/29 Feb).
    """
    view = parse_view(view)
    if view is CalendarView.DAY:
        return value + timedelta(days=direction)
    if view is CalendarView.WEEK:
        return value + timedelta(weeks=direction)
    if view is CalendarView.MONTH:
        return add_months(value, direction)
    return add_months(value, 12 * direction)
