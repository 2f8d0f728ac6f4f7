"""Navigation commands shared by the trigger buttons and the hotkeys."""

from datetime import datetime

from lms_calendar.events import CalendarView, parse_view
from lms_calendar.gridmath import step
from lms_calendar.locales import Locale
from lms_calendar.state import CalendarState

# Views offered by the view selector; YEAR is valid state but not offered
VIEW_OPTIONS = [
    (CalendarView.DAY, "Day"),
    (CalendarView.WEEK, "Week"),
    (CalendarView.MONTH, "Month"),
]

# key -> (action, footer description)
HOTKEYS = {
    "m": ("set_view('month')", "Month"),
    "w": ("set_view('week')", "Week"),
    "d": ("set_view('day')", "Day"),
    "t": ("today", "Today"),
    "left": ("prev", "Prev"),
    "right": ("next", "Next"),
}


def next_date(state: CalendarState) -> None:
    state.set_date(step(state.date, state.view, +1))


def prev_date(state: CalendarState) -> None:
    state.set_date(step(state.date, state.view, -1))


def go_today(state: CalendarState) -> None:
    state.set_date(state.today)


def current_date_label(value: datetime, view: "CalendarView | str", locale: Locale) -> str:
    """'11 March 2024' for the day view, 'March 2024' for the others."""
    month = locale.month_name(value.month)
    if parse_view(view) is CalendarView.DAY:
        return f"{value.day:02d} {month} {value.year}"
    return f"{month} {value.year}"
