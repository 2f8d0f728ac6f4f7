"""Calendar view engine for the LMS client: grid math, event layout and state."""

from lms_calendar.events import CalendarView, Event
from lms_calendar.locales import EN_US, Locale
from lms_calendar.state import CalendarConfig, CalendarState

__all__ = ["CalendarView", "Event", "EN_US", "Locale", "CalendarConfig", "CalendarState"]
