"""LMS Calendar TUI Widgets Package."""

from .calendar import CalendarWidget
from .day_view import DayView
from .week_view import WeekView
from .month_view import MonthView

__all__ = ["CalendarWidget", "DayView", "WeekView", "MonthView"]
