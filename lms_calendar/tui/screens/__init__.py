"""LMS Calendar TUI Screens Package."""

from .calendar import CalendarScreen
from .event_detail import EventDetailScreen
from .help import HelpScreen
from .lesson_form import LessonFormScreen

__all__ = ["CalendarScreen", "EventDetailScreen", "HelpScreen", "LessonFormScreen"]
