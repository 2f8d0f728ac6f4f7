"""Calendar Screen - lessons shown in the calendar with a title search."""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, List

from textual import on
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Header, Input

from lms_calendar.events import CalendarView, Event
from lms_calendar.lessons import LessonFormatError, lesson_to_event, lessons_to_events
from lms_calendar.locales import EN_US, Locale
from lms_calendar.state import CalendarConfig
from lms_calendar.tui.screens.event_detail import EventDetailScreen
from lms_calendar.tui.screens.help import HelpScreen
from lms_calendar.tui.screens.lesson_form import LessonFormScreen
from lms_calendar.tui.widgets.calendar import CalendarWidget


class CalendarScreen(Screen):
    """Main screen: search bar, calendar and footer."""

    DEFAULT_CSS = """
    CalendarScreen {
        layout: vertical;
        padding: 0;
    }

    #search {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ("slash", "focus_search", "Search"),
        ("escape", "focus_calendar", None),
        ("?", "help", "Help"),
    ]

    def __init__(
        self,
        lessons: List[Dict[str, Any]] | None = None,
        courses: List[Dict[str, Any]] | None = None,
        *,
        view: CalendarView | str | None = None,
        default_date: datetime | None = None,
        enable_hotkeys: bool = True,
        narrow_width: int | None = None,
        locale: Locale = EN_US,
    ) -> None:
        super().__init__()
        self.lessons: List[Dict[str, Any]] = list(lessons or [])
        self.courses: List[Dict[str, Any]] = list(courses or [])
        self.search = ""
        self.calendar_config = CalendarConfig(
            default_date=default_date,
            events=lessons_to_events(self.lessons, self.courses),
            view=view,
            locale=locale,
            enable_hotkeys=enable_hotkeys,
            on_change_view=self._view_changed,
            on_event_click=self._show_event,
            on_empty_date_click=self._new_lesson,
        )
        self.narrow_width = narrow_width

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Search lessons by title  ( / )", id="search")
        yield CalendarWidget(self.calendar_config, narrow_width=self.narrow_width, id="calendar")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(CalendarWidget).focus()

    def _refresh_events(self) -> None:
        self.calendar_config = replace(
            self.calendar_config,
            events=lessons_to_events(self.lessons, self.courses, search=self.search),
        )
        self.query_one(CalendarWidget).configure(self.calendar_config)

    # --- calendar callbacks -----------------------------------------------------

    def _view_changed(self, view: CalendarView) -> None:
        logging.info(f"Calendar view changed to {view.value}")
        self.sub_title = f"{view.value.title()} view"

    def _show_event(self, event: Event) -> None:
        self.app.push_screen(EventDetailScreen(event))

    def _new_lesson(self, instant: datetime) -> None:
        def handle_form(values: dict | None) -> None:
            if not values:
                return
            lesson = {
                "_id": f"local-{len(self.lessons) + 1}",
                "title": values["title"] or "Untitled lesson",
                "date": values["date"],
                "startTime": values["startTime"],
                "endTime": values["endTime"],
                "course": None,
            }
            try:
                lesson_to_event(lesson, self.courses)
            except LessonFormatError as e:
                self.notify(str(e), title="Invalid lesson", severity="error")
                return
            self.lessons.append(lesson)
            self._refresh_events()
            self.notify(f"Lesson '{lesson['title']}' scheduled", severity="information")

        self.app.push_screen(LessonFormScreen(instant), handle_form)

    # --- search -------------------------------------------------------------------

    @on(Input.Changed, "#search")
    def _search_changed(self, event: Input.Changed) -> None:
        self.search = event.value.strip()
        self._refresh_events()

    @on(Input.Submitted, "#search")
    def _search_submitted(self, event: Input.Submitted) -> None:
        self.action_focus_calendar()

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()

    def action_focus_calendar(self) -> None:
        self.query_one(CalendarWidget).focus()

    def action_help(self) -> None:
        self.app.push_screen(HelpScreen())
