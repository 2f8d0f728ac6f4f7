#!/usr/bin/env python3
"""
LMS Calendar TUI - Textual front end for the lesson calendar.

Features:
- Day / week / month views over a movable date cursor
- Keyboard navigation (m/w/d views, arrows to page, t for today)
- Compact day-only layout on narrow terminals
- Lessons loaded from an LMS JSON export
"""

import argparse
import logging
from datetime import datetime
from typing import Any, Dict, List

from textual.app import App
from textual.logging import TextualHandler

from lms_calendar.config import settings
from lms_calendar.events import CalendarView
from lms_calendar.lessons import load_lessons
from lms_calendar.locales import EN_US, LOCALES, Locale
from lms_calendar.tui.screens.calendar import CalendarScreen


class CalendarApp(App):
    """Main LMS calendar Terminal User Interface Application."""

    TITLE = "LMS Calendar"
    SUB_TITLE = "Lessons"

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("ctrl+c", "quit", None),  # Always quit, even in modals
    ]

    def __init__(
        self,
        lessons: List[Dict[str, Any]] | None = None,
        courses: List[Dict[str, Any]] | None = None,
        *,
        view: CalendarView | str | None = None,
        default_date: datetime | None = None,
        enable_hotkeys: bool = True,
        locale: Locale = EN_US,
        narrow_width: int | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.lessons = lessons or []
        self.courses = courses or []
        self.initial_view = view
        self.initial_date = default_date
        self.enable_hotkeys = enable_hotkeys
        self.calendar_locale = locale
        self.narrow_width = narrow_width

    def on_mount(self) -> None:
        """Show the calendar screen on startup."""
        self.push_screen(CalendarScreen(
            self.lessons,
            self.courses,
            view=self.initial_view,
            default_date=self.initial_date,
            enable_hotkeys=self.enable_hotkeys,
            narrow_width=self.narrow_width,
            locale=self.calendar_locale,
        ))

    def action_quit(self) -> None:
        """Quit the application."""
        self.exit()


def _parse_date(value: str) -> datetime:
    try:
        return datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LMS Calendar TUI")
    parser.add_argument("--events", metavar="PATH", help="JSON file with lessons (and courses)")
    parser.add_argument("--view", choices=["day", "week", "month"], default=None, help="Initial view")
    parser.add_argument("--date", type=_parse_date, default=None, help="Initial date (YYYY-MM-DD)")
    parser.add_argument("--locale", choices=sorted(LOCALES), default=EN_US.code,
                        help="Weekday and month names")
    parser.add_argument("--no-hotkeys", action="store_true", help="Disable single-key shortcuts")
    parser.add_argument("--narrow-width", type=int, default=settings.NARROW_WIDTH,
                        help="Terminal width below which only the day view is shown")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    return parser


def setup_logging(level: str) -> None:
    # Writing to stderr would corrupt the terminal UI
    if settings.LOG_FILE:
        handler: logging.Handler = logging.FileHandler(settings.LOG_FILE)
    else:
        handler = TextualHandler()
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[handler],
    )


def main() -> None:
    """Entry point for the LMS calendar TUI application."""
    args, _ = build_parser().parse_known_args()
    setup_logging(args.log_level)

    lessons: List[Dict[str, Any]] = []
    courses: List[Dict[str, Any]] = []
    if args.events:
        try:
            loaded = load_lessons(args.events)
            lessons, courses = loaded["lessons"], loaded["courses"]
        except (OSError, ValueError) as e:
            # LessonFormatError and JSON decode errors are both ValueErrors
            logging.error(f"Could not load lessons from {args.events}: {e}")
            raise SystemExit(f"Could not load lessons from {args.events}: {e}")

    app = CalendarApp(
        lessons,
        courses,
        view=args.view,
        default_date=args.date,
        enable_hotkeys=not args.no_hotkeys,
        narrow_width=args.narrow_width,
        locale=LOCALES[args.locale],
    )
    app.run()


if __name__ == "__main__":
    main()
