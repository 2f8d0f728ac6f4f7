"""
Calendar state container.

Owns the active view, the navigation cursor, the event snapshot and the
caller's callbacks. Renderers read it; only the setters below change it.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, List, Optional, Sequence, Tuple

from lms_calendar.config import settings
from lms_calendar.events import CalendarView, Event, parse_view
from lms_calendar.locales import EN_US, Locale

Listener = Callable[["CalendarState"], None]


@dataclass(frozen=True)
class CalendarConfig:
    """Caller-supplied defaults and callbacks for a calendar."""

    default_date: Optional[datetime] = None
    events: Sequence[Event] = ()
    view: "CalendarView | str | None" = None
    locale: Locale = EN_US
    enable_hotkeys: bool = True
    on_change_view: Optional[Callable[[CalendarView], Any]] = None
    on_event_click: Optional[Callable[[Event], Any]] = None
    on_empty_date_click: Optional[Callable[[datetime], Any]] = None
    on_prev: Optional[Callable[[], Any]] = None
    on_next: Optional[Callable[[], Any]] = None
    on_today: Optional[Callable[[], Any]] = None
    # Replaces the default jump-to-today of the date label
    on_date_label_click: Optional[Callable[[], Any]] = None
    header: Any = None


class CalendarState:
    """Mutable calendar state driven by navigation and caller updates."""

    def __init__(
        self,
        config: CalendarConfig | None = None,
        *,
        narrow: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        config = config or CalendarConfig()
        self._clock = clock
        self._config = config
        self._listeners: List[Listener] = []

        created = clock()
        self.today: datetime = created
        self.view: CalendarView = parse_view(config.view) if config.view else CalendarView.MONTH
        self.date: datetime = config.default_date or created
        self.events: List[Event] = list(config.events)
        self.narrow = narrow

        self._enforce_narrow()

    # --- caller-facing configuration -------------------------------------

    @property
    def config(self) -> CalendarConfig:
        return self._config

    @property
    def locale(self) -> Locale:
        return self._config.locale

    @property
    def enable_hotkeys(self) -> bool:
        return self._config.enable_hotkeys

    @property
    def header(self) -> Any:
        return self._config.header

    @property
    def visible_hours(self) -> Tuple[int, int]:
        """Inclusive (start, end) hours drawn by the day and week grids."""
        return settings.NARROW_HOURS if self.narrow else settings.WIDE_HOURS

    def now(self) -> datetime:
        return self._clock()

    # --- listeners ---------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # --- transitions ---------------------------------------------------------

    def set_view(self, view: "CalendarView | str") -> None:
        """Switch view and report it to ``on_change_view``."""
        self.view = parse_view(view)
        self._fire_change_view(self.view)
        self._enforce_narrow()
        self._notify()

    def set_date(self, value: Optional[datetime]) -> None:
        """Move the navigation cursor. ``None`` falls back to now."""
        self.date = value if value is not None else self._clock()
        self._notify()

    def set_events(self, events: Sequence[Event]) -> None:
        """Replace the event snapshot wholesale."""
        self.events = list(events)
        self._notify()

    def set_narrow(self, narrow: bool) -> None:
        """
        Record the viewport class. A narrow viewport forces the day view;
        widening again leaves the view alone.
        """
        if narrow == self.narrow:
            return
        self.narrow = narrow
        self._enforce_narrow()
        self._notify()

    def reconcile(self, config: CalendarConfig) -> bool:
        """
        Adopt caller defaults that changed since the last config.

        Only fields whose incoming value differs from the previously seen
        config are considered, and they are applied only when they differ
        from the current state. Returns True if the state changed.
        """
        previous = self._config
        self._config = config
        changed = False

        if config.default_date is not None and config.default_date != previous.default_date:
            if config.default_date != self.date:
                self.date = config.default_date
                changed = True

        if config.view is not None and config.view != previous.view:
            incoming = parse_view(config.view)
            if incoming is not self.view:
                self.view = incoming
                changed = True

        if list(config.events) != list(previous.events):
            if list(config.events) != self.events:
                self.events = list(config.events)
                changed = True

        if self._enforce_narrow():
            changed = True

        # locale, hotkeys and callbacks are read straight from the config
        if changed or config.locale != previous.locale or config.enable_hotkeys != previous.enable_hotkeys:
            self._notify()
        return changed

    def _enforce_narrow(self) -> bool:
        if self.narrow and self.view is not CalendarView.DAY:
            logging.info(f"Narrow viewport: forcing day view (was {self.view.value})")
            self.view = CalendarView.DAY
            self._fire_change_view(CalendarView.DAY)
            return True
        return False

    def _fire_change_view(self, view: CalendarView) -> None:
        if self._config.on_change_view:
            self._config.on_change_view(view)

    # --- click reporting ------------------------------------------------------

    def event_clicked(self, event: Event) -> None:
        if self._config.on_event_click:
            self._config.on_event_click(event)

    def empty_date_clicked(self, instant: datetime) -> None:
        if self._config.on_empty_date_click:
            self._config.on_empty_date_click(instant)

    def trigger_pressed(self, command: str) -> None:
        """Report a prev/next/today trigger press to the caller."""
        callback = {
            "prev": self._config.on_prev,
            "next": self._config.on_next,
            "today": self._config.on_today,
        }.get(command)
        if callback:
            callback()

    def date_label_clicked(self) -> None:
        """Run the caller's date label handler, or jump back to today."""
        if self._config.on_date_label_click:
            self._config.on_date_label_click()
        else:
            self.set_date(self.today)
