from datetime import datetime
from typing import Callable, Optional

from textual import on
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Button, Static

from lms_calendar import navigation
from lms_calendar.config import settings
from lms_calendar.state import CalendarConfig, CalendarState
from lms_calendar.views import DayGrid, MonthGrid, WeekGrid, render_view
from lms_calendar.tui.widgets.controls import (
    CalendarToolbar,
    CurrentDate,
    NavTrigger,
    ViewSelect,
)
from lms_calendar.tui.widgets.day_view import DayView
from lms_calendar.tui.widgets.hour_grid import EventChip, HourSlot
from lms_calendar.tui.widgets.month_view import MonthDayCell, MonthEventEntry, MonthView
from lms_calendar.tui.widgets.week_view import WeekView

HOTKEY_ACTIONS = {action.split("(")[0] for action, _ in navigation.HOTKEYS.values()}


class CalendarWidget(Widget):
    """Day/week/month calendar with keyboard navigation."""

    can_focus = True

    DEFAULT_CSS = """
    CalendarWidget {
        width: 100%;
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
        background: $surface;
    }

    CalendarWidget:focus-within {
        border: double $accent;
    }

    CalendarWidget > #calendar-header {
        height: auto;
    }

    CalendarWidget > #view-host {
        height: 1fr;
    }
    """

    BINDINGS = [
        (key, action, description)
        for key, (action, description) in navigation.HOTKEYS.items()
    ]

    def __init__(
        self,
        config: CalendarConfig | None = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
        narrow_width: int | None = None,
        row_height: int | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.state = CalendarState(config, clock=clock)
        self.narrow_width = narrow_width if narrow_width is not None else settings.NARROW_WIDTH
        self.row_height = row_height or settings.HOUR_ROW_HEIGHT
        self._unsubscribe: Optional[Callable[[], None]] = None

    def compose(self) -> ComposeResult:
        if self.state.header is not None:
            yield Static(self.state.header, id="calendar-header")
        yield CalendarToolbar()
        yield VerticalScroll(id="view-host")

    def on_mount(self) -> None:
        self._unsubscribe = self.state.subscribe(lambda _state: self.refresh_calendar())
        self._check_narrow()
        # is_mounted is only set once the mount handlers have run
        self.call_after_refresh(self.refresh_calendar)

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def on_resize(self) -> None:
        self._check_narrow()

    def _check_narrow(self) -> None:
        self.state.set_narrow(self.app.size.width < self.narrow_width)

    def configure(self, config: CalendarConfig) -> None:
        """Apply new caller defaults (date, view, events, callbacks)."""
        self.state.reconcile(config)

    # --- rendering -------------------------------------------------------------

    def refresh_calendar(self) -> None:
        if not self.is_mounted:
            return
        state = self.state
        self.query_one(CurrentDate).update(
            navigation.current_date_label(state.date, state.view, state.locale)
        )
        select = self.query_one(ViewSelect)
        select.view = state.view
        select.narrow = state.narrow

        host = self.query_one("#view-host", VerticalScroll)
        host.remove_children()
        model = render_view(state)
        if isinstance(model, DayGrid):
            host.mount(DayView(model, self.row_height))
        elif isinstance(model, WeekGrid):
            host.mount(WeekView(model, self.row_height))
        elif isinstance(model, MonthGrid):
            host.mount(MonthView(model))

    # --- hotkeys ---------------------------------------------------------------

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        if action in HOTKEY_ACTIONS and not self.state.enable_hotkeys:
            return False
        return True

    def action_set_view(self, view: str) -> None:
        self.state.set_view(view)

    def action_prev(self) -> None:
        navigation.prev_date(self.state)

    def action_next(self) -> None:
        navigation.next_date(self.state)

    def action_today(self) -> None:
        navigation.go_today(self.state)

    # --- controls ---------------------------------------------------------------

    @on(Button.Pressed, "NavTrigger")
    def _nav_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        trigger = event.button
        if not isinstance(trigger, NavTrigger):
            return
        if trigger.command == "prev":
            navigation.prev_date(self.state)
        elif trigger.command == "next":
            navigation.next_date(self.state)
        elif trigger.command == "today":
            navigation.go_today(self.state)
        self.state.trigger_pressed(trigger.command)

    @on(CurrentDate.Clicked)
    def _date_label_clicked(self, event: CurrentDate.Clicked) -> None:
        event.stop()
        self.state.date_label_clicked()

    @on(ViewSelect.Changed)
    def _view_changed(self, event: ViewSelect.Changed) -> None:
        event.stop()
        self.state.set_view(event.view)

    # --- grid clicks ---------------------------------------------------------------

    @on(EventChip.Clicked)
    @on(MonthEventEntry.Clicked)
    def _event_clicked(self, message: EventChip.Clicked | MonthEventEntry.Clicked) -> None:
        message.stop()
        self.state.event_clicked(message.event)

    @on(HourSlot.Clicked)
    def _slot_clicked(self, message: HourSlot.Clicked) -> None:
        message.stop()
        self.state.empty_date_clicked(message.instant)

    @on(MonthDayCell.Clicked)
    def _day_clicked(self, message: MonthDayCell.Clicked) -> None:
        message.stop()
        self.state.empty_date_clicked(message.day)

