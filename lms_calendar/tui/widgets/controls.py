"""Navigation controls: prev/next/today triggers, date label and view selector."""

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button, OptionList, Static
from textual.widgets.option_list import Option

from lms_calendar.events import CalendarView
from lms_calendar.navigation import VIEW_OPTIONS


class NavTrigger(Button):
    """A toolbar button bound to a navigation command."""

    DEFAULT_CSS = """
    NavTrigger {
        min-width: 5;
        height: 3;
        margin: 0 1 0 0;
    }
    """

    command = ""

    def __init__(self, label: str, *, id: str | None = None) -> None:
        super().__init__(label, id=id or self.command, variant="default")


class PrevTrigger(NavTrigger):
    command = "prev"


class NextTrigger(NavTrigger):
    command = "next"


class TodayTrigger(NavTrigger):
    command = "today"


class CurrentDate(Static):
    """The cursor date label."""

    DEFAULT_CSS = """
    CurrentDate {
        width: auto;
        height: 3;
        padding: 1 2;
        text-style: bold;
    }

    CurrentDate:hover {
        color: $accent;
    }
    """

    class Clicked(Message):
        """The date label was clicked."""

    def __init__(self, label: str = "") -> None:
        super().__init__(label, id="current-date")
        self.tooltip = "Click to jump to today"

    def on_click(self) -> None:
        self.post_message(self.Clicked())


class ViewDropdown(OptionList):
    """Dropdown list of views; closes when it loses focus."""

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
    ]

    DEFAULT_CSS = """
    ViewDropdown {
        width: 20;
        height: auto;
        border: round $accent;
        background: $surface;
    }
    """

    class Dismissed(Message):
        """The dropdown should close without a selection."""

    def on_blur(self) -> None:
        # Focus moving anywhere else counts as an outside click
        self.post_message(self.Dismissed())

    def action_close(self) -> None:
        self.post_message(self.Dismissed())


class ViewSelect(Widget):
    """Segmented view buttons; a trigger plus dropdown on narrow screens."""

    DEFAULT_CSS = """
    ViewSelect {
        width: auto;
        height: auto;
    }

    ViewSelect > .segments {
        width: auto;
        height: 3;
    }

    ViewSelect .view-btn {
        min-width: 8;
        margin: 0 0;
    }

    ViewSelect .view-btn.active {
        background: $accent;
        color: $text;
        text-style: bold;
    }

    ViewSelect > #view-trigger {
        display: none;
        min-width: 12;
    }

    ViewSelect > ViewDropdown {
        display: none;
    }

    ViewSelect.-narrow > .segments {
        display: none;
    }

    ViewSelect.-narrow > #view-trigger {
        display: block;
    }

    ViewSelect.-open > ViewDropdown {
        display: block;
    }
    """

    view: reactive[CalendarView] = reactive(CalendarView.MONTH)
    narrow: reactive[bool] = reactive(False)
    is_open: reactive[bool] = reactive(False)

    class Changed(Message):
        """A view was picked."""
        def __init__(self, view: CalendarView) -> None:
            self.view = view
            super().__init__()

    def compose(self) -> ComposeResult:
        with Horizontal(classes="segments"):
            for value, label in VIEW_OPTIONS:
                yield Button(label, id=f"view-{value.value}", classes="view-btn")
        yield Button(self._trigger_label(), id="view-trigger")
        yield ViewDropdown(
            *[Option(label, id=value.value) for value, label in VIEW_OPTIONS],
            id="view-dropdown",
        )

    def on_mount(self) -> None:
        self._sync()

    def _trigger_label(self) -> str:
        labels = dict(VIEW_OPTIONS)
        arrow = "v" if self.is_open else ">"
        return f"{labels.get(self.view, self.view.value.title())} {arrow}"

    def _sync(self) -> None:
        if not self.is_mounted:
            return
        for value, _ in VIEW_OPTIONS:
            self.query_one(f"#view-{value.value}", Button).set_class(value is self.view, "active")
        self.query_one("#view-trigger", Button).label = self._trigger_label()
        self.set_class(self.narrow, "-narrow")
        self.set_class(self.is_open, "-open")

    def watch_view(self, view: CalendarView) -> None:
        self._sync()

    def watch_narrow(self, narrow: bool) -> None:
        if not narrow:
            self.close()
        self._sync()

    def watch_is_open(self, is_open: bool) -> None:
        self._sync()
        if not self.is_mounted:
            return
        dropdown = self.query_one(ViewDropdown)
        if is_open:
            dropdown.focus()
        elif dropdown.has_focus:
            if self.narrow:
                self.query_one("#view-trigger", Button).focus()
            else:
                dropdown.blur()

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    @on(Button.Pressed, ".view-btn")
    def _segment_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        picked = CalendarView(event.button.id.removeprefix("view-"))
        self.post_message(self.Changed(picked))

    @on(Button.Pressed, "#view-trigger")
    def _trigger_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if self.is_open:
            self.close()
        else:
            self.open()

    @on(OptionList.OptionSelected, "#view-dropdown")
    def _option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        self.close()
        self.post_message(self.Changed(CalendarView(event.option.id)))

    @on(ViewDropdown.Dismissed)
    def _dismissed(self, event: ViewDropdown.Dismissed) -> None:
        event.stop()
        # The trigger toggles the dropdown itself
        if not self.is_open or self.screen.focused is self.query_one("#view-trigger", Button):
            return
        self.close()


class CalendarToolbar(Horizontal):
    """Prev / date / next / today on the left, the view selector on the right."""

    DEFAULT_CSS = """
    CalendarToolbar {
        width: 100%;
        height: auto;
        margin-bottom: 1;
    }

    CalendarToolbar > .spacer {
        width: 1fr;
    }
    """

    def compose(self) -> ComposeResult:
        yield PrevTrigger("<")
        yield CurrentDate()
        yield NextTrigger(">")
        yield TodayTrigger("Today")
        yield Static("", classes="spacer")
        yield ViewSelect(id="view-select")
