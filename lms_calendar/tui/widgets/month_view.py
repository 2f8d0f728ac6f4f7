"""Month View - six weeks of day cells listing their events."""

from datetime import datetime

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Grid, Vertical
from textual.message import Message
from textual.widgets import Static

from lms_calendar.events import EVENT_COLORS, Event
from lms_calendar.views import MonthCell, MonthEntry, MonthGrid


class MonthEventEntry(Static):
    """Color dot, truncated name and start time of one event."""

    DEFAULT_CSS = """
    MonthEventEntry {
        width: 100%;
        height: 1;
        padding: 0 0;
    }

    MonthEventEntry:hover {
        background: $boost;
    }
    """

    class Clicked(Message):
        """An event in the month grid was clicked."""
        def __init__(self, event: Event) -> None:
            self.event = event
            super().__init__()

    def __init__(self, entry: MonthEntry) -> None:
        super().__init__("", classes=f"month-event color-{entry.event.color_tag}")
        self.event = entry.event
        self.time_label = entry.time_label
        self.tooltip = f"{entry.time_label} {entry.event.name}"

    def render(self) -> Text:
        # Keep the start time visible; the name is truncated first
        width = max(self.size.width, 1)
        time_part = f" {self.time_label}"
        name_width = max(width - len(time_part), 1)
        color = EVENT_COLORS[self.event.color_tag]
        line = Text(no_wrap=True, overflow="ellipsis")
        line.append("●", style=color)
        line.append(" ")
        line.append(self.event.name)
        line.truncate(name_width, overflow="ellipsis", pad=True)
        line.append(time_part, style="dim")
        return line

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Clicked(self.event))


class MonthDayCell(Vertical):
    """A day in the month grid."""

    DEFAULT_CSS = """
    MonthDayCell {
        height: 100%;
        min-height: 4;
        border: round $panel-lighten-1;
        padding: 0 1;
        color: $text;
        overflow-y: auto;
    }

    MonthDayCell:hover {
        border: round $accent;
    }

    MonthDayCell.outside {
        color: $text-disabled;
    }

    MonthDayCell > .day-number {
        height: 1;
        width: 100%;
        text-align: right;
    }

    MonthDayCell.today > .day-number {
        text-style: bold reverse;
    }
    """

    class Clicked(Message):
        """Empty space in a day cell was clicked."""
        def __init__(self, day: datetime) -> None:
            self.day = day
            super().__init__()

    def __init__(self, cell: MonthCell) -> None:
        super().__init__(classes=f"month-day day-{cell.day:%Y-%m-%d}")
        self.cell = cell
        self.day = cell.day
        if not cell.in_month:
            self.add_class("outside")
        if cell.is_today:
            self.add_class("today")

    def compose(self) -> ComposeResult:
        yield Static(str(self.cell.day.day), classes="day-number")
        for entry in self.cell.entries:
            yield MonthEventEntry(entry)

    def on_click(self) -> None:
        self.post_message(self.Clicked(self.day))


class MonthView(Vertical):
    """Month grid for the cursor's month, always 42 days."""

    DEFAULT_CSS = """
    MonthView {
        width: 100%;
        height: auto;
    }

    MonthView > .weekday-row {
        grid-size: 7;
        height: 1;
    }

    MonthView .weekday-label {
        width: 100%;
        text-align: right;
        padding-right: 2;
        color: $text-muted;
        text-style: bold;
    }

    MonthView .weekday-label.weekend {
        color: $text-disabled;
    }

    MonthView > .month-grid {
        grid-size: 7 6;
        grid-rows: 6;
        height: auto;
    }
    """

    def __init__(self, grid: MonthGrid) -> None:
        super().__init__(classes="calendar-view month-view")
        self.grid = grid

    def compose(self) -> ComposeResult:
        with Grid(classes="weekday-row"):
            for i, label in enumerate(self.grid.weekday_labels):
                classes = "weekday-label weekend" if i in (0, 6) else "weekday-label"
                yield Static(label, classes=classes)
        with Grid(classes="month-grid"):
            for cell in self.grid.cells:
                yield MonthDayCell(cell)
