"""Building blocks shared by the day and week time grids."""

from datetime import datetime
from typing import List, Optional

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.color import Color
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from lms_calendar.events import EVENT_COLORS, Event
from lms_calendar.layout import to_rows
from lms_calendar.views import HourRow


class EventChip(Static):
    """An event drawn in a time grid, positioned from its start-hour cell."""

    DEFAULT_CSS = """
    EventChip {
        layer: events;
        width: 100%;
        padding: 0 1;
        text-style: bold;
        color: $text;
        background: $primary 30%;
        border-left: outer $primary;
    }

    EventChip:hover {
        background: $primary 50%;
    }
    """

    class Clicked(Message):
        """An event in the grid was clicked."""
        def __init__(self, event: Event) -> None:
            self.event = event
            super().__init__()

    def __init__(self, event: Event, top: int, height: int) -> None:
        super().__init__(event.name, classes=f"event-chip color-{event.color_tag}")
        self.event = event
        self.top = top
        self.row_height = height
        color = Color.parse(EVENT_COLORS[event.color_tag])
        self.styles.background = color.with_alpha(0.3)
        self.styles.border_left = ("outer", color)
        self.styles.height = height
        self.tooltip = event.description or event.name

    def on_click(self, event: events.Click) -> None:
        # The chip sits above the hour slot; keep the click from reaching it
        event.stop()
        self.post_message(self.Clicked(self.event))


class HourSlot(Static):
    """One hour row. Clicking it reports ``click_instant``."""

    DEFAULT_CSS = """
    HourSlot {
        width: 100%;
        border-top: solid $panel-lighten-1;
    }

    HourSlot:hover {
        background: $boost;
    }
    """

    class Clicked(Message):
        """Empty grid space was clicked."""
        def __init__(self, instant: datetime) -> None:
            self.instant = instant
            super().__init__()

    def __init__(self, instant: datetime, click_instant: datetime, height: int) -> None:
        super().__init__("", classes=f"hour-slot hour-{instant.hour:02d}")
        self.instant = instant
        self.click_instant = click_instant
        self.styles.height = height

    def on_click(self) -> None:
        self.post_message(self.Clicked(self.click_instant))


class NowLine(Static):
    """The current-time marker."""

    DEFAULT_CSS = """
    NowLine {
        layer: now;
        width: 100%;
        height: 1;
        color: $error;
    }
    """

    def __init__(self, row: int) -> None:
        super().__init__(Text("●" + "━" * 400, style="bold red", no_wrap=True, overflow="crop"))
        self.row = row
        self.styles.offset = (0, row)


class HourColumn(Widget):
    """
    A stack of hour slots with event chips layered over them.

    Chips are attributed to their start hour only; a chip longer than one
    hour extends over the following slots instead of being repeated.
    """

    DEFAULT_CSS = """
    HourColumn {
        layers: slots events now;
        width: 1fr;
    }

    HourColumn > HourSlot {
        layer: slots;
    }
    """

    def __init__(
        self,
        rows: List[HourRow],
        row_height: int,
        click_instant: Optional[datetime] = None,
        now_percent: Optional[float] = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(classes=classes)
        self.rows = rows
        self.row_height = row_height
        self.click_instant = click_instant
        self.now_percent = now_percent
        self.styles.height = len(rows) * row_height

    def compose(self) -> ComposeResult:
        for row in self.rows:
            yield HourSlot(row.instant, self.click_instant or row.instant, self.row_height)

        # Chips on the events layer are laid out one after another, so each
        # offset is corrected by the heights of the chips before it
        stacked = 0
        for index, row in enumerate(self.rows):
            for placed in row.events:
                top = index * self.row_height + to_rows(placed.offset.top_percent, self.row_height)
                height = to_rows(placed.offset.height_percent, self.row_height)
                if placed.offset.height_percent > 0:
                    height = max(1, height)
                else:
                    height = 0
                chip = EventChip(placed.event, top, height)
                chip.styles.offset = (0, top - stacked)
                stacked += height
                yield chip

        if self.now_percent is not None:
            total = len(self.rows) * self.row_height
            yield NowLine(min(total - 1, to_rows(self.now_percent, total)))


class TimeTable(Static):
    """Hour labels down the left edge of a time grid."""

    DEFAULT_CSS = """
    TimeTable {
        width: 6;
        padding-right: 1;
        color: $text-muted;
        text-align: right;
    }
    """

    def __init__(self, rows: List[HourRow], row_height: int) -> None:
        text = Text()
        for i, row in enumerate(rows):
            if i:
                text.append("\n")
            text.append(f"{row.instant.hour}:00", style="dim")
            text.append("\n" * (row_height - 1))
        super().__init__(text)
        self.styles.height = len(rows) * row_height
