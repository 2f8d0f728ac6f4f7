"""Event detail dialog shown when a calendar event is activated."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from lms_calendar.events import EVENT_COLORS, Event

# Status flags carried on events, in display order
STATUS_FLAGS = [
    ("is_active", "Active", "green"),
    ("is_upcoming", "Upcoming", "cyan"),
    ("is_completed", "Completed", "blue"),
    ("is_cancelled", "Cancelled", "red"),
]


def describe_event(event: Event) -> Text:
    """Rich text block with the event's time range, status and description."""
    text = Text()
    text.append(f"{event.start:%A %d %B %Y}\n", style="bold")
    text.append(f"{event.start:%H:%M} - {event.end:%H:%M}\n")

    flags = [(label, style) for attr, label, style in STATUS_FLAGS if getattr(event, attr)]
    if flags:
        text.append("\n")
        for i, (label, style) in enumerate(flags):
            if i:
                text.append(" ")
            text.append(f" {label} ", style=f"bold reverse {style}")
        text.append("\n")

    if event.description:
        text.append("\n")
        text.append(event.description, style="italic")
    return text


class EventDetailScreen(ModalScreen[None]):
    """Modal with the details of one event."""

    CSS = """
    EventDetailScreen {
        align: center middle;
        background: rgba(0,0,0,0.7);
    }

    Container {
        width: 60;
        height: auto;
        background: $surface;
        padding: 1 2;
        border: thick $accent;
    }

    .detail-header {
        text-style: bold;
        margin-bottom: 1;
        width: 100%;
        border-bottom: solid $primary;
        padding-bottom: 1;
    }

    .detail-body {
        margin-bottom: 1;
    }

    Button {
        width: 100%;
    }
    """

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
    ]

    def __init__(self, event: Event):
        super().__init__()
        self.event = event

    def compose(self) -> ComposeResult:
        with Container():
            header = Label(self.event.name, classes="detail-header")
            header.styles.color = EVENT_COLORS[self.event.color_tag]
            yield header
            yield Static(describe_event(self.event), classes="detail-body")
            yield Button("Close", variant="primary", id="close")

    def action_close(self) -> None:
        self.dismiss(None)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)
