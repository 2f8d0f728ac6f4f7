from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Container, Grid
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from lms_calendar.lessons import empty_slot_form


class LessonFormScreen(ModalScreen[dict]):
    """Modal to create a lesson in an empty calendar slot."""

    CSS = """
    LessonFormScreen {
        align: center middle;
        background: rgba(0,0,0,0.5);
    }

    Container {
        width: 60;
        height: auto;
        background: $surface;
        padding: 1 2;
        border: thick $accent;
    }

    .header {
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
        text-align: center;
        width: 100%;
        border-bottom: solid $primary;
        padding-bottom: 1;
    }

    Input {
        margin-bottom: 1;
    }

    #times {
        grid-size: 2;
        grid-gutter: 1;
        height: auto;
    }

    #buttons {
        grid-size: 2;
        grid-gutter: 1;
        height: auto;
        margin-top: 1;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(self, instant: datetime, title: str = "New Lesson") -> None:
        super().__init__()
        self.title = title
        self.defaults = empty_slot_form(instant)

    def compose(self) -> ComposeResult:
        with Container():
            yield Label(self.title, classes="header")
            yield Input(placeholder="Lesson title", id="title")
            yield Input(self.defaults["date"], placeholder="YYYY-MM-DD", id="date")
            with Grid(id="times"):
                yield Input(self.defaults["startTime"], placeholder="HH:MM", id="startTime")
                yield Input(self.defaults["endTime"], placeholder="HH:MM", id="endTime")
            with Grid(id="buttons"):
                yield Button("Cancel", variant="error", id="cancel")
                yield Button("Save", variant="success", id="save")

    def on_mount(self) -> None:
        self.query_one("#title", Input).focus()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _values(self) -> dict:
        return {
            field: self.query_one(f"#{field}", Input).value.strip()
            for field in ("title", "date", "startTime", "endTime")
        }

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self.dismiss(self._values())
        else:
            self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(self._values())
