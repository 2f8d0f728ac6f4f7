"""Help Screen - Keyboard shortcuts and mouse actions."""

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static, Footer


HELP_TEXT = """
[bold cyan]══════════════════════════════════════════════════════[/bold cyan]
[bold white]                 LMS Calendar Help[/bold white]
[bold cyan]══════════════════════════════════════════════════════[/bold cyan]

[bold yellow]▶ VIEWS[/bold yellow]

[bold cyan]m[/bold cyan]       Month view
[bold cyan]w[/bold cyan]       Week view
[bold cyan]d[/bold cyan]       Day view
[italic]Narrow terminals always show the day view.[/italic]

[bold yellow]▶ NAVIGATION[/bold yellow]

[bold cyan]←[/bold cyan]       Previous day / week / month
[bold cyan]→[/bold cyan]       Next day / week / month
[bold cyan]t[/bold cyan]       Jump back to today
[italic]Clicking the date label also jumps to today.[/italic]

[bold yellow]▶ MOUSE[/bold yellow]

  Click a lesson to see its details.
  Click an empty hour or day to schedule a lesson there.

[bold yellow]▶ APPLICATION[/bold yellow]

[bold cyan]?[/bold cyan]       This help
[bold cyan]q[/bold cyan]       Quit

[bold cyan]══════════════════════════════════════════════════════[/bold cyan]
[dim]Press Escape to close this help screen[/dim]
"""


class HelpScreen(ModalScreen):
    """Modal help screen with calendar shortcuts."""

    BINDINGS = [
        ("escape", "dismiss", "Close"),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > VerticalScroll {
        width: 62;
        height: 80%;
        border: solid $primary;
        background: $surface;
        padding: 1 2;
    }
    """

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(HELP_TEXT, markup=True)
        yield Footer()

    def on_key(self, event) -> None:
        """Handle 'q' to dismiss without quitting app."""
        if event.key == "q":
            event.stop()
            self.dismiss()
