"""Day View - one column of hour rows for the cursor date."""

from textual.app import ComposeResult
from textual.containers import Horizontal

from lms_calendar.views import DayGrid
from lms_calendar.tui.widgets.hour_grid import HourColumn, TimeTable


class DayView(Horizontal):
    """Time grid for a single day."""

    DEFAULT_CSS = """
    DayView {
        width: 100%;
        height: auto;
        padding-top: 1;
    }
    """

    def __init__(self, grid: DayGrid, row_height: int) -> None:
        super().__init__(classes="calendar-view day-view")
        self.grid = grid
        self.row_height = row_height

    def compose(self) -> ComposeResult:
        yield TimeTable(self.grid.rows, self.row_height)
        yield HourColumn(
            self.grid.rows,
            self.row_height,
            now_percent=self.grid.now_percent,
            classes="day-column",
        )
