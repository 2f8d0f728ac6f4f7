"""Week View - seven day columns, Sunday to Saturday."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from lms_calendar.layout import to_rows
from lms_calendar.views import WeekColumn, WeekGrid
from lms_calendar.tui.widgets.hour_grid import HourColumn, NowLine, TimeTable


class WeekDayHeader(Static):
    """Weekday name and day of month above a column."""

    DEFAULT_CSS = """
    WeekDayHeader {
        width: 1fr;
        height: 1;
        content-align: center middle;
        color: $text-muted;
    }

    WeekDayHeader.weekend {
        color: $text-disabled;
    }
    """

    def __init__(self, column: WeekColumn) -> None:
        text = Text()
        text.append(f"{column.weekday_label} ")
        if column.is_today:
            text.append(f" {column.day_number} ", style="bold reverse")
        else:
            text.append(column.day_number)
        super().__init__(text, classes="week-day-header")
        if column.is_weekend:
            self.add_class("weekend")
        if column.is_today:
            self.add_class("today")


class WeekBody(Horizontal):
    """Day columns with the now-line laid across all of them."""

    DEFAULT_CSS = """
    WeekBody {
        layers: columns now;
        width: 1fr;
        height: auto;
    }

    WeekBody > HourColumn {
        layer: columns;
        border-left: vkey $panel-lighten-1;
    }

    WeekBody > HourColumn.weekend {
        background: $boost;
    }
    """

    def __init__(self, grid: WeekGrid, row_height: int) -> None:
        super().__init__(classes="week-body")
        self.grid = grid
        self.row_height = row_height

    def compose(self) -> ComposeResult:
        for column in self.grid.columns:
            classes = "week-column weekend" if column.is_weekend else "week-column"
            yield HourColumn(
                column.rows,
                self.row_height,
                click_instant=column.click_instant,
                classes=classes,
            )
        if self.grid.now_percent is not None and self.grid.columns:
            total = len(self.grid.columns[0].rows) * self.row_height
            yield NowLine(min(total - 1, to_rows(self.grid.now_percent, total)))


class WeekView(Vertical):
    """Time grid for the Sunday-starting week around the cursor."""

    DEFAULT_CSS = """
    WeekView {
        width: 100%;
        height: auto;
    }

    WeekView > .week-header {
        margin-bottom: 1;
        border-bottom: solid $panel-lighten-1;
        height: 2;
    }

    WeekView .gutter {
        width: 6;
    }
    """

    def __init__(self, grid: WeekGrid, row_height: int) -> None:
        super().__init__(classes="calendar-view week-view")
        self.grid = grid
        self.row_height = row_height

    def compose(self) -> ComposeResult:
        with Horizontal(classes="week-header"):
            yield Static("", classes="gutter")
            for column in self.grid.columns:
                yield WeekDayHeader(column)
        with Horizontal(classes="week-grid"):
            rows = self.grid.columns[0].rows if self.grid.columns else []
            yield TimeTable(rows, self.row_height)
            yield WeekBody(self.grid, self.row_height)
