"""
View models for the day, week and month grids.

Each builder is a pure function of the calendar state (and the current
time for the now-line). The Textual widgets only draw what these return.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Union

from lms_calendar.events import CalendarView, Event
from lms_calendar.gridmath import (
    hours_of_day,
    month_grid,
    same_day,
    same_month,
    week_dates,
    weekday_labels,
)
from lms_calendar.layout import CellOffset, cell_offset, events_in_hour, events_on_day, now_line_position
from lms_calendar.state import CalendarState


@dataclass
class PlacedEvent:
    event: Event
    offset: CellOffset


@dataclass
class HourRow:
    instant: datetime
    events: List[PlacedEvent] = field(default_factory=list)


@dataclass
class DayGrid:
    date: datetime
    visible_start: int
    visible_end: int
    rows: List[HourRow]
    now_percent: Optional[float] = None


@dataclass
class WeekColumn:
    day: datetime
    weekday_label: str
    day_number: str
    is_today: bool
    is_weekend: bool
    rows: List[HourRow]

    @property
    def click_instant(self) -> datetime:
        """Instant reported for an empty click anywhere in the column."""
        return self.rows[0].instant if self.rows else self.day


@dataclass
class WeekGrid:
    date: datetime
    visible_start: int
    visible_end: int
    columns: List[WeekColumn]
    now_percent: Optional[float] = None


@dataclass
class MonthEntry:
    event: Event
    time_label: str  # HH:MM of the start


@dataclass
class MonthCell:
    day: datetime
    in_month: bool
    is_today: bool
    is_weekend: bool
    entries: List[MonthEntry]


@dataclass
class MonthGrid:
    date: datetime
    weekday_labels: List[str]
    cells: List[MonthCell]

    def weeks(self) -> List[List[MonthCell]]:
        return [self.cells[i:i + 7] for i in range(0, len(self.cells), 7)]


ViewModel = Union[DayGrid, WeekGrid, MonthGrid]


def _hour_rows(events: List[Event], day: datetime, start: int, end: int) -> List[HourRow]:
    rows = []
    for hour in hours_of_day(day, start, end):
        placed = [PlacedEvent(event, cell_offset(event)) for event in events_in_hour(events, hour)]
        rows.append(HourRow(instant=hour, events=placed))
    return rows


def build_day(state: CalendarState, now: datetime | None = None) -> Optional[DayGrid]:
    if state.date is None:
        return None
    now = now or state.now()
    start, end = state.visible_hours
    now_percent = None
    if same_day(now, state.date):
        now_percent = now_line_position(start, end, now)
    return DayGrid(
        date=state.date,
        visible_start=start,
        visible_end=end,
        rows=_hour_rows(state.events, state.date, start, end),
        now_percent=now_percent,
    )


def build_week(state: CalendarState, now: datetime | None = None) -> Optional[WeekGrid]:
    if state.date is None:
        return None
    now = now or state.now()
    start, end = state.visible_hours
    columns = []
    for i, day in enumerate(week_dates(state.date)):
        columns.append(WeekColumn(
            day=day,
            weekday_label=state.locale.weekday_abbr(day.weekday()),
            day_number=str(day.day),
            is_today=same_day(day, now),
            is_weekend=i in (0, 6),
            rows=_hour_rows(state.events, day, start, end),
        ))
    now_percent = None
    if any(column.is_today for column in columns):
        now_percent = now_line_position(start, end, now)
    return WeekGrid(
        date=state.date,
        visible_start=start,
        visible_end=end,
        columns=columns,
        now_percent=now_percent,
    )


def build_month(state: CalendarState, now: datetime | None = None) -> Optional[MonthGrid]:
    if state.date is None:
        return None
    now = now or state.now()
    cells = []
    for i, day in enumerate(month_grid(state.date)):
        entries = [
            MonthEntry(event, event.start.strftime("%H:%M"))
            for event in events_on_day(state.events, day)
        ]
        cells.append(MonthCell(
            day=day,
            in_month=same_month(day, state.date),
            is_today=same_day(day, now),
            is_weekend=i % 7 in (0, 6),
            entries=entries,
        ))
    return MonthGrid(
        date=state.date,
        weekday_labels=weekday_labels(state.locale),
        cells=cells,
    )


BUILDERS = {
    CalendarView.DAY: build_day,
    CalendarView.WEEK: build_week,
    CalendarView.MONTH: build_month,
}


def render_view(state: CalendarState, now: datetime | None = None) -> Optional[ViewModel]:
    """Build the model for the active view; YEAR has no renderer."""
    builder = BUILDERS.get(state.view)
    if builder is None:
        return None
    return builder(state, now)
