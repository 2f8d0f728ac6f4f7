from datetime import datetime

from lms_calendar.events import CalendarView, Event
from lms_calendar.state import CalendarConfig, CalendarState
from lms_calendar.views import DayGrid, MonthGrid, WeekGrid, build_day, build_month, build_week, render_view

NOW = datetime(2024, 3, 11, 14, 30)  # a Monday


def _state(view: str, date: datetime, events=(), narrow: bool = False) -> CalendarState:
    config = CalendarConfig(default_date=date, view=view, events=list(events))
    return CalendarState(config, narrow=narrow, clock=lambda: NOW)


def _event(event_id: str, start: datetime, end: datetime, color: str = "blue") -> Event:
    return Event(id=event_id, start=start, end=end, name=event_id, color=color)


def test_render_view_dispatches_on_view() -> None:
    d = datetime(2024, 3, 11)

    assert isinstance(render_view(_state("day", d)), DayGrid)
    assert isinstance(render_view(_state("week", d)), WeekGrid)
    assert isinstance(render_view(_state("month", d)), MonthGrid)
    assert render_view(_state("year", d)) is None


def test_builders_return_nothing_without_a_date() -> None:
    state = _state("day", datetime(2024, 3, 11))
    state.date = None

    assert build_day(state) is None
    assert build_week(state) is None
    assert build_month(state) is None


def test_day_grid_places_events_in_start_hour() -> None:
    event = _event("a", datetime(2024, 3, 11, 10, 15), datetime(2024, 3, 11, 10, 45))
    grid = build_day(_state("day", datetime(2024, 3, 11), [event]))

    assert len(grid.rows) == 24
    row = grid.rows[10]
    assert row.instant == datetime(2024, 3, 11, 10, 0)
    assert [p.event for p in row.events] == [event]
    assert row.events[0].offset.top_percent == 25
    assert row.events[0].offset.height_percent == 50
    assert all(not r.events for i, r in enumerate(grid.rows) if i != 10)


def test_day_grid_now_line_only_for_today() -> None:
    today = build_day(_state("day", datetime(2024, 3, 11)))
    other = build_day(_state("day", datetime(2024, 3, 12)))

    assert today.now_percent is not None
    assert abs(today.now_percent - 14.5 / 24 * 100) < 1e-9
    assert other.now_percent is None


def test_day_grid_narrow_range_hides_early_events() -> None:
    early = _event("early", datetime(2024, 3, 11, 3, 0), datetime(2024, 3, 11, 4, 0))
    grid = build_day(_state("day", datetime(2024, 3, 11), [early], narrow=True))

    assert grid.visible_start == 5 and grid.visible_end == 22
    assert len(grid.rows) == 18
    assert all(not r.events for r in grid.rows)


def test_week_grid_columns_and_today() -> None:
    grid = build_week(_state("week", datetime(2024, 3, 13)))

    assert [c.day for c in grid.columns][0] == datetime(2024, 3, 10)
    assert [c.day_number for c in grid.columns] == ["10", "11", "12", "13", "14", "15", "16"]
    assert [c.weekday_label for c in grid.columns][:2] == ["Su", "Mo"]
    assert [c.is_today for c in grid.columns] == [False, True, False, False, False, False, False]
    assert [c.is_weekend for c in grid.columns] == [True, False, False, False, False, False, True]
    assert grid.now_percent is not None


def test_week_grid_other_week_has_no_now_line() -> None:
    grid = build_week(_state("week", datetime(2024, 3, 20)))

    assert grid.now_percent is None
    assert not any(c.is_today for c in grid.columns)


def test_week_column_click_instant_is_first_visible_hour() -> None:
    wide = build_week(_state("week", datetime(2024, 3, 13)))
    narrow = build_week(_state("week", datetime(2024, 3, 13), narrow=True))

    assert wide.columns[2].click_instant == datetime(2024, 3, 12, 0, 0)
    # narrow viewports force the day view, but the week model still honours the range
    assert narrow.columns[2].click_instant == datetime(2024, 3, 12, 5, 0)


def test_week_grid_places_events_per_day() -> None:
    tue = _event("tue", datetime(2024, 3, 12, 9, 0), datetime(2024, 3, 12, 10, 0))
    grid = build_week(_state("week", datetime(2024, 3, 13), [tue]))

    placed = {
        (c.day.day, r.instant.hour): [p.event.id for p in r.events]
        for c in grid.columns for r in c.rows if r.events
    }
    assert placed == {(12, 9): ["tue"]}


def test_month_event_only_in_its_own_cell() -> None:
    event = _event("e", datetime(2024, 3, 5, 14, 0), datetime(2024, 3, 5, 15, 0))
    grid = build_month(_state("month", datetime(2024, 3, 15), [event]))

    assert len(grid.cells) == 42
    with_events = [c for c in grid.cells if c.entries]
    assert [c.day for c in with_events] == [datetime(2024, 3, 5)]
    assert with_events[0].entries[0].time_label == "14:00"


def test_month_cells_flag_outside_days_and_today() -> None:
    grid = build_month(_state("month", datetime(2024, 3, 15)))

    assert grid.cells[0].day == datetime(2024, 2, 25)
    assert not grid.cells[0].in_month
    assert grid.cells[5].in_month  # 1 March
    assert [c.day for c in grid.cells if c.is_today] == [datetime(2024, 3, 11)]
    assert len(grid.weeks()) == 6
    assert grid.weekday_labels[0] == "Su"


def test_month_entries_keep_caller_order() -> None:
    late = _event("late", datetime(2024, 3, 5, 18, 0), datetime(2024, 3, 5, 19, 0))
    early = _event("early", datetime(2024, 3, 5, 8, 0), datetime(2024, 3, 5, 9, 0))
    grid = build_month(_state("month", datetime(2024, 3, 15), [late, early]))

    cell = next(c for c in grid.cells if c.day == datetime(2024, 3, 5))
    assert [e.event.id for e in cell.entries] == ["late", "early"]


def test_year_view_is_valid_state_without_renderer() -> None:
    state = _state("month", datetime(2024, 3, 15))
    state.set_view(CalendarView.YEAR)
    assert render_view(state) is None
