from datetime import datetime

from lms_calendar.events import Event
from lms_calendar.layout import (
    cell_offset,
    events_in_hour,
    events_on_day,
    now_line_position,
    to_rows,
)


def _event(event_id: str, start: datetime, end: datetime, **kwargs) -> Event:
    return Event(id=event_id, start=start, end=end, name=f"Event {event_id}", **kwargs)


def test_cell_offset_inside_one_hour() -> None:
    offset = cell_offset(_event("a", datetime(2024, 3, 11, 10, 15), datetime(2024, 3, 11, 10, 45)))

    assert offset.top_percent == 25
    assert offset.height_percent == 50


def test_cell_offset_long_event_overflows() -> None:
    offset = cell_offset(_event("a", datetime(2024, 3, 11, 9, 30), datetime(2024, 3, 11, 11, 0)))

    assert offset.top_percent == 50
    assert offset.height_percent == 150


def test_cell_offset_does_not_validate_reversed_events() -> None:
    offset = cell_offset(_event("a", datetime(2024, 3, 11, 10, 0), datetime(2024, 3, 11, 9, 30)))
    assert offset.height_percent == -50


def test_events_in_hour_matches_start_hour_only() -> None:
    long_event = _event("long", datetime(2024, 3, 11, 10, 15), datetime(2024, 3, 11, 13, 0))
    other_day = _event("other", datetime(2024, 3, 12, 10, 0), datetime(2024, 3, 12, 11, 0))
    events = [long_event, other_day]

    assert events_in_hour(events, datetime(2024, 3, 11, 10, 0)) == [long_event]
    # Spanning events are not repeated in later hours
    assert events_in_hour(events, datetime(2024, 3, 11, 11, 0)) == []
    assert events_in_hour(events, datetime(2024, 3, 12, 10, 0)) == [other_day]


def test_events_on_day_keeps_caller_order() -> None:
    late = _event("late", datetime(2024, 3, 5, 18, 0), datetime(2024, 3, 5, 19, 0))
    early = _event("early", datetime(2024, 3, 5, 8, 0), datetime(2024, 3, 5, 9, 0))
    elsewhere = _event("x", datetime(2024, 3, 6, 8, 0), datetime(2024, 3, 6, 9, 0))

    assert events_on_day([late, elsewhere, early], datetime(2024, 3, 5)) == [late, early]


def test_now_line_hidden_outside_visible_range() -> None:
    assert now_line_position(5, 22, datetime(2024, 3, 11, 3, 0)) is None
    assert now_line_position(5, 22, datetime(2024, 3, 11, 23, 10)) is None


def test_now_line_inside_visible_range() -> None:
    position = now_line_position(5, 22, datetime(2024, 3, 11, 14, 30))

    assert position is not None
    assert 0 < position < 100
    assert abs(position - (9.5 / 18 * 100)) < 1e-9


def test_now_line_at_range_start_is_zero() -> None:
    assert now_line_position(0, 23, datetime(2024, 3, 11, 0, 0)) == 0


def test_to_rows_rounds_percentages() -> None:
    assert to_rows(50, 2) == 1
    assert to_rows(150, 2) == 3
    assert to_rows(25, 4) == 1
