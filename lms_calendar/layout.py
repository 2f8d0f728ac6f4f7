"""Event placement math for the hour grids and the month grid."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from lms_calendar.events import Event
from lms_calendar.gridmath import same_day, same_hour


@dataclass(frozen=True)
class CellOffset:
    top_percent: float     # from the top of the start-hour cell
    height_percent: float  # may exceed 100 for events longer than an hour


def events_in_hour(events: Iterable[Event], hour: datetime) -> List[Event]:
    """Events that start within ``hour`` (same date, same hour of day)."""
    return [event for event in events if same_hour(event.start, hour)]


def events_on_day(events: Iterable[Event], day: datetime) -> List[Event]:
    """Events starting on ``day``, ignoring the time of day."""
    return [event for event in events if same_day(event.start, day)]


def cell_offset(event: Event) -> CellOffset:
    """
    Position of an event inside its start-hour cell.

    A 10:15-10:45 event sits at 25% with a height of 50%. Longer events get
    heights above 100% and spill over the following rows; events ending
    before they start get a negative height.
    """
    top = event.start.minute / 60 * 100
    height = event.duration_minutes / 60 * 100
    return CellOffset(top_percent=top, height_percent=height)


def now_line_position(visible_start: int, visible_end: int, now: datetime) -> Optional[float]:
    """Vertical position of the current-time line as a percent of the grid."""
    if not visible_start <= now.hour <= visible_end:
        return None
    visible_hours = visible_end - visible_start + 1
    return ((now.hour - visible_start) + now.minute / 60) / visible_hours * 100


def to_rows(percent: float, rows: int) -> int:
    """Convert a percentage of ``rows`` terminal lines to a whole line count."""
    return int(round(percent / 100 * rows))
