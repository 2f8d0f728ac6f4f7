"""Calendar event model and color palette."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class CalendarView(str, Enum):
    """Rendering mode of the calendar. YEAR is accepted but never drawn."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


# Palette tag -> color used by the Textual renderers
EVENT_COLORS = {
    'default': '#64748B',
    'blue':    '#3B82F6',
    'green':   '#22C55E',
    'pink':    '#EC4899',
    'purple':  '#A855F7',
    'indigo':  '#6366F1',
}


@dataclass(frozen=True)
class Event:
    """A single calendar item. Timestamps are naive local wall-clock."""

    id: str
    start: datetime
    end: datetime
    name: str
    color: str = 'default'
    description: str | None = None
    is_active: bool | None = None
    is_completed: bool | None = None
    is_cancelled: bool | None = None
    is_upcoming: bool | None = None

    @property
    def color_tag(self) -> str:
        """Palette tag safe for styling (unknown tags render as default)."""
        return self.color if self.color in EVENT_COLORS else 'default'

    @property
    def duration_minutes(self) -> int:
        # Whole minutes, truncated toward zero
        return int((self.end - self.start).total_seconds() / 60)


def parse_view(value: "CalendarView | str") -> CalendarView:
    """Coerce a string to a CalendarView, raising ValueError if unknown."""
    if isinstance(value, CalendarView):
        return value
    try:
        return CalendarView(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown calendar view: {value!r}") from None
