"""Localized weekday and month names for the calendar."""

import calendar
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Locale:
    """Names used by the calendar. Weekdays are listed Sunday first."""

    code: str
    weekday_names: Tuple[str, ...]
    weekday_short: Tuple[str, ...]
    month_names: Tuple[str, ...]

    def weekday_name(self, weekday: int) -> str:
        """Full name for a Python weekday (Monday == 0)."""
        return self.weekday_names[(weekday + 1) % 7]

    def weekday_abbr(self, weekday: int) -> str:
        """Abbreviated name for a Python weekday (Monday == 0)."""
        return self.weekday_short[(weekday + 1) % 7]

    def month_name(self, month: int) -> str:
        return self.month_names[month - 1]

    @classmethod
    def from_system(cls, code: str = "system") -> "Locale":
        """Build a locale from the names the C library currently provides."""
        # calendar.day_name is Monday first; rotate to Sunday first
        names = tuple(calendar.day_name[(i - 1) % 7] for i in range(7))
        short = tuple(name[:2] for name in names)
        months = tuple(calendar.month_name[m] for m in range(1, 13))
        return cls(code=code, weekday_names=names, weekday_short=short, month_names=months)


EN_US = Locale(
    code="en-US",
    weekday_names=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    weekday_short=("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
    month_names=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
)

PT_BR = Locale(
    code="pt-BR",
    weekday_names=("domingo", "segunda-feira", "terça-feira", "quarta-feira", "quinta-feira", "sexta-feira", "sábado"),
    weekday_short=("do", "2ª", "3ª", "4ª", "5ª", "6ª", "sá"),
    month_names=(
        "janeiro", "fevereiro", "março", "abril", "maio", "junho",
        "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
    ),
)

LOCALES = {
    EN_US.code: EN_US,
    PT_BR.code: PT_BR,
}
