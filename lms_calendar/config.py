"""Application settings with environment overrides."""

import os


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Settings:
    """Calendar defaults, overridable through LMS_CALENDAR_* variables."""

    # Terminals narrower than this many columns get the compact layout
    NARROW_WIDTH: int = _env_int("LMS_CALENDAR_NARROW_WIDTH", 80)

    # Visible hour windows (inclusive) for wide and narrow screens
    WIDE_HOURS: tuple = (0, 23)
    NARROW_HOURS: tuple = (5, 22)

    # Terminal lines per hour row in the day/week grids
    HOUR_ROW_HEIGHT: int = _env_int("LMS_CALENDAR_HOUR_ROW_HEIGHT", 2)

    LOG_LEVEL: str = os.getenv("LMS_CALENDAR_LOG_LEVEL", "INFO").upper()
    LOG_FILE: str = os.getenv("LMS_CALENDAR_LOG_FILE", "")


settings = Settings()
