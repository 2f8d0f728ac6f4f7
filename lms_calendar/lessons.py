"""
Adapters from LMS lesson records to calendar events.

Lesson records come from the LMS REST API as dictionaries:

    {"_id": "...", "title": "...", "date": "2024-03-11T00:00:00.000Z",
     "startTime": "09:00", "endTime": "10:30",
     "course": "<course id>" | {"_id": "...", "name": "..."},
     "content": "..."}
"""

import json
import logging
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from lms_calendar.events import Event

# Colors assigned to courses, picked by course name length
COURSE_COLORS = ['blue', 'green', 'pink', 'purple', 'indigo']

UNKNOWN_COURSE = "Unknown Course"

# Length of a lesson pre-filled from an empty slot click
DEFAULT_LESSON_HOURS = 2


class LessonFormatError(ValueError):
    """A lesson record has an unparseable date or time."""


def _parse_day(raw: Any) -> date:
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    text = str(raw or "").strip()
    if len(text) < 10:
        raise LessonFormatError(f"Bad lesson date: {raw!r}")
    try:
        # Only the calendar day matters; API dates carry a UTC midnight suffix
        return date.fromisoformat(text[:10])
    except ValueError:
        raise LessonFormatError(f"Bad lesson date: {raw!r}") from None


def _parse_time(raw: Any) -> tuple:
    try:
        hours, minutes = str(raw).split(":")[:2]
        hours, minutes = int(hours), int(minutes)
    except (ValueError, TypeError):
        raise LessonFormatError(f"Bad lesson time: {raw!r}") from None
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise LessonFormatError(f"Lesson time out of range: {raw!r}")
    return hours, minutes


def course_name(lesson: Dict[str, Any], courses: Iterable[Dict[str, Any]] = ()) -> str:
    """Resolve the lesson's course name from an embedded object or a course list."""
    course = lesson.get("course")
    if isinstance(course, dict):
        return str(course.get("name") or UNKNOWN_COURSE)
    for candidate in courses:
        if candidate.get("_id") == course:
            return str(candidate.get("name") or UNKNOWN_COURSE)
    return UNKNOWN_COURSE


def course_color(name: str) -> str:
    return COURSE_COLORS[len(name) % len(COURSE_COLORS)]


def lesson_to_event(lesson: Dict[str, Any], courses: Iterable[Dict[str, Any]] = ()) -> Event:
    """Translate one lesson record into a calendar Event."""
    day = _parse_day(lesson.get("date"))
    start_h, start_m = _parse_time(lesson.get("startTime"))
    end_h, end_m = _parse_time(lesson.get("endTime"))

    start = datetime(day.year, day.month, day.day, start_h, start_m)
    end = datetime(day.year, day.month, day.day, end_h, end_m)

    return Event(
        id=str(lesson.get("_id", "")),
        start=start,
        end=end,
        name=str(lesson.get("title", "")),
        color=course_color(course_name(lesson, courses)),
        description=lesson.get("content"),
    )


def filter_by_title(lessons: Iterable[Dict[str, Any]], search: str) -> List[Dict[str, Any]]:
    """Case-insensitive title search; an empty search keeps everything."""
    lessons = list(lessons)
    if not search:
        return lessons
    needle = search.lower()
    return [lesson for lesson in lessons if needle in str(lesson.get("title", "")).lower()]


def lessons_to_events(
    lessons: Iterable[Dict[str, Any]],
    courses: Iterable[Dict[str, Any]] = (),
    search: str = "",
) -> List[Event]:
    """Convert lessons to events, skipping records that fail to parse."""
    courses = list(courses)
    events = []
    for lesson in filter_by_title(lessons, search):
        try:
            events.append(lesson_to_event(lesson, courses))
        except LessonFormatError as e:
            logging.error(f"Skipping lesson {lesson.get('_id', '?')}: {e}")
    return events


def load_lessons(path: str | Path) -> Dict[str, List[Dict[str, Any]]]:
    """
    Read lessons (and optionally courses) from a JSON file.

    Accepts either a bare list of lessons or an object with "lessons" and
    "courses" keys.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(raw, list):
        return {"lessons": raw, "courses": []}
    if not isinstance(raw, dict):
        raise LessonFormatError(f"Unexpected JSON root in {path}")
    lessons = raw.get("lessons", [])
    courses = raw.get("courses", [])
    if not isinstance(lessons, list) or not isinstance(courses, list):
        raise LessonFormatError(f"'lessons' and 'courses' must be lists in {path}")
    logging.info(f"Loaded {len(lessons)} lessons and {len(courses)} courses from {path}")
    return {"lessons": lessons, "courses": courses}


def empty_slot_form(instant: datetime, hours: int = DEFAULT_LESSON_HOURS) -> Dict[str, str]:
    """Pre-filled lesson form for an empty calendar slot."""
    end = instant + timedelta(hours=hours)
    return {
        "date": instant.strftime("%Y-%m-%d"),
        "startTime": instant.strftime("%H:%M"),
        "endTime": end.strftime("%H:%M"),
    }
