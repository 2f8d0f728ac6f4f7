import json
from datetime import datetime

import pytest

from lms_calendar.lessons import (
    LessonFormatError,
    course_color,
    empty_slot_form,
    filter_by_title,
    lesson_to_event,
    lessons_to_events,
    load_lessons,
)

COURSES = [
    {"_id": "c-algebra", "name": "Linear Algebra"},
    {"_id": "c-python", "name": "Intro to Python"},
]


def _lesson(**overrides) -> dict:
    lesson = {
        "_id": "l-1",
        "title": "Vectors",
        "date": "2024-03-11T00:00:00.000Z",
        "startTime": "09:15",
        "endTime": "10:45",
        "course": "c-algebra",
        "content": "Vector spaces",
    }
    lesson.update(overrides)
    return lesson


def test_lesson_to_event_builds_local_instants() -> None:
    event = lesson_to_event(_lesson(), COURSES)

    assert event.id == "l-1"
    assert event.name == "Vectors"
    assert event.start == datetime(2024, 3, 11, 9, 15)
    assert event.end == datetime(2024, 3, 11, 10, 45)
    assert event.description == "Vector spaces"


def test_course_color_comes_from_name_length() -> None:
    # "Linear Algebra" has 14 characters -> index 4
    assert lesson_to_event(_lesson(), COURSES).color == "indigo"
    # embedded course object, "Intro to Python" has 15 characters -> index 0
    embedded = _lesson(course={"_id": "c-python", "name": "Intro to Python"})
    assert lesson_to_event(embedded).color == "blue"
    assert course_color("World History") == "purple"


def test_unknown_course_gets_a_stable_color() -> None:
    event = lesson_to_event(_lesson(course="missing"), COURSES)
    assert event.color == course_color("Unknown Course")


@pytest.mark.parametrize("field, value", [
    ("date", "not a date"),
    ("date", None),
    ("startTime", "9am"),
    ("endTime", "25:00"),
])
def test_bad_lessons_raise(field: str, value) -> None:
    with pytest.raises(LessonFormatError):
        lesson_to_event(_lesson(**{field: value}))


def test_lessons_to_events_skips_bad_records() -> None:
    lessons = [_lesson(_id="ok"), _lesson(_id="bad", startTime="xx")]
    assert [e.id for e in lessons_to_events(lessons, COURSES)] == ["ok"]


def test_filter_by_title_is_case_insensitive() -> None:
    lessons = [_lesson(title="Vectors"), _lesson(title="Matrices"), _lesson(title="vector norms")]

    assert [l["title"] for l in filter_by_title(lessons, "VECTOR")] == ["Vectors", "vector norms"]
    assert len(filter_by_title(lessons, "")) == 3


def test_empty_slot_form_defaults_to_two_hours() -> None:
    assert empty_slot_form(datetime(2024, 3, 11, 9, 0)) == {
        "date": "2024-03-11",
        "startTime": "09:00",
        "endTime": "11:00",
    }
    # end time wraps past midnight
    assert empty_slot_form(datetime(2024, 3, 11, 23, 0))["endTime"] == "01:00"


def test_load_lessons_accepts_list_and_object(tmp_path) -> None:
    bare = tmp_path / "bare.json"
    bare.write_text(json.dumps([_lesson()]), encoding="utf-8")
    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(json.dumps({"lessons": [_lesson()], "courses": COURSES}), encoding="utf-8")

    assert load_lessons(bare) == {"lessons": [_lesson()], "courses": []}
    assert load_lessons(wrapped)["courses"] == COURSES


def test_load_lessons_rejects_other_shapes(tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"lessons": "nope"}), encoding="utf-8")

    with pytest.raises(LessonFormatError):
        load_lessons(path)
