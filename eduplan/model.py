"""
Central data model definitions used across the project.

This module defines the canonical structure of Course and Suggestion objects so that:
- all modules share the same field names
- the JSON snapshot keeps the camelCase keys of the web front end
- time parsing rules live in exactly one place
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Literal, Optional, Tuple


SuggestionType = Literal["conflict", "recommendation", "optimization"]
Priority = Literal["low", "medium", "high"]


# ---------------------------------------------------------------------------
# Day tables (0 = Sunday, like JavaScript's Date.getDay())
# ---------------------------------------------------------------------------

DAY_NAMES = ["Dimanche", "Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi"]
DAY_CODES = ["SU", "MO", "TU", "WE", "TH", "FR", "SA"]

# Days rendered by the weekly grid (Monday to Friday)
WEEKDAYS = [1, 2, 3, 4, 5]

COLORS = {
    "Bleu": "#3b82f6",
    "Vert": "#10b981",
    "Violet": "#8b5cf6",
    "Orange": "#f59e0b",
    "Rouge": "#ef4444",
    "Rose": "#ec4899",
    "Cyan": "#06b6d4",
}
DEFAULT_COLOR = COLORS["Bleu"]


@dataclass(frozen=True)
class Course:
    """
    One weekly recurring class session.

    Instances are immutable once added to a schedule; edits happen on
    CourseDraft objects before the host assigns an id.
    """

    id: str
    title: str
    professor: str
    location: str
    start_time: str
    end_time: str
    day_of_week: int
    color: str = DEFAULT_COLOR
    description: Optional[str] = None
    credits: Optional[int] = None

    @property
    def credit_value(self) -> int:
        return self.credits or 0


@dataclass
class CourseDraft:
    """
    A course-like record without an id (form input, extractor output).
    """

    title: str
    professor: str
    location: str
    start_time: str
    end_time: str
    day_of_week: int
    color: str = DEFAULT_COLOR
    description: Optional[str] = None
    credits: Optional[int] = None

    def to_course(self, course_id: str) -> Course:
        return Course(id=course_id, **{f.name: getattr(self, f.name) for f in fields(self)})


@dataclass(frozen=True)
class Suggestion:
    """
    An advisory record produced by the suggestion engine.

    `courses` holds referenced course ids only (lookup, never ownership).
    """

    id: str
    type: SuggestionType
    message: str
    priority: Priority
    courses: Optional[List[str]] = None


# ---------------------------------------------------------------------------
# Time helpers
# ---------------------------------------------------------------------------


def parse_time(hhmm: str) -> Tuple[int, int]:
    """
    Convert 'HH:MM' to (hour, minute).
    Raises ValueError for invalid formats.
    """
    parts = str(hhmm).strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time format: {hhmm!r}")
    h = int(parts[0])
    m = int(parts[1])
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"Invalid time value: {hhmm!r}")
    return h, m


def time_to_minutes(hhmm: str) -> int:
    h, m = parse_time(hhmm)
    return h * 60 + m


# ---------------------------------------------------------------------------
# dict <-> dataclass (camelCase keys, as exported to JSON)
# ---------------------------------------------------------------------------

# python attribute -> JSON key
_KEYS = {
    "id": "id",
    "title": "title",
    "professor": "professor",
    "location": "location",
    "start_time": "startTime",
    "end_time": "endTime",
    "day_of_week": "dayOfWeek",
    "color": "color",
    "description": "description",
    "credits": "credits",
}
_REQUIRED = ("title", "professor", "location", "start_time", "end_time", "day_of_week")


def course_to_dict(course: Course) -> Dict[str, Any]:
    """
    Serialize a course with camelCase keys. Absent optional fields are omitted.
    """
    out: Dict[str, Any] = {}
    for f in fields(course):
        value = getattr(course, f.name)
        if value is None:
            continue
        out[_KEYS[f.name]] = value
    return out


def _optional_int(value: Any, name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Invalid {name}: {value!r}")
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Invalid {name}: {value!r}") from None


def _draft_kwargs(data: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"Course record must be an object, got {type(data).__name__}")

    kwargs: Dict[str, Any] = {}
    for attr in _REQUIRED:
        key = _KEYS[attr]
        if data.get(key) is None:
            raise ValueError(f"Missing field: {key}")
        kwargs[attr] = data[key]

    kwargs["day_of_week"] = _optional_int(data["dayOfWeek"], "dayOfWeek")
    for attr in ("title", "professor", "location", "start_time", "end_time"):
        kwargs[attr] = str(kwargs[attr])

    color = data.get("color")
    kwargs["color"] = DEFAULT_COLOR if color is None else str(color)
    description = data.get("description")
    kwargs["description"] = None if description is None else str(description)
    kwargs["credits"] = _optional_int(data.get("credits"), "credits")
    return kwargs


def draft_from_dict(data: Dict[str, Any]) -> CourseDraft:
    return CourseDraft(**_draft_kwargs(data))


def course_from_dict(data: Dict[str, Any]) -> Course:
    """
    Build a Course from a camelCase record.
    Raises ValueError for missing required fields or non-integer numbers.
    """
    kwargs = _draft_kwargs(data)
    course_id = data.get("id")
    if course_id is None or str(course_id).strip() == "":
        raise ValueError("Missing field: id")
    return Course(id=str(course_id), **kwargs)


def suggestion_to_dict(suggestion: Suggestion) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "id": suggestion.id,
        "type": suggestion.type,
        "message": suggestion.message,
        "priority": suggestion.priority,
    }
    if suggestion.courses is not None:
        out["courses"] = list(suggestion.courses)
    return out
