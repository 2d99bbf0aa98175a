"""
JSON snapshot of the course list.

The snapshot is a pretty-printed list of course records with the camelCase
keys of the web front end, e.g.:

    [
      {
        "id": "1712345678901",
        "title": "Algorithmique",
        "startTime": "09:00",
        ...
      }
    ]

It serves two purposes:
- the "Exporter en JSON" download (export_snapshot)
- the course store of the terminal front end (load_courses / save_courses)

A snapshot read back with load_snapshot is equal to the exported list,
field for field.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Sequence

from eduplan.model import Course, course_from_dict, course_to_dict


JSON_MIME_TYPE = "application/json"
JSON_FILENAME = "emploi-du-temps.json"


def _default_courses_path() -> Path:
    """
    Return the default path of courses.json inside the package.

    Using a function instead of a constant makes testing easier,
    because tests can override the path.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "courses.json"


def export_snapshot(courses: Iterable[Course]) -> str:
    """
    Serialize courses to an indented JSON document.
    """
    payload = [course_to_dict(c) for c in courses]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def load_snapshot(text: str) -> list[Course]:
    """
    Parse a snapshot document back into Course objects.

    Raises ValueError if the text is not JSON, is not a list,
    or contains an invalid course record.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("Snapshot must be a JSON list of courses")

    courses: list[Course] = []
    for i, record in enumerate(data):
        try:
            courses.append(course_from_dict(record))
        except ValueError as e:
            raise ValueError(f"Course #{i + 1}: {e}") from e
    return courses


def load_courses(path: str | Path | None = None) -> list[Course]:
    """
    Load the stored course list.

    Returns an empty list if the file does not exist yet. A corrupted file
    raises ValueError instead of being silently replaced on the next save.
    """
    # Use custom path if provided (mainly for tests),
    # otherwise fall back to the default package location
    courses_path = Path(path) if path is not None else _default_courses_path()

    # First run: nothing stored yet
    if not courses_path.exists():
        return []

    return load_snapshot(courses_path.read_text(encoding="utf-8"))


def save_courses(courses: Sequence[Course], path: str | Path | None = None) -> Path:
    """
    Write the course list as a snapshot. Creates parent directories if needed.
    """
    courses_path = Path(path) if path is not None else _default_courses_path()
    courses_path.parent.mkdir(parents=True, exist_ok=True)

    courses_path.write_text(export_snapshot(courses) + "\n", encoding="utf-8")
    return courses_path
