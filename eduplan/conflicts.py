"""
Conflict detection.

Given the course list, detect overlaps on the same weekday.

By default times are truncated to the hour, and two courses conflict when
either one starts inside the other's hour range:
    other_start <= start < other_end  OR  start <= other_start < end
A 10:00-10:30 course therefore conflicts with anything starting at 10:00.

With granularity="minute" exact minutes are compared:
    start < other_end AND end > other_start
Touching endpoints (end == other_start) are not a conflict there.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from eduplan.model import Course, parse_time


GRANULARITIES = ("hour", "minute")


def _bounds(course: Course, granularity: str) -> tuple[int, int]:
    """
    Return (start, end) of a course in hours or minutes since midnight.
    Raises ValueError for unparseable times.
    """
    sh, sm = parse_time(course.start_time)
    eh, em = parse_time(course.end_time)
    if granularity == "hour":
        return sh, eh
    return sh * 60 + sm, eh * 60 + em


def _overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    return a_start < b_end and a_end > b_start


def _starts_inside(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    # Holds for same-hour courses like [10, 10) too
    return b_start <= a_start < b_end or a_start <= b_start < a_end


def find_conflicts(courses: Sequence[Course], granularity: str = "hour") -> set[tuple[int, int]]:
    """
    Find overlapping course pairs as index pairs (i, j) with i < j.
    Overlap only if same day_of_week AND time intervals overlap.
    """
    if granularity not in GRANULARITIES:
        raise ValueError(f"Unknown granularity: {granularity!r}")

    # Pre-parse times; courses with broken times are skipped
    parsed: list[tuple[int, int, int, int]] = []
    for idx, course in enumerate(courses):
        try:
            start, end = _bounds(course, granularity)
        except ValueError:
            continue
        parsed.append((idx, course.day_of_week, start, end))

    overlaps = _starts_inside if granularity == "hour" else _overlaps
    conflicts: set[tuple[int, int]] = set()

    # O(n^2) is fine for a semester's worth of courses
    for a in range(len(parsed)):
        i, d1, s1, e1 = parsed[a]
        for b in range(a + 1, len(parsed)):
            j, d2, s2, e2 = parsed[b]
            if d1 != d2:
                continue
            if overlaps(s1, e1, s2, e2):
                conflicts.add((i, j))

    return conflicts


def conflicting_pairs(
    courses: Sequence[Course], granularity: str = "hour"
) -> Iterator[tuple[int, int, Course, Course]]:
    """
    Yield (i, j, course_i, course_j) for every conflict, in index order.
    """
    for i, j in sorted(find_conflicts(courses, granularity)):
        yield i, j, courses[i], courses[j]


def has_conflicts(courses: Sequence[Course]) -> bool:
    return bool(find_conflicts(courses))
