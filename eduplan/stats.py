"""
Dashboard figures: course count, credits, weekly hours, active days.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from eduplan.conflicts import has_conflicts
from eduplan.model import Course, time_to_minutes


@dataclass(frozen=True)
class ScheduleSummary:
    course_count: int
    total_credits: int
    total_hours: float
    active_days: int
    average_hours_per_day: float
    has_conflicts: bool


def course_hours(course: Course) -> float:
    """
    Duration of one session in hours (minute precision).
    Returns 0.0 for unparseable times.
    """
    try:
        minutes = time_to_minutes(course.end_time) - time_to_minutes(course.start_time)
    except ValueError:
        return 0.0
    return minutes / 60


def summarize(courses: Sequence[Course]) -> ScheduleSummary:
    total_hours = sum(course_hours(c) for c in courses)
    active_days = len({c.day_of_week for c in courses})

    return ScheduleSummary(
        course_count=len(courses),
        total_credits=sum(c.credit_value for c in courses),
        total_hours=total_hours,
        active_days=active_days,
        average_hours_per_day=total_hours / active_days if active_days else 0.0,
        has_conflicts=has_conflicts(courses),
    )
