"""
Per-session schedule state.

A ScheduleSession owns the authoritative course list of one user session and
the result of the last analysis. The analysis and export functions stay pure;
the session only hands them a copy of its list.

All reads and writes go through one lock, so a session can be shared by
request handlers running in different threads.
"""

from __future__ import annotations

import threading
import uuid
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence

from eduplan.conflicts import find_conflicts
from eduplan.export_ics import export_calendar
from eduplan.model import Course, CourseDraft, Suggestion
from eduplan.stats import ScheduleSummary, summarize
from eduplan.storage import export_snapshot
from eduplan.suggestions import DEFAULT_SUGGESTIONS, generate_suggestions


def new_course_id() -> str:
    return uuid.uuid4().hex


class ScheduleSession:
    def __init__(
        self,
        courses: Optional[Iterable[Course]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._courses: list[Course] = list(courses or [])
        self._suggestions: list[Suggestion] = list(DEFAULT_SUGGESTIONS)
        self._id_factory = id_factory or new_course_id
        self._used_ids: set[str] = {c.id for c in self._courses}

    @property
    def courses(self) -> list[Course]:
        with self._lock:
            return list(self._courses)

    @property
    def suggestions(self) -> list[Suggestion]:
        with self._lock:
            return list(self._suggestions)

    def _next_id(self) -> str:
        # ids are never reused, even after the course was removed
        while True:
            course_id = self._id_factory()
            if course_id not in self._used_ids:
                self._used_ids.add(course_id)
                return course_id

    def add_course(self, draft: CourseDraft) -> Course:
        return self.add_courses([draft])[0]

    def add_courses(self, drafts: Sequence[CourseDraft]) -> list[Course]:
        """
        Assign ids to drafts and append them to the list (in order).
        """
        with self._lock:
            added = [d.to_course(self._next_id()) for d in drafts]
            self._courses.extend(added)
        return added

    def remove_course(self, course_id: str) -> bool:
        with self._lock:
            kept = [c for c in self._courses if c.id != course_id]
            removed = len(kept) != len(self._courses)
            self._courses = kept
        return removed

    def get_course(self, course_id: str) -> Optional[Course]:
        with self._lock:
            for c in self._courses:
                if c.id == course_id:
                    return c
        return None

    def analyze(self, fallback: Optional[Sequence[Suggestion]] = None) -> list[Suggestion]:
        """
        Recompute suggestions from the current list; replaces the previous result.
        """
        courses = self.courses
        result = generate_suggestions(courses, fallback=fallback)
        with self._lock:
            self._suggestions = list(result)
        return result

    def conflicts(self, granularity: str = "hour") -> set[tuple[int, int]]:
        return find_conflicts(self.courses, granularity)

    def summary(self) -> ScheduleSummary:
        return summarize(self.courses)

    def export_calendar(self, now: Optional[datetime] = None) -> str:
        return export_calendar(self.courses, now=now)

    def export_snapshot(self) -> str:
        return export_snapshot(self.courses)
