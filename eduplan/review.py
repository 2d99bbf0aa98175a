"""
Review stage for extracted courses.

Drafts coming from an extractor are copied into a ReviewBatch where they can
be corrected or dropped before they are committed to a session.
"""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, Iterable

from eduplan.model import Course, CourseDraft
from eduplan.session import ScheduleSession


_DRAFT_FIELDS = {f.name for f in fields(CourseDraft)}


class ReviewBatch:
    def __init__(self, drafts: Iterable[CourseDraft]) -> None:
        self._drafts: list[CourseDraft] = [replace(d) for d in drafts]

    @property
    def drafts(self) -> list[CourseDraft]:
        return list(self._drafts)

    def __len__(self) -> int:
        return len(self._drafts)

    def edit(self, index: int, **changes: Any) -> CourseDraft:
        """
        Change fields of one draft. Raises ValueError for unknown fields
        and IndexError for a bad index.
        """
        unknown = set(changes) - _DRAFT_FIELDS
        if unknown:
            raise ValueError(f"Unknown course field(s): {', '.join(sorted(unknown))}")
        updated = replace(self._drafts[index], **changes)
        self._drafts[index] = updated
        return updated

    def remove(self, index: int) -> CourseDraft:
        return self._drafts.pop(index)

    def confirm(self, session: ScheduleSession) -> list[Course]:
        added = session.add_courses(self._drafts)
        self._drafts = []
        return added

    def cancel(self) -> None:
        self._drafts = []
