"""
Unit tests for conflict detection.

Definition used here:
- A conflict exists if two courses overlap in time on the same weekday.
- By default times are truncated to the hour, and a conflict means one
  course starts inside the other's hour range (same-hour courses included).
- With minute granularity, touching endpoints (end == start) are NOT a conflict.
"""

import unittest

from eduplan.conflicts import conflicting_pairs, find_conflicts, has_conflicts
from eduplan.model import Course


def _course(cid: str, day: int, start: str, end: str) -> Course:
    return Course(
        id=cid,
        title=f"Course {cid}",
        professor="Prof",
        location="A101",
        start_time=start,
        end_time=end,
        day_of_week=day,
    )


class TestConflicts(unittest.TestCase):
    def test_empty_list(self) -> None:
        self.assertEqual(find_conflicts([]), set())
        self.assertFalse(has_conflicts([]))

    def test_overlap_same_day(self) -> None:
        courses = [_course("a", 1, "09:00", "11:00"), _course("b", 1, "10:00", "12:00")]
        self.assertEqual(find_conflicts(courses), {(0, 1)})
        self.assertTrue(has_conflicts(courses))

    def test_no_overlap_touching_end(self) -> None:
        courses = [_course("a", 1, "10:00", "11:00"), _course("b", 1, "11:00", "12:00")]
        self.assertEqual(find_conflicts(courses), set())

    def test_different_day_no_conflict(self) -> None:
        courses = [_course("a", 1, "10:00", "12:00"), _course("b", 2, "10:00", "12:00")]
        self.assertEqual(find_conflicts(courses), set())

    def test_pairs_are_canonical(self) -> None:
        courses = [
            _course("a", 2, "14:00", "16:00"),
            _course("b", 1, "08:00", "09:00"),
            _course("c", 2, "15:00", "17:00"),
            _course("d", 2, "13:00", "15:00"),
        ]
        confs = find_conflicts(courses)
        self.assertEqual(confs, {(0, 2), (0, 3)})
        for i, j in confs:
            self.assertLess(i, j)

    def test_order_of_input_does_not_change_pairs(self) -> None:
        a = _course("a", 3, "09:00", "11:00")
        b = _course("b", 3, "10:00", "12:00")
        self.assertEqual(find_conflicts([a, b]), {(0, 1)})
        self.assertEqual(find_conflicts([b, a]), {(0, 1)})

    def test_hour_granularity_drops_minutes(self) -> None:
        # 10:15 truncates to 10, which is where the first course "ends"
        courses = [_course("a", 1, "09:00", "10:30"), _course("b", 1, "10:15", "11:00")]
        self.assertEqual(find_conflicts(courses), set())
        self.assertEqual(find_conflicts(courses, granularity="minute"), {(0, 1)})

    def test_same_hour_course_conflicts(self) -> None:
        # 10:00-10:30 truncates to [10, 10) but still starts inside 10:00-12:00
        courses = [_course("a", 1, "10:00", "10:30"), _course("b", 1, "10:00", "12:00")]
        self.assertEqual(find_conflicts(courses), {(0, 1)})
        self.assertEqual(find_conflicts(list(reversed(courses))), {(0, 1)})

    def test_same_hour_back_to_back_is_flagged(self) -> None:
        # both start in hour 10: flagged at hour granularity, not at minute granularity
        courses = [_course("a", 1, "10:00", "10:30"), _course("b", 1, "10:30", "11:00")]
        self.assertEqual(find_conflicts(courses), {(0, 1)})
        self.assertEqual(find_conflicts(courses, granularity="minute"), set())

    def test_minute_granularity_touching_end(self) -> None:
        courses = [_course("a", 1, "09:00", "10:30"), _course("b", 1, "10:30", "11:00")]
        self.assertEqual(find_conflicts(courses, granularity="minute"), set())

    def test_unknown_granularity(self) -> None:
        with self.assertRaises(ValueError):
            find_conflicts([], granularity="second")

    def test_malformed_time_is_skipped(self) -> None:
        courses = [
            _course("a", 1, "9h", "11h"),
            _course("b", 1, "09:00", "11:00"),
            _course("c", 1, "10:00", "12:00"),
        ]
        self.assertEqual(find_conflicts(courses), {(1, 2)})

    def test_conflicting_pairs_yields_courses(self) -> None:
        a = _course("a", 4, "09:00", "11:00")
        b = _course("b", 4, "10:00", "12:00")
        pairs = list(conflicting_pairs([a, b]))
        self.assertEqual(pairs, [(0, 1, a, b)])


if __name__ == "__main__":
    unittest.main()
