import unittest

from eduplan.model import Course
from eduplan.stats import course_hours, summarize


def _course(cid: str, day: int, start: str, end: str, credits=None) -> Course:
    return Course(cid, f"Course {cid}", "Prof", "A101", start, end, day, credits=credits)


class TestStats(unittest.TestCase):
    def test_empty(self) -> None:
        s = summarize([])
        self.assertEqual(s.course_count, 0)
        self.assertEqual(s.total_credits, 0)
        self.assertEqual(s.total_hours, 0)
        self.assertEqual(s.active_days, 0)
        self.assertEqual(s.average_hours_per_day, 0.0)
        self.assertFalse(s.has_conflicts)

    def test_summary(self) -> None:
        courses = [
            _course("a", 1, "09:00", "10:30", credits=4),
            _course("b", 1, "14:00", "16:00"),
            _course("c", 3, "10:00", "12:00", credits=6),
        ]
        s = summarize(courses)
        self.assertEqual(s.course_count, 3)
        self.assertEqual(s.total_credits, 10)
        self.assertAlmostEqual(s.total_hours, 5.5)
        self.assertEqual(s.active_days, 2)
        self.assertAlmostEqual(s.average_hours_per_day, 2.75)
        self.assertFalse(s.has_conflicts)

    def test_broken_times_count_no_hours(self) -> None:
        self.assertEqual(course_hours(_course("a", 1, "9h", "10h")), 0.0)


if __name__ == "__main__":
    unittest.main()
