import unittest

from eduplan.model import (
    Course,
    CourseDraft,
    Suggestion,
    course_from_dict,
    course_to_dict,
    draft_from_dict,
    parse_time,
    suggestion_to_dict,
    time_to_minutes,
)


class TestParseTime(unittest.TestCase):
    def test_valid(self) -> None:
        self.assertEqual(parse_time("09:05"), (9, 5))
        self.assertEqual(parse_time(" 23:59 "), (23, 59))
        self.assertEqual(time_to_minutes("10:30"), 630)

    def test_invalid(self) -> None:
        for bad in ("9h", "24:00", "10:60", "", "10:00:00", "ab:cd"):
            with self.assertRaises(ValueError, msg=bad):
                parse_time(bad)


class TestCourseRecords(unittest.TestCase):
    def test_from_dict_defaults(self) -> None:
        c = course_from_dict(
            {
                "id": "7",
                "title": "Réseaux",
                "professor": "Dr. Petit",
                "location": "B12",
                "startTime": "13:00",
                "endTime": "15:00",
                "dayOfWeek": 4,
            }
        )
        self.assertEqual(c.day_of_week, 4)
        self.assertIsNone(c.credits)
        self.assertIsNone(c.description)
        self.assertEqual(c.credit_value, 0)
        self.assertEqual(c.color, "#3b82f6")

    def test_from_dict_accepts_numeric_strings(self) -> None:
        c = course_from_dict(
            {
                "id": 7,
                "title": "x",
                "professor": "y",
                "location": "z",
                "startTime": "08:00",
                "endTime": "09:00",
                "dayOfWeek": "1",
                "credits": "3",
            }
        )
        self.assertEqual(c.id, "7")
        self.assertEqual(c.day_of_week, 1)
        self.assertEqual(c.credits, 3)

    def test_from_dict_rejects_bad_records(self) -> None:
        base = {
            "id": "1",
            "title": "x",
            "professor": "y",
            "location": "z",
            "startTime": "08:00",
            "endTime": "09:00",
            "dayOfWeek": 1,
        }
        for key in ("id", "title", "startTime", "dayOfWeek"):
            record = dict(base)
            del record[key]
            with self.assertRaises(ValueError, msg=key):
                course_from_dict(record)

        with self.assertRaises(ValueError):
            course_from_dict(dict(base, credits="many"))
        with self.assertRaises(ValueError):
            course_from_dict(dict(base, dayOfWeek=True))
        with self.assertRaises(ValueError):
            course_from_dict(["not", "a", "dict"])

    def test_to_dict_omits_absent_fields(self) -> None:
        c = Course("1", "x", "y", "z", "08:00", "09:00", 1)
        self.assertEqual(
            course_to_dict(c),
            {
                "id": "1",
                "title": "x",
                "professor": "y",
                "location": "z",
                "startTime": "08:00",
                "endTime": "09:00",
                "dayOfWeek": 1,
                "color": "#3b82f6",
            },
        )

    def test_draft_to_course(self) -> None:
        draft = draft_from_dict(
            {
                "title": "x",
                "professor": "y",
                "location": "z",
                "startTime": "08:00",
                "endTime": "09:00",
                "dayOfWeek": 1,
                "credits": 2,
            }
        )
        self.assertIsInstance(draft, CourseDraft)
        c = draft.to_course("abc")
        self.assertEqual(c.id, "abc")
        self.assertEqual(c.credits, 2)
        self.assertEqual(c.start_time, "08:00")

    def test_suggestion_to_dict(self) -> None:
        s = Suggestion(id="conflict-0-1", type="conflict", message="m", priority="high", courses=["a", "b"])
        self.assertEqual(suggestion_to_dict(s)["courses"], ["a", "b"])
        s2 = Suggestion(id="friday-free", type="optimization", message="m", priority="low")
        self.assertNotIn("courses", suggestion_to_dict(s2))


if __name__ == "__main__":
    unittest.main()
