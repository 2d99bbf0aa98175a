"""
Unit tests for the JSON snapshot.

Snapshot contract:
- pretty-printed list of camelCase course records
- load_snapshot(export_snapshot(x)) == x
- missing store file -> empty list
"""

import json
import tempfile
import unittest
from pathlib import Path

from eduplan.model import Course
from eduplan.storage import export_snapshot, load_courses, load_snapshot, save_courses


COURSES = [
    Course(
        id="1712345678901",
        title="Analyse de Données",
        professor="Prof. Lefebvre",
        location="Salle C105",
        start_time="09:00",
        end_time="11:00",
        day_of_week=2,
        color="#3b82f6",
        description="Statistiques et visualisation",
        credits=4,
    ),
    Course(
        id="1712345678902",
        title="Gestion de Projet",
        professor="Mme. Moreau",
        location="Salle D202",
        start_time="10:00",
        end_time="12:00",
        day_of_week=4,
        color="#10b981",
    ),
]


class TestSnapshot(unittest.TestCase):
    def test_empty_snapshot(self) -> None:
        self.assertEqual(export_snapshot([]), "[]")
        self.assertEqual(load_snapshot("[]"), [])

    def test_roundtrip(self) -> None:
        self.assertEqual(load_snapshot(export_snapshot(COURSES)), COURSES)

    def test_roundtrip_keeps_empty_color(self) -> None:
        blank = Course(
            id="1712345678903",
            title="Anglais",
            professor="Mr. Smith",
            location="Salle E01",
            start_time="14:00",
            end_time="15:00",
            day_of_week=3,
            color="",
        )
        loaded = load_snapshot(export_snapshot([blank]))
        self.assertEqual(loaded, [blank])
        self.assertEqual(loaded[0].color, "")

    def test_camel_case_keys_and_indent(self) -> None:
        text = export_snapshot(COURSES)
        self.assertIn('\n  {\n    "id": "1712345678901"', text)
        self.assertIn("Données", text)

        data = json.loads(text)
        self.assertEqual(data[0]["startTime"], "09:00")
        self.assertEqual(data[0]["dayOfWeek"], 2)
        self.assertEqual(data[0]["credits"], 4)
        # absent optional fields are left out
        self.assertNotIn("credits", data[1])
        self.assertNotIn("description", data[1])

    def test_invalid_documents(self) -> None:
        with self.assertRaises(ValueError):
            load_snapshot("not json")
        with self.assertRaises(ValueError):
            load_snapshot('{"id": "1"}')
        with self.assertRaises(ValueError):
            load_snapshot('[{"id": "1", "title": "x"}]')


class TestStorage(unittest.TestCase):
    def test_load_missing_file_returns_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "missing.json"
            self.assertEqual(load_courses(p), [])

    def test_save_and_load_roundtrip(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "nested" / "courses.json"
            save_courses(COURSES, p)
            self.assertEqual(load_courses(p), COURSES)

    def test_corrupted_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "courses.json"
            p.write_text("{broken", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_courses(p)


if __name__ == "__main__":
    unittest.main()
