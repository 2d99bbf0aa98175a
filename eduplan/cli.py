"""
CLI (Command Line Interface).

Terminal front end over a stored course list, e.g.:

    eduplan add --title "Algorithmique" --professor "Dr. Martin" --location "A101" \\
                --start 09:00 --end 11:00 --day 1 --credits 6
    eduplan list
    eduplan remove <course_id>
    eduplan conflicts
    eduplan analyze
    eduplan summary
    eduplan timetable
    eduplan import syllabus.pdf
    eduplan export-ics out.ics
    eduplan export-json out.json

Every command loads the course list from the store (--store, default
eduplan/data/courses.json), works on a ScheduleSession and saves the list
back when it changed.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, TextColumn
from rich.table import Table

from eduplan.extraction import StubExtractor, UploadedDocument
from eduplan.export_ics import ICS_FILENAME, export_courses_to_ics
from eduplan.model import COLORS, DAY_NAMES, DEFAULT_COLOR, WEEKDAYS, Course, CourseDraft, parse_time
from eduplan.review import ReviewBatch
from eduplan.session import ScheduleSession
from eduplan.storage import JSON_FILENAME, load_courses, save_courses

console = Console()

PRIORITY_STYLES = {"high": "bold red", "medium": "yellow", "low": "blue"}

# Weekly grid: 8h to 20h
GRID_HOURS = range(8, 21)


class RichProgressNotifier:
    """
    ProgressNotifier that drives a rich progress bar.
    """

    def __init__(self, progress: Progress) -> None:
        self._progress = progress
        self._task = progress.add_task("Analyse IA en cours...", total=100)

    def update(self, percent: int, stage: str) -> None:
        self._progress.update(self._task, completed=percent, description=stage)


def _course_line(course: Course) -> str:
    bits = [
        f"{DAY_NAMES[course.day_of_week] if 0 <= course.day_of_week <= 6 else course.day_of_week}",
        f"{course.start_time}-{course.end_time}",
        course.title,
        course.professor,
        f"@ {course.location}",
        f"{course.credit_value} ECTS",
    ]
    return escape(" | ".join([b for b in bits if b]))


def _courses_table(title: str, courses: Sequence[Course | CourseDraft], show_ids: bool = True) -> Table:
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("#", justify="right")
    if show_ids:
        table.add_column("ID")
    table.add_column("Jour")
    table.add_column("Horaire")
    table.add_column("Cours")
    table.add_column("Professeur")
    table.add_column("Salle")
    table.add_column("ECTS", justify="right")

    for i, c in enumerate(courses, start=1):
        day = DAY_NAMES[c.day_of_week] if 0 <= c.day_of_week <= 6 else str(c.day_of_week)
        row = [str(i)]
        if show_ids and isinstance(c, Course):
            row.append(f"[bold cyan]{c.id}[/]")
        row += [
            day,
            f"{c.start_time}-{c.end_time}",
            escape(c.title),
            f"[magenta]{escape(c.professor)}[/]",
            escape(c.location),
            str(c.credits or 0),
        ]
        table.add_row(*row)
    return table


def _load_session(store: Optional[Path]) -> ScheduleSession:
    return ScheduleSession(load_courses(store))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _cmd_add(args: argparse.Namespace, session: ScheduleSession) -> int:
    """
    Add one course from command line options.
    """
    for name in ("title", "professor", "location"):
        if not (getattr(args, name) or "").strip():
            console.print(f"Please provide a {name}.")
            return 1

    try:
        start = parse_time(args.start)
        end = parse_time(args.end)
    except ValueError as e:
        console.print(str(e))
        return 1
    if start >= end:
        console.print("End time must be after start time.")
        return 1

    if not (0 <= args.day <= 6):
        console.print("Day must be between 0 (Sunday) and 6 (Saturday).")
        return 1
    if args.credits < 0:
        console.print("Credits cannot be negative.")
        return 1

    color = COLORS.get(args.color, args.color)
    draft = CourseDraft(
        title=args.title.strip(),
        professor=args.professor.strip(),
        location=args.location.strip(),
        start_time=args.start.strip(),
        end_time=args.end.strip(),
        day_of_week=args.day,
        color=color,
        description=args.description,
        credits=args.credits,
    )
    course = session.add_course(draft)
    save_courses(session.courses, args.store)
    console.print(f"Added: [bold cyan]{course.id}[/] {escape(course.title)} (courses: {len(session.courses)})")
    return 0


def _cmd_list(args: argparse.Namespace, session: ScheduleSession) -> int:
    courses = session.courses
    if not courses:
        console.print("No courses yet.")
        return 0
    console.print(_courses_table("Mes cours", courses))
    return 0


def _cmd_remove(args: argparse.Namespace, session: ScheduleSession) -> int:
    cid = (args.course_id or "").strip()
    if not cid:
        console.print("Please provide a course_id.")
        return 1

    if not session.remove_course(cid):
        console.print(f"Not found: {cid}")
        return 0

    save_courses(session.courses, args.store)
    console.print(f"Removed: {cid} (courses: {len(session.courses)})")
    return 0


def _cmd_conflicts(args: argparse.Namespace, session: ScheduleSession) -> int:
    """
    Print all detected conflicts among stored courses.
    """
    courses = session.courses
    granularity = "minute" if args.precise else "hour"
    confs = sorted(session.conflicts(granularity))
    if not confs:
        console.print("No conflicts found.")
        return 0

    console.print(f"Conflicts found: {len(confs)}")
    for i, j in confs:
        console.print(f"- {_course_line(courses[i])}  <->  {_course_line(courses[j])}")
    return 0


def _cmd_analyze(args: argparse.Namespace, session: ScheduleSession) -> int:
    suggestions = session.analyze()

    table = Table(title="Suggestions IA", box=box.SIMPLE)
    table.add_column("Priorité")
    table.add_column("Type")
    table.add_column("Message")
    for s in suggestions:
        style = PRIORITY_STYLES.get(s.priority, "white")
        table.add_row(f"[{style}]{s.priority}[/]", s.type, escape(s.message))
    console.print(table)
    return 0


def _cmd_summary(args: argparse.Namespace, session: ScheduleSession) -> int:
    summary = session.summary()
    console.print(f"Cours: {summary.course_count}")
    console.print(f"Crédits: {summary.total_credits} ECTS")
    console.print(f"Heures par semaine: {summary.total_hours:.1f}h")
    console.print(f"Jours actifs: {summary.active_days}")
    console.print(f"Moyenne par jour: {summary.average_hours_per_day:.1f}h")
    console.print(f"Conflits: {'Détectés' if summary.has_conflicts else 'Aucun'}")
    return 0


def _course_for_slot(courses: Sequence[Course], day: int, hour: int) -> Optional[Course]:
    for c in courses:
        try:
            start_hour, _ = parse_time(c.start_time)
            end_hour, _ = parse_time(c.end_time)
        except ValueError:
            continue
        if c.day_of_week == day and start_hour <= hour < end_hour:
            return c
    return None


def _cmd_timetable(args: argparse.Namespace, session: ScheduleSession) -> int:
    """
    Weekly grid, Monday to Friday, one row per hour.
    """
    courses = session.courses
    if not courses:
        console.print("No courses yet.")
        return 0

    table = Table(title="Emploi du Temps", box=box.SIMPLE)
    table.add_column("")
    for day in WEEKDAYS:
        table.add_column(DAY_NAMES[day])

    for hour in GRID_HOURS:
        row = [f"{hour}:00"]
        for day in WEEKDAYS:
            c = _course_for_slot(courses, day, hour)
            if c is None:
                row.append("")
            elif parse_time(c.start_time)[0] == hour:
                row.append(f"[bold]{escape(c.title)}[/]\n{c.start_time} - {c.end_time}\n{escape(c.location)}")
            else:
                row.append("│")
        table.add_row(*row)

    console.print(table)
    return 0


def _cmd_import(args: argparse.Namespace, session: ScheduleSession) -> int:
    """
    Run the extractor on a document, show the drafts and commit them.
    """
    path = Path(args.file)
    if not path.is_file():
        console.print(f"File not found: {path}")
        return 1

    document = UploadedDocument.from_path(path)
    extractor = StubExtractor(delay=args.delay)

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}%"),
        console=console,
    ) as progress:
        drafts = extractor.extract(document, RichProgressNotifier(progress))

    batch = ReviewBatch(drafts)
    # drop from the highest index so earlier numbers stay valid
    for n in sorted(set(args.skip or []), reverse=True):
        if not (1 <= n <= len(batch)):
            console.print(f"Out of range: {n}")
            return 1
        batch.remove(n - 1)

    if not len(batch):
        console.print("Nothing to import.")
        return 0

    console.print(_courses_table(f"Cours extraits de {escape(document.name)}", batch.drafts, show_ids=False))

    if not args.yes:
        answer = console.input("Ajouter ces cours ? [Y/n]: ").strip().lower()
        if answer == "n":
            batch.cancel()
            console.print("Import cancelled.")
            return 0

    added = batch.confirm(session)
    save_courses(session.courses, args.store)
    console.print(f"Imported {len(added)} courses (courses: {len(session.courses)})")
    return 0


def _cmd_export_ics(args: argparse.Namespace, session: ScheduleSession) -> int:
    """
    Export stored courses into an iCalendar (.ics) file.
    """
    courses = session.courses
    if not courses:
        console.print("No courses to export.")
        return 0

    out_path = Path(args.out)
    if out_path.suffix.lower() != ".ics":
        out_path = out_path.with_suffix(".ics")

    n = export_courses_to_ics(courses, out_path)
    console.print(f"Exported {n} courses to: {out_path.resolve()}")
    console.print("Compatible avec Google Calendar, Outlook, Apple Calendar, etc.")
    return 0


def _cmd_export_json(args: argparse.Namespace, session: ScheduleSession) -> int:
    courses = session.courses
    if not courses:
        console.print("No courses to export.")
        return 0

    out_path = save_courses(courses, args.out)
    console.print(f"Exported {len(courses)} courses to: {out_path.resolve()}")
    return 0


COMMANDS = {
    "add": _cmd_add,
    "list": _cmd_list,
    "remove": _cmd_remove,
    "conflicts": _cmd_conflicts,
    "analyze": _cmd_analyze,
    "summary": _cmd_summary,
    "timetable": _cmd_timetable,
    "import": _cmd_import,
    "export-ics": _cmd_export_ics,
    "export-json": _cmd_export_json,
}


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="eduplan", description="EduPlan IA – student timetable planner")
    parser.add_argument("--store", type=Path, default=None, help="Course store (JSON snapshot)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_add = sub.add_parser("add", help="Add a course")
    p_add.add_argument("--title", type=str, required=True, help="Course title")
    p_add.add_argument("--professor", type=str, required=True, help="Professor name")
    p_add.add_argument("--location", type=str, required=True, help="Room")
    p_add.add_argument("--start", type=str, required=True, help="Start time (HH:MM)")
    p_add.add_argument("--end", type=str, required=True, help="End time (HH:MM)")
    p_add.add_argument("--day", type=int, default=1, help="Day of week (0 = Sunday, 1 = Monday, ...)")
    p_add.add_argument("--color", type=str, default=DEFAULT_COLOR, help="Color name or hex value")
    p_add.add_argument("--credits", type=int, default=3, help="ECTS credits")
    p_add.add_argument("--description", type=str, default=None, help="Free text")

    sub.add_parser("list", help="List courses")

    p_remove = sub.add_parser("remove", help="Remove course by id")
    p_remove.add_argument("course_id", type=str, help="Course id")

    p_conf = sub.add_parser("conflicts", help="Show time conflicts")
    p_conf.add_argument("--precise", action="store_true", help="Compare minutes instead of whole hours")

    sub.add_parser("analyze", help="Generate schedule suggestions")
    sub.add_parser("summary", help="Show credits, hours and active days")
    sub.add_parser("timetable", help="Show the weekly grid (Mon-Fri)")

    p_import = sub.add_parser("import", help="Extract courses from a document")
    p_import.add_argument("file", type=str, help="PDF, Word, TXT, PNG or JPG file")
    p_import.add_argument("--yes", "-y", action="store_true", help="Add extracted courses without asking")
    p_import.add_argument("--skip", type=int, nargs="*", help="Numbers of extracted courses to leave out")
    p_import.add_argument("--delay", type=float, default=0.4, help="Seconds between progress stages")

    p_ics = sub.add_parser("export-ics", help="Export courses to .ics")
    p_ics.add_argument("out", type=str, nargs="?", default=ICS_FILENAME, help="Output file path")

    p_json = sub.add_parser("export-json", help="Export courses to .json")
    p_json.add_argument("out", type=str, nargs="?", default=JSON_FILENAME, help="Output file path")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        session = _load_session(args.store)
        raise SystemExit(COMMANDS[args.command](args, session))
    except (ValueError, OSError) as e:
        console.print(f"Error: {e}")
        raise SystemExit(1)
