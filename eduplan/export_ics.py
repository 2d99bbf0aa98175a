"""
iCalendar (.ics) export.

Every course becomes one weekly recurring event, anchored at the next date
that falls on the course's weekday. The file can be imported into:
- Google Calendar
- Outlook
- Apple Calendar
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional, Sequence

from eduplan.model import DAY_CODES, Course, parse_time


# ---------------------------------------------------------------------------
# Calendar metadata
# ---------------------------------------------------------------------------

PRODID = "-//EduPlan IA//Emploi du Temps//FR"
CALENDAR_NAME = "Emploi du Temps - EduPlan"
CALENDAR_TIMEZONE = "Europe/Paris"
CALENDAR_DESCRIPTION = "Emploi du temps généré par EduPlan IA"
UID_DOMAIN = "eduplan.ia"

ICS_MIME_TYPE = "text/calendar"
ICS_FILENAME = "emploi-du-temps.ics"


def _ics_escape(text: str) -> str:
    """
    Escape text for ICS fields (very small subset, sufficient for our use).
    """
    return (
        text.replace("\\", "\\\\").replace("\r\n", "\\n").replace("\n", "\\n").replace(";", "\\;").replace(",", "\\,")
    )


def _dt_utc(dt: datetime) -> str:
    """
    Convert a datetime to the ICS UTC form 'YYYYMMDDTHHMMSSZ'.
    Naive datetimes are taken as local time.
    """
    return dt.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _js_weekday(dt: datetime) -> int:
    # datetime.weekday(): Monday = 0; the model uses Sunday = 0
    return (dt.weekday() + 1) % 7


def next_occurrence(day_of_week: int, now: datetime) -> datetime:
    """
    Return the next date (strictly after today) on `day_of_week`.
    If today is that weekday, the event starts one week later.
    """
    days_until = (day_of_week - _js_weekday(now)) % 7 or 7
    return now + timedelta(days=days_until)


def _event_lines(course: Course, now: datetime, dtstamp: str) -> Optional[list[str]]:
    if not (0 <= course.day_of_week < len(DAY_CODES)):
        return None
    try:
        sh, sm = parse_time(course.start_time)
        eh, em = parse_time(course.end_time)
    except ValueError:
        return None

    day = next_occurrence(course.day_of_week, now)
    start = day.replace(hour=sh, minute=sm, second=0, microsecond=0)
    end = day.replace(hour=eh, minute=em, second=0, microsecond=0)

    description = "\\n".join(
        [
            _ics_escape(f"Professeur: {course.professor}"),
            _ics_escape(f"Crédits: {course.credit_value} ECTS"),
            _ics_escape(course.description or ""),
        ]
    )

    return [
        "BEGIN:VEVENT",
        f"UID:{_ics_escape(course.id)}@{UID_DOMAIN}",
        f"DTSTAMP:{dtstamp}",
        f"DTSTART:{_dt_utc(start)}",
        f"DTEND:{_dt_utc(end)}",
        f"SUMMARY:{_ics_escape(course.title)}",
        f"DESCRIPTION:{description}",
        f"LOCATION:{_ics_escape(course.location)}",
        f"RRULE:FREQ=WEEKLY;BYDAY={DAY_CODES[course.day_of_week]}",
        "STATUS:CONFIRMED",
        "END:VEVENT",
    ]


def export_calendar(courses: Sequence[Course], now: Optional[datetime] = None) -> str:
    """
    Build the .ics document for `courses`.

    `now` fixes the reference time (default: current local time). A naive
    `now` is local wall-clock time, and each event's UTC offset is taken
    for its own date, so a DST change before the first occurrence is
    respected. The same holds for an aware `now` with a zoneinfo tzinfo;
    a fixed-offset tzinfo keeps that offset.

    Courses with unparseable times or an unknown weekday are left out.
    """
    if now is None:
        # naive: the UTC offset is resolved per event date
        now = datetime.now()
    dtstamp = _dt_utc(now)

    lines: list[str] = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        f"X-WR-CALNAME:{_ics_escape(CALENDAR_NAME)}",
        f"X-WR-TIMEZONE:{CALENDAR_TIMEZONE}",
        f"X-WR-CALDESC:{_ics_escape(CALENDAR_DESCRIPTION)}",
    ]

    for course in courses:
        event = _event_lines(course, now, dtstamp)
        if event:
            lines.extend(event)

    lines.append("END:VCALENDAR")

    # ICS standard uses CRLF
    return "\r\n".join(lines) + "\r\n"


def export_courses_to_ics(
    courses: Sequence[Course], out_path: str | Path, now: Optional[datetime] = None
) -> int:
    """
    Export courses to an .ics file. Returns number of exported events.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    text = export_calendar(courses, now=now)
    out.write_text(text, encoding="utf-8", newline="")
    return sum(1 for line in text.split("\r\n") if line == "BEGIN:VEVENT")
