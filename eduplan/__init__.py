"""
EduPlan IA – student timetable planner.

Core entry points:
- eduplan.conflicts.find_conflicts
- eduplan.suggestions.generate_suggestions
- eduplan.export_ics.export_calendar
- eduplan.storage.export_snapshot
"""
