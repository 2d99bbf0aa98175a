"""
Schedule analysis ("Assistant IA").

Turns the current course list into a fresh list of Suggestion records.
Four independent checks run in a fixed order:
- conflicts between courses on the same day
- total credit load
- free Friday
- overloaded days

Nothing is remembered between calls: the same input always yields the same
suggestions, id for id and in the same order.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

from eduplan.conflicts import conflicting_pairs
from eduplan.model import DAY_NAMES, Course, Suggestion


# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------

CREDIT_LOW_THRESHOLD = 20
CREDIT_HIGH_THRESHOLD = 35
CREDIT_TARGET = 30

FREE_DAY = 5  # Friday
BUSY_DAY_THRESHOLD = 4

# Shown when there is nothing to analyze yet
DEFAULT_SUGGESTIONS: tuple[Suggestion, ...] = (
    Suggestion(
        id="welcome",
        type="recommendation",
        message="Ajoutez vos cours ou importez un plan de cours pour recevoir des suggestions personnalisées.",
        priority="low",
    ),
    Suggestion(
        id="tip-breaks",
        type="optimization",
        message="Gardez des créneaux libres entre les cours pour réviser et vous reposer.",
        priority="low",
    ),
)


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def _conflict_suggestions(courses: Sequence[Course]) -> list[Suggestion]:
    out: list[Suggestion] = []
    for i, j, a, b in conflicting_pairs(courses):
        out.append(
            Suggestion(
                id=f"conflict-{i}-{j}",
                type="conflict",
                message=f'Conflit détecté entre "{a.title}" et "{b.title}"',
                priority="high",
                courses=[a.id, b.id],
            )
        )
    return out


def _credit_suggestion(courses: Sequence[Course]) -> Suggestion:
    total = sum(c.credit_value for c in courses)

    if total < CREDIT_LOW_THRESHOLD:
        return Suggestion(
            id="credits-low",
            type="recommendation",
            message=(
                f"Vous avez {total} crédits. Pensez à ajouter des cours "
                f"pour atteindre {CREDIT_TARGET} crédits recommandés."
            ),
            priority="medium",
        )
    if total > CREDIT_HIGH_THRESHOLD:
        return Suggestion(
            id="credits-high",
            type="recommendation",
            message=(
                f"Attention : {total} crédits peut être une charge trop importante. "
                "Considérez alléger votre programme."
            ),
            priority="high",
        )
    return Suggestion(
        id="credits-good",
        type="optimization",
        message=f"Excellent ! {total} crédits est une charge équilibrée pour ce semestre.",
        priority="low",
    )


def _free_day_suggestion(courses: Sequence[Course]) -> Optional[Suggestion]:
    # Only Friday is checked, other empty weekdays are not reported
    if any(c.day_of_week == FREE_DAY for c in courses):
        return None
    return Suggestion(
        id="friday-free",
        type="optimization",
        message=f"{DAY_NAMES[FREE_DAY]} est libre - parfait pour les projets de groupe et révisions !",
        priority="low",
    )


def _busy_day_suggestions(courses: Sequence[Course]) -> list[Suggestion]:
    per_day = Counter(c.day_of_week for c in courses)

    out: list[Suggestion] = []
    for day in sorted(per_day):
        count = per_day[day]
        if count < BUSY_DAY_THRESHOLD:
            continue
        name = DAY_NAMES[day] if 0 <= day < len(DAY_NAMES) else f"Jour {day}"
        out.append(
            Suggestion(
                id=f"busy-day-{day}",
                type="recommendation",
                message=f"{name} a {count} cours. Prévoyez des pauses régulières.",
                priority="medium",
            )
        )
    return out


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_suggestions(
    courses: Sequence[Course],
    fallback: Optional[Sequence[Suggestion]] = None,
) -> list[Suggestion]:
    """
    Run all checks over `courses` and return a new list of suggestions.

    An empty course list (or an empty result) yields `fallback`, or
    DEFAULT_SUGGESTIONS when no fallback is given.
    """
    default = list(DEFAULT_SUGGESTIONS if fallback is None else fallback)
    if not courses:
        return default

    suggestions: list[Suggestion] = []
    suggestions.extend(_conflict_suggestions(courses))
    suggestions.append(_credit_suggestion(courses))

    free_day = _free_day_suggestion(courses)
    if free_day is not None:
        suggestions.append(free_day)

    suggestions.extend(_busy_day_suggestions(courses))

    return suggestions if suggestions else default
