"""Deterministic starter week built from the session template catalog."""
from __future__ import annotations

from gym_scheduler.models.schemas import DAYS, TrainingSession
from gym_scheduler.models.session_templates import SESSION_TEMPLATES


BASE_START_TIMES = ["06:30", "07:00", "18:00", "09:00", "08:30", "10:00"]
SEEDED_SESSION_COUNT = 6


def default_week() -> list[TrainingSession]:
    """
    Build the balanced starter week.

    Template ``i`` is placed on weekday ``i`` (Monday first) at
    ``BASE_START_TIMES[i]``, so the result is already in weekly order. Every
    call returns the same week apart from freshly generated ids.

    Returns:
        Six uncompleted sessions, one per focus, Monday through Saturday
    """
    week = []
    for index, template in enumerate(SESSION_TEMPLATES[:SEEDED_SESSION_COUNT]):
        week.append(
            TrainingSession(
                day=DAYS[index % len(DAYS)],
                start=BASE_START_TIMES[index % len(BASE_START_TIMES)],
                completed=False,
                **template.model_dump(),
            )
        )
    return week
