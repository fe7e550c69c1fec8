"""Derived views over a session collection: weekly board, focus balance, totals."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from gym_scheduler.models.schemas import (
    DAYS,
    TRAINING_FOCI,
    DaySchedule,
    FocusShare,
    FocusVolume,
    TrainingSession,
    WeekSummary,
)


MINUTES_PER_DAY = 24 * 60


def session_sort_key(session: TrainingSession) -> tuple[int, str]:
    """Order by weekday (Monday first), then by zero-padded ``HH:MM`` start."""
    return DAYS.index(session.day), session.start


def sort_sessions(sessions: Iterable[TrainingSession]) -> tuple[TrainingSession, ...]:
    """Return the sessions as a tuple in canonical weekly order."""
    return tuple(sorted(sessions, key=session_sort_key))


def group_by_day(sessions: Sequence[TrainingSession]) -> list[DaySchedule]:
    """
    Bucket sessions into the seven weekdays.

    Args:
        sessions: Any collection of sessions, in any order

    Returns:
        One entry per weekday, Monday through Sunday, each holding that day's
        sessions sorted by start time. Days without sessions are kept with an
        empty list.
    """
    board = []
    for day in DAYS:
        day_sessions = sorted(
            (session for session in sessions if session.day == day),
            key=lambda session: session.start,
        )
        board.append(
            DaySchedule(
                day=day,
                sessions=day_sessions,
                total_minutes=weekly_minutes(day_sessions),
            )
        )
    return board


def focus_volume(sessions: Sequence[TrainingSession]) -> list[FocusVolume]:
    """
    Sum planned and completed minutes per training focus.

    Every focus is reported, in enumeration order, even when no session
    carries it.
    """
    volume = []
    for focus in TRAINING_FOCI:
        matching = [session for session in sessions if session.focus == focus]
        volume.append(
            FocusVolume(
                focus=focus,
                total_minutes=sum(session.duration for session in matching),
                completed_minutes=sum(
                    session.duration for session in matching if session.completed
                ),
            )
        )
    return volume


def weekly_minutes(sessions: Iterable[TrainingSession]) -> int:
    """Total planned minutes; 0 for an empty collection."""
    return sum(session.duration for session in sessions)


def completion_rate(sessions: Sequence[TrainingSession]) -> int:
    """
    Percentage of sessions marked completed, rounded half up.

    Returns 0 for an empty collection.
    """
    if not sessions:
        return 0
    completed = sum(1 for session in sessions if session.completed)
    return math.floor(100 * completed / len(sessions) + 0.5)


def end_time(start: str, duration: int) -> str:
    """
    Wall-clock time reached after ``duration`` minutes from ``start``.

    Crossing midnight wraps to the next day's time of day.

    Example:
        >>> end_time("23:30", 90)
        '01:00'
    """
    hours, minutes = start.split(":")
    total = (int(hours) * 60 + int(minutes) + duration) % MINUTES_PER_DAY
    return f"{total // 60:02d}:{total % 60:02d}"


def format_duration(minutes: int) -> str:
    """
    Human-readable duration label.

    Example:
        >>> format_duration(45), format_duration(120), format_duration(75)
        ('45 min', '2 hrs', '1h 15m')
    """
    if minutes < 60:
        return f"{minutes} min"
    hours, rest = divmod(minutes, 60)
    if rest == 0:
        return f"{hours} hr{'s' if hours > 1 else ''}"
    return f"{hours}h {rest}m"


def focus_share(
    volume: Sequence[FocusVolume], total_minutes: int
) -> list[FocusShare]:
    """Fraction of the week taken by each focus, capped at 1."""
    # An empty week still divides by one so every share reads 0.
    denominator = total_minutes or 1
    return [
        FocusShare(
            focus=entry.focus,
            planned=min(entry.total_minutes / denominator, 1),
            completed=min(entry.completed_minutes / denominator, 1),
        )
        for entry in volume
    ]


def week_summary(sessions: Sequence[TrainingSession]) -> WeekSummary:
    """Headline metrics shown above the weekly board."""
    total = weekly_minutes(sessions)
    volume = focus_volume(sessions)
    return WeekSummary(
        weekly_minutes=total,
        weekly_volume=format_duration(total),
        session_count=len(sessions),
        completion_rate=completion_rate(sessions),
        focus_volume=volume,
        focus_share=focus_share(volume, total),
    )
