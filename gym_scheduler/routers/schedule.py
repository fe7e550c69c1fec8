"""API endpoints for the weekly training schedule."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from gym_scheduler.models.schemas import (
    ScheduledDay,
    ScheduledSession,
    SessionDraft,
    SessionTemplate,
    TrainingSession,
    WeekSummary,
)
from gym_scheduler.models.session_templates import (
    DEFAULT_DRAFT,
    SESSION_TEMPLATES,
    apply_template,
)
from gym_scheduler.services.aggregation import (
    end_time,
    format_duration,
    group_by_day,
    week_summary,
)
from gym_scheduler.services.persistence import SessionPersistence
from gym_scheduler.services.session_store import SessionStore
from gym_scheduler.services.storage import DatabaseSlot


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schedule", tags=["schedule"])


@lru_cache()
def get_store() -> SessionStore:
    """Return the process-wide store backed by the database slot."""

    return SessionStore(SessionPersistence(DatabaseSlot()))


StoreDep = Annotated[SessionStore, Depends(get_store)]


def _require_session(store: SessionStore, session_id: str) -> TrainingSession:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return session


@router.get("/sessions", response_model=list[TrainingSession])
def list_sessions(store: StoreDep):
    """Return the whole week in (day, start) order."""
    return list(store.sessions)


@router.get("/sessions/{session_id}", response_model=TrainingSession)
def get_session(session_id: str, store: StoreDep):
    """Return one session, typically to prefill the editor."""
    return _require_session(store, session_id)


@router.post("/sessions", response_model=list[TrainingSession], status_code=201)
def create_session(draft: SessionDraft, store: StoreDep):
    """
    Add a session to the week.

    Args:
        draft: Session fields without an id

    Returns:
        list[TrainingSession]: The updated week
    """
    return list(store.create(draft))


@router.put("/sessions/{session_id}", response_model=list[TrainingSession])
def update_session(session_id: str, draft: SessionDraft, store: StoreDep):
    """Overwrite every field of a session except its id."""
    _require_session(store, session_id)
    return list(store.update(session_id, draft))


@router.delete("/sessions/{session_id}", response_model=list[TrainingSession])
def delete_session(session_id: str, store: StoreDep):
    """Remove a session from the week."""
    _require_session(store, session_id)
    return list(store.remove(session_id))


@router.post("/sessions/{session_id}/toggle", response_model=list[TrainingSession])
def toggle_session(session_id: str, store: StoreDep):
    """Flip a session between planned and done."""
    _require_session(store, session_id)
    return list(store.toggle_completed(session_id))


@router.post("/auto-balance", response_model=list[TrainingSession])
def auto_balance(store: StoreDep):
    """Replace the whole week with the balanced starter week."""
    return list(store.auto_balance())


@router.get("/week", response_model=list[ScheduledDay])
def get_week(store: StoreDep):
    """
    Weekly board, one column per weekday.

    Returns:
        list[ScheduledDay]: Monday through Sunday with end times and day totals
    """
    board = []
    for column in group_by_day(store.sessions):
        board.append(
            ScheduledDay(
                day=column.day,
                sessions=[
                    ScheduledSession(
                        **session.model_dump(),
                        end=end_time(session.start, session.duration),
                    )
                    for session in column.sessions
                ],
                total_minutes=column.total_minutes,
                total_duration=format_duration(column.total_minutes),
            )
        )
    return board


@router.get("/summary", response_model=WeekSummary)
def get_summary(store: StoreDep):
    """Weekly volume, completion rate and focus balance."""
    summary = week_summary(store.sessions)
    logger.debug(
        "Summary: %d sessions, %d minutes, %d%% complete",
        summary.session_count,
        summary.weekly_minutes,
        summary.completion_rate,
    )
    return summary


@router.get("/templates", response_model=list[SessionTemplate])
def list_templates():
    """Quick-start templates for the editor."""
    return SESSION_TEMPLATES


@router.get("/templates/{index}/draft", response_model=SessionDraft)
def template_draft(index: int):
    """Default draft with the chosen template spliced in."""
    if not 0 <= index < len(SESSION_TEMPLATES):
        raise HTTPException(status_code=404, detail=f"Template {index} not found")
    return apply_template(DEFAULT_DRAFT, SESSION_TEMPLATES[index])
