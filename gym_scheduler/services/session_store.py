"""In-memory owner of the session collection."""
from __future__ import annotations

import logging
from typing import Iterable

from gym_scheduler.models.schemas import SessionDraft, TrainingSession
from gym_scheduler.services.aggregation import sort_sessions
from gym_scheduler.services.balance_seeder import default_week
from gym_scheduler.services.identifiers import new_id
from gym_scheduler.services.persistence import SessionPersistence


logger = logging.getLogger(__name__)

Snapshot = tuple[TrainingSession, ...]


class SessionStore:
    """
    Authoritative holder of the week's sessions.

    Every mutator returns a new snapshot (a tuple of frozen sessions) in
    weekly order and never touches the previous one. Mutators that change
    the collection write the new snapshot through the persistence adapter;
    mutators aimed at an unknown id return the current snapshot untouched.
    """

    def __init__(
        self,
        persistence: SessionPersistence | None = None,
        sessions: Iterable[TrainingSession] | None = None,
    ):
        self._persistence = persistence
        if sessions is None:
            sessions = persistence.load() if persistence else default_week()
        self._sessions: Snapshot = sort_sessions(sessions)

    @property
    def sessions(self) -> Snapshot:
        return self._sessions

    def get(self, session_id: str) -> TrainingSession | None:
        """Return the session with ``session_id``, if present."""
        return next((s for s in self._sessions if s.id == session_id), None)

    def create(self, draft: SessionDraft) -> Snapshot:
        """Add a new session with a fresh id."""
        session = TrainingSession(id=new_id(), **draft.model_dump(exclude={"id"}))
        logger.info("Created session %s (%s %s)", session.id, session.day.value, session.start)
        return self._commit(sort_sessions([*self._sessions, session]))

    def update(self, session_id: str, draft: SessionDraft) -> Snapshot:
        """Replace every field except the id of an existing session."""
        if self.get(session_id) is None:
            logger.debug("Update ignored, unknown session %s", session_id)
            return self._sessions

        replacement = TrainingSession(id=session_id, **draft.model_dump(exclude={"id"}))
        updated = [replacement if s.id == session_id else s for s in self._sessions]
        logger.info("Updated session %s", session_id)
        return self._commit(sort_sessions(updated))

    def remove(self, session_id: str) -> Snapshot:
        """Delete a session."""
        remaining = tuple(s for s in self._sessions if s.id != session_id)
        if len(remaining) == len(self._sessions):
            logger.debug("Remove ignored, unknown session %s", session_id)
            return self._sessions

        logger.info("Removed session %s", session_id)
        return self._commit(remaining)

    def toggle_completed(self, session_id: str) -> Snapshot:
        """Flip the completion flag of a session."""
        session = self.get(session_id)
        if session is None:
            logger.debug("Toggle ignored, unknown session %s", session_id)
            return self._sessions

        flipped = session.model_copy(update={"completed": not session.completed})
        logger.info("Marked session %s as %s", session_id, "done" if flipped.completed else "planned")
        return self._commit(tuple(flipped if s.id == session_id else s for s in self._sessions))

    def replace_all(self, sessions: Iterable[TrainingSession]) -> Snapshot:
        """Swap in a whole new collection."""
        return self._commit(sort_sessions(sessions))

    def auto_balance(self) -> Snapshot:
        """Discard the current week and start over from the seeded default."""
        logger.info("Auto-balancing week, discarding %d sessions", len(self._sessions))
        return self.replace_all(default_week())

    def _commit(self, snapshot: Snapshot) -> Snapshot:
        self._sessions = snapshot
        if self._persistence is not None:
            # The adapter logs and swallows write failures.
            self._persistence.save(snapshot)
        return snapshot
