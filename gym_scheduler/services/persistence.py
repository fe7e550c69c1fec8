"""Load and save the session collection through a durable slot."""
from __future__ import annotations

import json
import logging
from typing import Sequence

from pydantic import ValidationError

from gym_scheduler.config import get_settings
from gym_scheduler.models.schemas import TrainingSession
from gym_scheduler.services.balance_seeder import default_week
from gym_scheduler.services.storage import KeyValueSlot


logger = logging.getLogger(__name__)


class SessionPersistence:
    """Serialize the session collection to one JSON-encoded slot."""

    def __init__(self, slot: KeyValueSlot, key: str | None = None):
        self.slot = slot
        self.key = key or get_settings().storage_key

    def load(self) -> list[TrainingSession]:
        """
        Read the stored collection.

        An unset or unreadable slot yields the default week, as does stored
        content that is not a JSON array. Records inside the array are
        validated one by one: a record that does not validate is logged and
        skipped so the rest of the week survives. Loaded records missing an
        ``id`` get a fresh one and ``completed`` is coerced to a boolean.

        Returns:
            list[TrainingSession]: Stored sessions, or the seeded default week
        """
        try:
            raw = self.slot.get(self.key)
        except Exception:
            logger.warning("Could not read %s, seeding default week", self.key, exc_info=True)
            return default_week()

        if not raw:
            logger.info("No stored sessions under %s, seeding default week", self.key)
            return default_week()

        try:
            payload = json.loads(raw)
        except ValueError as exc:
            logger.warning("Failed to parse stored sessions under %s: %s", self.key, exc)
            return default_week()
        if not isinstance(payload, list):
            logger.warning(
                "Failed to parse stored sessions under %s: expected a JSON array, got %s",
                self.key,
                type(payload).__name__,
            )
            return default_week()

        sessions = []
        for index, record in enumerate(payload):
            try:
                sessions.append(TrainingSession.model_validate(record))
            except ValidationError as exc:
                logger.warning(
                    "Skipping stored session %d under %s: %s",
                    index,
                    self.key,
                    exc.errors(include_url=False),
                )

        if not sessions:
            logger.warning("No usable sessions under %s, seeding default week", self.key)
            return default_week()

        logger.debug("Loaded %d of %d stored sessions from %s", len(sessions), len(payload), self.key)
        return sessions

    def save(self, sessions: Sequence[TrainingSession]) -> None:
        """
        Overwrite the slot with the given collection.

        An empty collection clears the slot instead, so the next ``load``
        seeds a fresh default week. Write errors are logged, never raised.
        """
        try:
            if not sessions:
                self.slot.delete(self.key)
                logger.info("Session collection empty, cleared %s", self.key)
                return
            payload = [session.model_dump(mode="json") for session in sessions]
            self.slot.set(self.key, json.dumps(payload, ensure_ascii=False))
        except Exception:
            logger.exception("Failed to persist %d sessions to %s", len(sessions), self.key)
