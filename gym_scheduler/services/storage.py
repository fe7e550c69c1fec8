"""Durable key-value slots backing session persistence."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from sqlalchemy.orm import Session, sessionmaker

from gym_scheduler.database import SessionLocal
from gym_scheduler.models.database_models import StorageSlot


logger = logging.getLogger(__name__)


class KeyValueSlot(ABC):
    """Minimal string key-value storage, in the shape of browser local storage."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored text, or None when the key is unset."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, overwriting any previous content."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; deleting an unset key is not an error."""


class MemorySlot(KeyValueSlot):
    """Process-local slot, used by tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._values


class DatabaseSlot(KeyValueSlot):
    """Slot stored as a row of the ``storage_slots`` table."""

    def __init__(self, session_factory: sessionmaker[Session] | None = None):
        self._session_factory = session_factory or SessionLocal

    def get(self, key: str) -> str | None:
        with self._session_factory() as db:
            row = db.get(StorageSlot, key)
            return row.value if row else None

    def set(self, key: str, value: str) -> None:
        with self._session_factory() as db:
            try:
                row = db.get(StorageSlot, key)
                if row is None:
                    db.add(StorageSlot(key=key, value=value))
                else:
                    row.value = value
                db.commit()
            except Exception:
                db.rollback()
                raise
        logger.debug("Wrote slot %s (%d chars)", key, len(value))

    def delete(self, key: str) -> None:
        with self._session_factory() as db:
            try:
                row = db.get(StorageSlot, key)
                if row is not None:
                    db.delete(row)
                db.commit()
            except Exception:
                db.rollback()
                raise
        logger.debug("Cleared slot %s", key)
