"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import os
from typing import Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ["DATABASE_URL"] = os.environ.get("DATABASE_URL") or "sqlite://"
os.environ["STORAGE_KEY"] = os.environ.get("STORAGE_KEY") or "test-gym-scheduler-sessions"

from gym_scheduler.logging_config import configure_logging

configure_logging()

from gym_scheduler.database import Base
from gym_scheduler.main import app
from gym_scheduler.models.schemas import TrainingSession
from gym_scheduler.routers.schedule import get_store
from gym_scheduler.services.persistence import SessionPersistence
from gym_scheduler.services.session_store import SessionStore
from gym_scheduler.services.storage import MemorySlot

STORAGE_KEY = "test-sessions"


@pytest.fixture
def memory_slot() -> MemorySlot:
    """Empty in-memory durable slot."""

    return MemorySlot()


@pytest.fixture
def persistence(memory_slot: MemorySlot) -> SessionPersistence:
    """Persistence adapter writing to the in-memory slot."""

    return SessionPersistence(memory_slot, key=STORAGE_KEY)


@pytest.fixture
def store(persistence: SessionPersistence) -> SessionStore:
    """Store seeded from an empty slot, i.e. holding the default week."""

    return SessionStore(persistence)


@pytest.fixture
def test_client(store: SessionStore):
    """Provide a FastAPI test client bound to the in-memory store."""

    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.pop(get_store, None)


@pytest.fixture
def db_session_factory():
    """Session factory for a private in-memory SQLite database."""

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    from gym_scheduler.models import database_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    engine.dispose()


@pytest.fixture
def make_session() -> Callable[..., TrainingSession]:
    """Factory building sessions with sensible defaults."""

    def _make(**overrides) -> TrainingSession:
        fields = {
            "name": "Test Session",
            "focus": "Strength",
            "intensity": "Medium",
            "day": "Monday",
            "start": "07:00",
            "duration": 60,
            "location": "Main Floor",
            "notes": "",
            "completed": False,
        }
        fields.update(overrides)
        return TrainingSession(**fields)

    return _make
