"""Initialise the local database and optionally reset the stored week."""
from __future__ import annotations

import argparse
import logging

from gym_scheduler.config import get_settings
from gym_scheduler.database import init_db
from gym_scheduler.logging_config import configure_logging
from gym_scheduler.services.aggregation import format_duration, week_summary
from gym_scheduler.services.persistence import SessionPersistence
from gym_scheduler.services.session_store import SessionStore
from gym_scheduler.services.storage import DatabaseSlot


logger = logging.getLogger("initial_setup")


def main(reset: bool) -> None:
    configure_logging()
    settings = get_settings()
    init_db()
    logger.info("Database initialised at %s", settings.database_url)

    store = SessionStore(SessionPersistence(DatabaseSlot()))
    if reset:
        store.auto_balance()
    else:
        # Persist whatever load() produced so a first run stores the seeded week.
        store.replace_all(store.sessions)

    summary = week_summary(store.sessions)
    logger.info(
        "Stored week: %d sessions, %s planned",
        summary.session_count,
        format_duration(summary.weekly_minutes),
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Initialise the gym scheduler database")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Discard the stored week and replace it with the balanced default",
    )
    args = parser.parse_args()
    main(args.reset)
