"""Run the Gym Scheduler API with uvicorn."""
from __future__ import annotations

import argparse

import uvicorn

from gym_scheduler.config import get_settings
from gym_scheduler.logging_config import configure_logging


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the Gym Scheduler API")
    parser.add_argument("--host", default=settings.app_host)
    parser.add_argument("--port", type=int, default=settings.app_port)
    args = parser.parse_args()

    configure_logging()
    uvicorn.run(
        "gym_scheduler.main:app",
        host=args.host,
        port=args.port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
