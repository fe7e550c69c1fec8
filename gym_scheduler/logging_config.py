"""Logging setup shared by the API process and the scripts."""
from __future__ import annotations

from logging.config import dictConfig

from gym_scheduler.config import Settings, get_settings

LOG_FILENAME = "gym_scheduler.log"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configured = False


def build_logging_config(settings: Settings) -> dict:
    """
    Build the ``dictConfig`` payload for the given settings.

    The root logger writes to the console and to ``<log_dir>/gym_scheduler.log``.
    SQLAlchemy engine chatter stays at WARNING unless ``debug`` is on, and
    uvicorn's loggers hand their records to the root handlers.
    """
    level = settings.log_level
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
            "file": {
                "class": "logging.FileHandler",
                "filename": str(settings.log_dir / LOG_FILENAME),
                "encoding": "utf-8",
                "formatter": "standard",
                "level": level,
            },
        },
        "loggers": {
            "sqlalchemy.engine": {"level": "INFO" if settings.debug else "WARNING"},
            "uvicorn": {"handlers": [], "propagate": True},
            "uvicorn.access": {"handlers": [], "propagate": True},
        },
        "root": {
            "level": level,
            "handlers": ["console", "file"],
        },
    }


def configure_logging(settings: Settings | None = None) -> None:
    """Install the logging config once per process."""

    global _configured
    if _configured:
        return

    settings = settings or get_settings()
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    dictConfig(build_logging_config(settings))
    _configured = True
