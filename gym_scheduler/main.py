"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gym_scheduler.database import init_db
from gym_scheduler.logging_config import configure_logging
from gym_scheduler.routers import schedule


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    init_db()
    yield


app = FastAPI(title="Gym Scheduler API", lifespan=lifespan)


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Simple health endpoint for liveness checks."""
    return {"status": "ok"}


app.include_router(schedule.router)
