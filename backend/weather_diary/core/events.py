"""
Application lifespan: table creation and the daily weather job.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
import logging
from weather_diary.core.config import settings
from weather_diary.core.scheduler import DailyJobScheduler, run_weather_refresh
from weather_diary.db.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting {settings.APP_NAME}...")
    init_db()

    scheduler = None
    if settings.WEATHER_REFRESH_ENABLED:
        scheduler = DailyJobScheduler(
            run_weather_refresh,
            hour=settings.WEATHER_REFRESH_HOUR,
            minute=settings.WEATHER_REFRESH_MINUTE,
            name="weather-refresh"
        )
        scheduler.start()
    app.state.weather_scheduler = scheduler

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}...")
    if scheduler is not None:
        scheduler.stop()
