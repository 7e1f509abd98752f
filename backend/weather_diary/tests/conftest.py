"""
Shared fixtures: in-memory database, fake weather client and API client.
"""
import os

# Settings are read at import time; keep tests off MySQL and the real timer.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["WEATHER_REFRESH_ENABLED"] = "false"
os.environ["OPENWEATHERMAP_API_KEY"] = "test-key"

import pytest
from datetime import date
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from weather_diary.db.base import Base
from weather_diary.db.session import get_db
from weather_diary.main import app
from weather_diary.schemas.weather import WeatherObservation, WeatherFetchResult
from weather_diary.services.weather_client import get_weather_client
import weather_diary.models  # noqa: F401


class FakeWeatherClient:
    """Weather client double that counts calls."""

    def __init__(self, observation=None, error=None):
        self.observation = observation
        self.error = error
        self.calls = 0

    def fetch_current(self):
        self.calls += 1
        if self.error is not None:
            return WeatherFetchResult.failure(self.error)
        return WeatherFetchResult.success(self.observation)


@pytest.fixture
def db_session():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def weather_client():
    """Fake client reporting cloudy weather."""
    return FakeWeatherClient(
        observation=WeatherObservation(
            date=date.today(),
            weather="Clouds",
            icon="04d",
            temperature=15.2
        )
    )


@pytest.fixture
def client(db_session, weather_client):
    """TestClient wired to the test database and fake weather client."""
    def override_get_db():
        try:
            yield db_session
        finally:
            # End the request's transaction like a per-request session would
            db_session.rollback()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_weather_client] = lambda: weather_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
