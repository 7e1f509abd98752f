"""
Tests for the daily job scheduler and its weather refresh job.
"""
from datetime import date, datetime, timedelta
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from weather_diary.core import events
from weather_diary.core.scheduler import (
    DailyJobScheduler, next_run_time, run_weather_refresh, seconds_until_next_run
)
from weather_diary.db import session as session_module
from weather_diary.main import app
from weather_diary.services import diary_service
from weather_diary.services import weather_client as weather_client_module


class FakeClock:
    """Wall clock the test moves by hand."""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


class DriftingEvent:
    """Stop event whose waits advance the clock; the first wait ends `lag` seconds early."""

    def __init__(self, clock, lag=0.0, max_waits=3):
        self.clock = clock
        self.lag = lag
        self.max_waits = max_waits
        self.delays = []

    def wait(self, timeout):
        self.delays.append(timeout)
        if len(self.delays) >= self.max_waits:
            return True
        step = timeout - self.lag if len(self.delays) == 1 else timeout
        self.clock.now += timedelta(seconds=step)
        return False


def test_seconds_until_next_run_same_day():
    """Test a run later today is scheduled today."""
    now = datetime(2024, 3, 1, 0, 30, 0)
    assert seconds_until_next_run(now, hour=1) == 30 * 60


def test_seconds_until_next_run_rolls_to_tomorrow():
    """Test a run time already passed moves to the next day."""
    now = datetime(2024, 3, 1, 1, 0, 0)
    assert seconds_until_next_run(now, hour=1) == 24 * 60 * 60

    now = datetime(2024, 3, 1, 23, 0, 0)
    assert seconds_until_next_run(now, hour=1, minute=15) == 2 * 60 * 60 + 15 * 60


def test_next_run_time_after_a_run_is_tomorrow():
    """Test the slot that just ran is never picked again."""
    assert next_run_time(datetime(2024, 3, 1, 1, 0, 0), hour=1) == datetime(2024, 3, 2, 1, 0, 0)


def test_early_wake_runs_job_once_per_day():
    """Test waking before the wall-clock run time waits out the rest instead of firing twice."""
    clock = FakeClock(datetime(2024, 3, 1, 0, 0, 0))
    runs = []
    scheduler = DailyJobScheduler(lambda: runs.append(clock()), hour=1, clock=clock)
    scheduler._stop_event = DriftingEvent(clock, lag=0.5)

    scheduler._loop()

    assert runs == [datetime(2024, 3, 1, 1, 0, 0)]
    assert scheduler._stop_event.delays == [3600.0, 0.5, 86400.0]


def test_clock_stepped_back_after_run_does_not_repeat_job():
    """Test a wall clock moved back after a run waits for the next day's slot."""
    clock = FakeClock(datetime(2024, 3, 1, 0, 0, 0))
    runs = []

    def job():
        runs.append(clock())
        clock.now -= timedelta(hours=1)

    scheduler = DailyJobScheduler(job, hour=1, clock=clock)
    scheduler._stop_event = DriftingEvent(clock, max_waits=2)

    scheduler._loop()

    assert len(runs) == 1
    assert scheduler._stop_event.delays == [3600.0, 25 * 3600.0]


def test_run_pending_logs_and_swallows_job_errors():
    """Test a failing job does not escape the scheduler."""
    calls = []

    def job():
        calls.append(1)
        raise RuntimeError("weather API down")

    scheduler = DailyJobScheduler(job)
    scheduler.run_pending()
    scheduler.run_pending()

    assert len(calls) == 2


def test_start_and_stop():
    """Test the timer thread starts once and stops promptly."""
    scheduler = DailyJobScheduler(lambda: None, hour=1)

    scheduler.start()
    assert scheduler.running
    scheduler.start()
    assert scheduler.running

    scheduler.stop(timeout=2.0)
    assert not scheduler.running


def test_run_weather_refresh_appends_cache_row_and_closes_session(db_session, weather_client, monkeypatch):
    """Test the daily job caches today's weather through its own session."""
    opened = []

    class TrackingSession(Session):
        was_closed = False

        def close(self):
            self.was_closed = True
            super().close()

    def session_factory():
        session = TrackingSession(bind=db_session.get_bind())
        opened.append(session)
        return session

    monkeypatch.setattr(session_module, "SessionLocal", session_factory)
    monkeypatch.setattr(weather_client_module, "get_weather_client", lambda: weather_client)

    run_weather_refresh()

    assert len(opened) == 1
    assert opened[0].was_closed
    assert weather_client.calls == 1
    rows = diary_service.get_cached_weather(date.today(), db_session)
    assert [row.weather for row in rows] == ["Clouds"]


def test_lifespan_starts_and_stops_weather_scheduler(monkeypatch):
    """Test app startup creates tables and runs the scheduler until shutdown."""
    created = []
    monkeypatch.setattr(events, "init_db", lambda: created.append(True))
    monkeypatch.setattr(events.settings, "WEATHER_REFRESH_ENABLED", True)

    with TestClient(app) as client:
        scheduler = app.state.weather_scheduler
        assert scheduler.running
        assert client.get("/health").status_code == 200

    assert not scheduler.running
    assert created == [True]


def test_lifespan_without_weather_refresh(monkeypatch):
    """Test the scheduler stays off when disabled in settings."""
    monkeypatch.setattr(events, "init_db", lambda: None)
    monkeypatch.setattr(events.settings, "WEATHER_REFRESH_ENABLED", False)

    with TestClient(app):
        assert app.state.weather_scheduler is None
