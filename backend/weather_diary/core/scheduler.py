"""
Background timer for the daily weather refresh.
"""
from datetime import datetime, timedelta
from typing import Callable, Optional
import logging
import threading

logger = logging.getLogger(__name__)


def next_run_time(after: datetime, hour: int, minute: int = 0) -> datetime:
    """The first local hour:minute strictly after the given time."""
    next_run = after.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if next_run <= after:
        next_run += timedelta(days=1)
    return next_run


def seconds_until_next_run(now: datetime, hour: int, minute: int = 0) -> float:
    """Seconds from now until the next local hour:minute strictly after now."""
    return (next_run_time(now, hour, minute) - now).total_seconds()


class DailyJobScheduler:
    """Run a job once a day at a fixed local time on a daemon thread."""

    def __init__(
        self,
        job: Callable[[], object],
        hour: int = 1,
        minute: int = 0,
        name: str = "daily-job",
        clock: Callable[[], datetime] = datetime.now
    ):
        self.job = job
        self.hour = hour
        self.minute = minute
        self.name = name
        self.clock = clock
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        """Start the timer thread. Calling start twice is a no-op."""
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._loop, name=self.name, daemon=True)
        self._thread.start()
        logger.info(f"Scheduled {self.name} daily at {self.hour:02d}:{self.minute:02d}")

    def stop(self, timeout: Optional[float] = 5.0):
        """Signal the timer thread and wait for it to exit."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info(f"Stopped {self.name}")

    def run_pending(self):
        """Run the job once now. Errors are logged, not raised."""
        try:
            self.job()
        except Exception as e:
            logger.error(f"{self.name} failed: {e}", exc_info=True)

    def _loop(self):
        next_run = next_run_time(self.clock(), self.hour, self.minute)
        while True:
            delay = max((next_run - self.clock()).total_seconds(), 0.0)
            logger.debug(f"{self.name} sleeping {delay:.0f}s until {next_run}")
            # wait() returns True once stop() is called
            if self._stop_event.wait(delay):
                return
            # wait() times on the monotonic clock; the wall clock may lag behind
            if self.clock() < next_run:
                continue
            self.run_pending()
            # Count from the slot just run so an early wake cannot fire twice a day
            next_run = next_run_time(max(self.clock(), next_run), self.hour, self.minute)


def run_weather_refresh():
    """Refresh the weather cache with a dedicated session."""
    from weather_diary.db.session import SessionLocal
    from weather_diary.services.diary_service import refresh_daily_weather
    from weather_diary.services.weather_client import get_weather_client

    db = SessionLocal()
    try:
        refresh_daily_weather(db, get_weather_client())
    finally:
        db.close()
