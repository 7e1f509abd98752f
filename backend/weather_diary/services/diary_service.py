"""
Diary service for diary-related business logic.
"""
from sqlalchemy.orm import Session
from datetime import date
from typing import List
import logging
from weather_diary.core.exceptions import InvalidDate, DiaryNotFound, WeatherUnavailable
from weather_diary.models.diary import Diary
from weather_diary.models.date_weather import DateWeather
from weather_diary.repositories import diary_repository, date_weather_repository
from weather_diary.schemas.weather import WeatherObservation
from weather_diary.services.weather_client import WeatherClient

logger = logging.getLogger(__name__)

# Reads for dates after this are rejected
MAX_DIARY_DATE = date(3050, 1, 1)


def create_diary(
    entry_date: date,
    text: str,
    db: Session,
    weather_client: WeatherClient
) -> Diary:
    """
    Create a diary entry with the weather of its date.

    Uses the first cached observation for entry_date; when the cache has
    none, falls back to the current weather from the API. The whole
    check-then-write runs at SERIALIZABLE isolation so concurrent creates
    for one date cannot each fetch their own snapshot.
    """
    logger.info(f"Started to create diary for {entry_date}")
    # Isolation only applies to a connection procured by a new transaction
    if db.in_transaction():
        db.commit()
    db.connection(execution_options={"isolation_level": "SERIALIZABLE"})

    observation = _resolve_weather(entry_date, db, weather_client)

    diary = Diary(
        date=entry_date,
        weather=observation.weather,
        icon=observation.icon,
        temperature=observation.temperature,
        text=text
    )
    diary = diary_repository.save_diary(diary, db)

    logger.info(f"Finished creating diary {diary.id} for {entry_date}")
    return diary


def _resolve_weather(
    entry_date: date,
    db: Session,
    weather_client: WeatherClient
) -> WeatherObservation:
    """Cache first, API fallback. The fallback observation is not cached."""
    cached = date_weather_repository.get_weather_by_date(entry_date, db)
    if cached:
        logger.debug(f"Using cached weather {cached[0].id} for {entry_date}")
        return WeatherObservation.model_validate(cached[0], from_attributes=True)

    logger.info(f"No cached weather for {entry_date}, calling weather API")
    result = weather_client.fetch_current()
    if not result.ok:
        db.rollback()
        raise WeatherUnavailable(result.error)

    return result.observation


def read_diary(entry_date: date, db: Session) -> List[Diary]:
    """Get all diary entries for a date."""
    logger.debug(f"Read diary for {entry_date}")
    if entry_date > MAX_DIARY_DATE:
        raise InvalidDate()

    return diary_repository.get_diaries_by_date(entry_date, db)


def read_diaries(start_date: date, end_date: date, db: Session) -> List[Diary]:
    """Get diary entries between two dates, both inclusive."""
    return diary_repository.get_diaries_between(start_date, end_date, db)


def update_diary(entry_date: date, text: str, db: Session) -> Diary:
    """Replace the text of the first entry for a date."""
    diary = diary_repository.get_first_diary_by_date(entry_date, db)
    if not diary:
        raise DiaryNotFound(entry_date)

    diary.text = text
    return diary_repository.save_diary(diary, db)


def delete_diary(entry_date: date, db: Session) -> int:
    """Delete every entry for a date. Deleting an empty date is a no-op."""
    deleted = diary_repository.delete_diaries_by_date(entry_date, db)
    logger.info(f"Deleted {deleted} diary entries for {entry_date}")
    return deleted


def get_cached_weather(target_date: date, db: Session) -> List[DateWeather]:
    """Get cached weather rows for a date."""
    return date_weather_repository.get_weather_by_date(target_date, db)


def refresh_daily_weather(db: Session, weather_client: WeatherClient) -> DateWeather:
    """
    Fetch today's weather and append it to the cache.

    Scheduled once a day; repeated runs on one day add duplicate rows,
    which readers tolerate by taking the first.
    """
    result = weather_client.fetch_current()
    if not result.ok:
        logger.error(f"Daily weather refresh failed: {result.error}")
        raise WeatherUnavailable(result.error)

    observation = result.observation.model_copy(update={"date": date.today()})
    date_weather = date_weather_repository.save_weather(observation, db)

    logger.info(f"Saved weather for {date_weather.date}: {date_weather.weather}")
    return date_weather
