"""
Weather cache repository.
"""
from sqlalchemy.orm import Session
from datetime import date
from typing import List
from weather_diary.models.date_weather import DateWeather
from weather_diary.schemas.weather import WeatherObservation


def get_weather_by_date(target_date: date, db: Session) -> List[DateWeather]:
    """Get cached observations for a date, oldest first. May contain duplicates."""
    return db.query(DateWeather).filter(
        DateWeather.date == target_date
    ).order_by(DateWeather.id).all()


def save_weather(observation: WeatherObservation, db: Session) -> DateWeather:
    """Append an observation to the cache."""
    date_weather = DateWeather(
        date=observation.date,
        weather=observation.weather,
        icon=observation.icon,
        temperature=observation.temperature
    )
    db.add(date_weather)
    db.commit()
    db.refresh(date_weather)

    return date_weather
