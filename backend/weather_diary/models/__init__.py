"""Models package - Import all models for SQLAlchemy registration."""
from weather_diary.models.diary import Diary
from weather_diary.models.date_weather import DateWeather

__all__ = [
    "Diary",
    "DateWeather",
]
