"""
Weather cache model for daily observations.
"""
from sqlalchemy import Column, String, Date, Float
from weather_diary.db.base import BaseModel


class DateWeather(BaseModel):
    """Daily weather observation.

    Rows are appended by the daily refresh and may repeat a date;
    readers always take the first row by id.
    """
    __tablename__ = "date_weather"

    date = Column(Date, nullable=False, index=True)
    weather = Column(String(50), nullable=False)
    icon = Column(String(10), nullable=False)
    temperature = Column(Float, nullable=False)
