"""
Diary model for daily entries with a weather snapshot.
"""
from sqlalchemy import Column, String, Date, Text, Float
from weather_diary.db.base import BaseModel


class Diary(BaseModel):
    """Diary entry for a date; weather fields are copied at creation."""
    __tablename__ = "diary"

    date = Column(Date, nullable=False, index=True)
    weather = Column(String(50), nullable=False)  # Condition label, e.g. "Clouds"
    icon = Column(String(10), nullable=False)  # Provider icon code, e.g. "04d"
    temperature = Column(Float, nullable=False)
    text = Column(Text, nullable=True)
