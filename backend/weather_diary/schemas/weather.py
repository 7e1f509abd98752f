"""
Pydantic schemas for weather observations.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime


class WeatherObservation(BaseModel):
    """A single day's weather as reported by the provider."""
    date: date
    weather: str  # Condition label, e.g. "Clouds"
    icon: str
    temperature: float


class DateWeatherResponse(WeatherObservation):
    """Schema for a cached weather row."""
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class WeatherFetchResult(BaseModel):
    """Outcome of a weather API call: either an observation or an error reason."""
    observation: Optional[WeatherObservation] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.observation is not None

    @classmethod
    def success(cls, observation: WeatherObservation) -> "WeatherFetchResult":
        return cls(observation=observation)

    @classmethod
    def failure(cls, reason: str) -> "WeatherFetchResult":
        return cls(error=reason)
