"""
Weather cache routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from datetime import date
from weather_diary.db.session import get_db
from weather_diary.core.exceptions import WeatherUnavailable
from weather_diary.schemas.weather import DateWeatherResponse
from weather_diary.services import diary_service
from weather_diary.services.weather_client import WeatherClient, get_weather_client

router = APIRouter(prefix="/weather", tags=["weather"])


@router.post("/refresh", response_model=DateWeatherResponse, status_code=status.HTTP_201_CREATED)
def refresh_weather(
    db: Session = Depends(get_db),
    weather_client: WeatherClient = Depends(get_weather_client)
):
    """Run the daily weather refresh now."""
    try:
        return diary_service.refresh_daily_weather(db, weather_client)
    except WeatherUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )


@router.get("/{date}", response_model=List[DateWeatherResponse])
def get_weather_for_date(
    date: date,
    db: Session = Depends(get_db)
):
    """Get cached weather observations for a date."""
    return diary_service.get_cached_weather(date, db)
