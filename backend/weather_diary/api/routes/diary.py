"""
Diary routes: create, read, update and delete entries by date.
"""
from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.orm import Session
from typing import List
from datetime import date
from weather_diary.db.session import get_db
from weather_diary.core.exceptions import InvalidDate, DiaryNotFound, WeatherUnavailable
from weather_diary.schemas.diary import DiaryCreate, DiaryUpdate, DiaryResponse
from weather_diary.services import diary_service
from weather_diary.services.weather_client import WeatherClient, get_weather_client

router = APIRouter(prefix="/diary", tags=["diary"])


@router.post("", response_model=DiaryResponse, status_code=status.HTTP_201_CREATED)
def create_diary(
    diary_data: DiaryCreate,
    db: Session = Depends(get_db),
    weather_client: WeatherClient = Depends(get_weather_client)
):
    """Create a diary entry; weather comes from the cache or the weather API."""
    try:
        return diary_service.create_diary(diary_data.date, diary_data.text, db, weather_client)
    except WeatherUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )


@router.get("", response_model=List[DiaryResponse])
def read_diaries(
    start_date: date,
    end_date: date,
    db: Session = Depends(get_db)
):
    """Get diary entries between start_date and end_date (inclusive)."""
    return diary_service.read_diaries(start_date, end_date, db)


@router.get("/{date}", response_model=List[DiaryResponse])
def read_diary(
    date: date,
    db: Session = Depends(get_db)
):
    """Get all diary entries for a date."""
    try:
        return diary_service.read_diary(date, db)
    except InvalidDate as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.put("/{date}", response_model=DiaryResponse)
def update_diary(
    date: date,
    diary_data: DiaryUpdate,
    db: Session = Depends(get_db)
):
    """Update the text of the first diary entry for a date."""
    try:
        return diary_service.update_diary(date, diary_data.text, db)
    except DiaryNotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.delete("/{date}", status_code=status.HTTP_204_NO_CONTENT)
def delete_diary(
    date: date,
    db: Session = Depends(get_db)
):
    """Delete all diary entries for a date."""
    diary_service.delete_diary(date, db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
