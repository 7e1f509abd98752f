"""
Pydantic schemas for Diary entity.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime


class DiaryBase(BaseModel):
    """Base diary schema."""
    date: date
    text: Optional[str] = None


class DiaryCreate(DiaryBase):
    """Schema for diary creation."""
    pass


class DiaryUpdate(BaseModel):
    """Schema for diary text update."""
    text: str


class DiaryResponse(DiaryBase):
    """Schema for diary response."""
    id: int
    weather: str
    icon: str
    temperature: float
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
