"""
Diary repository for diary table queries.
"""
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional
from weather_diary.models.diary import Diary


def get_diaries_by_date(entry_date: date, db: Session) -> List[Diary]:
    """Get all diary entries for a date in insertion order."""
    return db.query(Diary).filter(
        Diary.date == entry_date
    ).order_by(Diary.id).all()


def get_diaries_between(start_date: date, end_date: date, db: Session) -> List[Diary]:
    """Get diary entries with start_date <= date <= end_date."""
    return db.query(Diary).filter(
        Diary.date >= start_date,
        Diary.date <= end_date
    ).order_by(Diary.date, Diary.id).all()


def get_first_diary_by_date(entry_date: date, db: Session) -> Optional[Diary]:
    """Get the earliest stored entry for a date, or None."""
    return db.query(Diary).filter(
        Diary.date == entry_date
    ).order_by(Diary.id).first()


def save_diary(diary: Diary, db: Session) -> Diary:
    """Insert a new entry or flush changes to a persistent one."""
    db.add(diary)
    db.commit()
    db.refresh(diary)

    return diary


def delete_diaries_by_date(entry_date: date, db: Session) -> int:
    """Delete every entry for a date. Returns the number of rows removed."""
    deleted = db.query(Diary).filter(
        Diary.date == entry_date
    ).delete(synchronize_session=False)
    db.commit()

    return deleted
