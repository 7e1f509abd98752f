"""
Database initialization.
"""
from weather_diary.db.base import Base
from weather_diary.db.session import engine

# Import all models so SQLAlchemy can register them
from weather_diary.models import Diary, DateWeather  # noqa: F401


def init_db(bind=None):
    """Create the diary and weather cache tables if missing."""
    Base.metadata.create_all(bind=bind or engine)


if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    print("Database initialized successfully!")
