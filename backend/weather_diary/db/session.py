"""
Database engine and request-scoped sessions.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from weather_diary.core.config import settings

# Routes run on a thread pool; SQLite connections must be shareable across it
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    connect_args=connect_args,
    pool_pre_ping=True,
    pool_recycle=3600
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency yielding a session that is closed after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
