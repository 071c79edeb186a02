"""
Database engine and per-request session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from globaltrotters.core.config import settings
from globaltrotters.db.base import Base


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # SQLite connections are handed across FastAPI threadpool workers
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_recycle": 3600}


engine = create_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, **_engine_options(settings.DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Yield a session that is closed after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create every table registered on the declarative base."""
    import globaltrotters.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
