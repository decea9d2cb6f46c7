"""
Database session management.
"""
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from moodwall.core.config import settings
from moodwall.db.base import Base


def build_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    """Create an engine; SQLite connections get foreign key enforcement."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        new_engine = create_engine(url, echo=echo, **kwargs)

        @event.listens_for(new_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return new_engine

    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=3600,
        **kwargs
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_factory() -> sessionmaker:
    """Dependency for operations that open their own sessions (concurrent reads)."""
    return SessionLocal


def init_db(bind: Engine = None):
    """Initialize database tables."""
    # Import models so their tables and triggers are registered on Base.metadata
    import moodwall.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
