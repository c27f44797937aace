"""Database session management."""
from typing import Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from pghostel.config.settings import Settings, settings as default_settings


def build_engine(settings: Settings = default_settings, url: Optional[str] = None) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database.

    Pool sizing only applies to server databases; SQLite connections are
    shared across FastAPI's worker threads.
    """
    url = url or settings.get_database_url()
    kwargs = {
        "echo": settings.DATABASE_ECHO,
        "pool_pre_ping": True,
        "connect_args": dict(settings.DB_CONNECT_ARGS),
    }
    if url.startswith("sqlite"):
        kwargs["connect_args"].setdefault("check_same_thread", False)
    else:
        kwargs["pool_size"] = settings.DB_POOL_SIZE
        kwargs["max_overflow"] = settings.DB_POOL_OVERFLOW
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    """Create the session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency function that yields a database session.

    The session factory is the one the application was built with
    (``app.state.session_factory``).

    Usage in FastAPI endpoints:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
