"""
Database session helpers.

The store handle is created once per job and passed explicitly to each
service; `session_scope` guarantees it is closed on every exit path.
"""

import logging
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from backend.config import settings
from backend.models.schema import Base

logger = logging.getLogger(__name__)


def create_session_factory(database_url: Optional[str] = None,
                           create_tables: bool = True) -> sessionmaker:
    """
    Build a session factory bound to a new engine.

    Args:
        database_url: SQLAlchemy URL (default: settings.DATABASE_URL)
        create_tables: Create missing tables before returning
    """
    url = database_url or settings.DATABASE_URL
    engine = create_engine(url, echo=settings.DB_ECHO)

    if create_tables:
        Base.metadata.create_all(engine)

    logger.debug(f"Session factory ready for {engine.url!r}")
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Yield a database session and ensure it's closed after use.

    Commits are the caller's business; anything left uncommitted is
    discarded when the session closes.
    """
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
        logger.debug("Database session closed")


def dispose_session_factory(session_factory: sessionmaker):
    """Release the connection pool behind a session factory."""
    session_factory.kw['bind'].dispose()
