"""
Database session management for the dealership sales service.

This module provides:
1. Engine construction from settings (SQLite or PostgreSQL URLs)
2. A session factory and the FastAPI `get_db` dependency
3. A connectivity check used by the health endpoint
4. Schema creation for development databases

Usage:
    from dealership.db.session import get_db

    # In FastAPI dependency
    def some_endpoint(db: Session = Depends(get_db)):
        ...
"""

import logging
import threading
from typing import Generator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from dealership.core.config import settings
from dealership.db.models import Base

# Configure module logger
logger = logging.getLogger(__name__)

# Constants
CONNECTION_POOL_SIZE = settings.DB_POOL_SIZE
CONNECTION_MAX_OVERFLOW = settings.DB_MAX_OVERFLOW
CONNECTION_POOL_TIMEOUT = settings.DB_POOL_TIMEOUT
CONNECTION_POOL_RECYCLE = settings.DB_POOL_RECYCLE
CONNECTION_POOL_PRE_PING = True


# -----------------------------------------------------------------------------
# Database Connection Setup
# -----------------------------------------------------------------------------


def _set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON;")
    cursor.close()


def create_db_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.

    SQLite engines get foreign key enforcement on every new connection; an
    in-memory SQLite URL shares one connection across threads.

    Args:
        database_url: Database URL (defaults to settings.DATABASE_URL)
        echo: Whether to log emitted SQL (defaults to settings.SQL_ECHO)

    Returns:
        Configured Engine
    """
    url = database_url or settings.DATABASE_URL
    echo = settings.SQL_ECHO if echo is None else echo

    if url.startswith("sqlite"):
        if ":memory:" in url or url.rstrip("/") == "sqlite:":
            db_engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                echo=echo,
            )
        else:
            db_engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=QueuePool,
                pool_size=CONNECTION_POOL_SIZE,
                max_overflow=CONNECTION_MAX_OVERFLOW,
                pool_timeout=CONNECTION_POOL_TIMEOUT,
                pool_pre_ping=CONNECTION_POOL_PRE_PING,
                pool_recycle=CONNECTION_POOL_RECYCLE,
                echo=echo,
            )
        event.listen(db_engine, "connect", _set_sqlite_pragma)
    else:
        db_engine = create_engine(
            url,
            pool_size=CONNECTION_POOL_SIZE,
            max_overflow=CONNECTION_MAX_OVERFLOW,
            pool_timeout=CONNECTION_POOL_TIMEOUT,
            pool_pre_ping=CONNECTION_POOL_PRE_PING,
            pool_recycle=CONNECTION_POOL_RECYCLE,
            echo=echo,
        )

    logger.info(f"Created SQLAlchemy engine for {db_engine.url.render_as_string(hide_password=True)}")
    return db_engine


engine = create_db_engine()

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# -----------------------------------------------------------------------------
# FastAPI Dependency
# -----------------------------------------------------------------------------


def get_db() -> Generator[Session, None, None]:
    """
    Get a database session with proper resource management.

    Returns:
        SQLAlchemy Session for database operations
    """
    thread_id = threading.get_ident()
    logger.debug(f"Creating DB session for thread {thread_id}")

    db = SessionLocal()

    try:
        yield db
    except Exception as e:
        logger.error(f"Error in get_db for thread {thread_id}: {e}")
        raise
    finally:
        db.close()
        logger.debug(f"Closed DB session for thread {thread_id}")


# -----------------------------------------------------------------------------
# Database Verification and Initialization
# -----------------------------------------------------------------------------


def verify_db_connection(db_engine: Optional[Engine] = None) -> bool:
    """
    Verify that we can connect to the database.

    Returns:
        True if connection succeeds, False otherwise
    """
    db_engine = db_engine or engine
    try:
        with db_engine.connect() as connection:
            result = connection.execute(text("SELECT 1")).scalar()
            logger.info(f"Database connection verified: {result}")
            return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection verification failed: {e}")
        return False


def init_db(reset: bool = False, db_engine: Optional[Engine] = None) -> None:
    """
    Create the dealership tables.

    Args:
        reset: Whether to drop all tables before creating them
        db_engine: Engine to use (defaults to the module engine)
    """
    db_engine = db_engine or engine
    logger.info("Initializing database schema...")

    if reset:
        logger.info("Dropping all tables for reset...")
        Base.metadata.drop_all(bind=db_engine)

    Base.metadata.create_all(bind=db_engine)
    logger.info(f"Database schema initialized with {len(Base.metadata.tables)} tables")
