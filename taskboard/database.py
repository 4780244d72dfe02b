"""
Database Session Management - Core database connectivity layer
"""

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Generator
import logging

from taskboard.core.config import settings

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict:
    """Pool sizing applies to server databases only; SQLite gets thread-sharing instead"""
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.DB_POOL_SIZE,  # Number of persistent connections
        "max_overflow": settings.DB_MAX_OVERFLOW,  # Additional connections when pool is exhausted
        "pool_timeout": settings.DB_POOL_TIMEOUT,  # Wait time for available connection
        "pool_pre_ping": True,  # Verify connection health before using
    }


# Create database engine
engine = create_engine(
    settings.DATABASE_URL,  # PostgreSQL by default, SQLite in tests
    echo=settings.DEBUG,  # Log all SQL queries in debug mode
    **_engine_options(settings.DATABASE_URL),  # Pool or SQLite connect args
)


# Log when new database connections are established
@event.listens_for(engine, "connect")
def receive_connect(dbapi_conn, connection_record):
    logger.debug("🔌 New database connection established")


# Log when connections are closed
@event.listens_for(engine, "close")
def receive_close(dbapi_conn, connection_record):
    logger.debug("🔌 Database connection closed")


# Session factory - one session per request
SessionLocal = sessionmaker(
    autocommit=False,  # Require explicit commits
    autoflush=False,   # Services flush when they need generated ids
    bind=engine,       # Bind sessions to the configured engine
)

# Base class for all SQLAlchemy models - provides metadata and table registry
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides database session per request.
    A failed request rolls back everything the service wrote, so a task
    mutation and its activity row commit or fail together.
    """
    db = SessionLocal()  # New session for this request
    try:
        yield db  # Provide session to endpoint
    except Exception as e:
        logger.error(f"❌ Database error during request: {str(e)}", exc_info=True)
        db.rollback()  # Drop the task change and its activity row together
        raise  # Re-raise for the exception handlers
    finally:
        db.close()  # Always return the connection to the pool
        logger.debug("✅ Database session closed")


def init_db() -> None:
    """
    Create all tables.
    Used for development setup and tests.
    """
    logger.info("🏗️  Creating database tables...")
    try:
        import taskboard.models  # noqa: F401  # Register every model with Base
        Base.metadata.create_all(bind=engine)  # Create all tables defined in models
        logger.info("✅ Database tables created successfully")
    except Exception as e:
        logger.error(f"❌ Failed to create database tables: {str(e)}", exc_info=True)
        raise  # Fail fast - app shouldn't start without database


def check_db_connection() -> bool:
    """
    Verify database connectivity - used for health checks and startup validation.
    Returns True if connection successful, False otherwise.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))  # Simple query to verify connectivity
        logger.info("✅ Database connection successful")
        return True
    except Exception as e:
        logger.error(f"❌ Database connection failed: {str(e)}", exc_info=True)
        return False


def get_pool_stats() -> dict:
    """
    Get current database connection pool statistics.
    SQLite pools do not report sizes, so only the pool class is returned there.
    """
    pool = engine.pool  # Access connection pool
    stats = {"pool_class": type(pool).__name__}
    for name in ("size", "checkedout", "overflow", "checkedin"):
        metric = getattr(pool, name, None)
        if callable(metric):
            stats[name] = metric()
    return stats


def close_db_connections():
    """
    Gracefully close all database connections.
    Called during application shutdown.
    """
    logger.info("🔌 Closing database connections...")
    engine.dispose()  # Close all connections in pool
    logger.info("✅ All database connections closed")
