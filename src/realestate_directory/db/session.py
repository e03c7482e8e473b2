"""
Database Session Management

Engine and session factory for the directory database. SQLite is the
default store; any SQLAlchemy URL with a pooled driver also works.
"""
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event, exc, text
from sqlalchemy.orm import Session, sessionmaker

from config.settings import settings
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)


def engine_options(database_url: str) -> dict:
    """
    Engine keyword arguments for a database URL.

    SQLite gets a thread-shareable connection (the API serves requests from
    a thread pool); server databases get the configured pool settings.
    """
    if database_url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "echo": settings.database_echo,
        }
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_timeout": settings.database_pool_timeout,
        "pool_recycle": settings.database_pool_recycle,
        "pool_pre_ping": True,  # Verify connections before using
        "echo": settings.database_echo,  # Log SQL queries if enabled
    }


engine = create_engine(settings.database_url, **engine_options(settings.database_url))


@event.listens_for(engine, "connect")
def receive_connect(dbapi_conn, connection_record):
    """
    Event listener for new database connections.
    """
    logger.debug("database_connection_established")


# Create session factory
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False
)


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """
    Unit of work for scripts and background jobs.

    Commits when the block exits normally; rolls back and re-raises on any
    error. API requests use the get_db dependency instead.

    Usage:
        with get_db_session() as session:
            agencies = DirectoryRepository().list(session, EntityType.AGENCY)
    """
    session = SessionLocal()
    try:
        logger.debug("database_session_created")
        yield session
        session.commit()
        logger.debug("database_session_committed")
    except exc.SQLAlchemyError as e:
        session.rollback()
        logger.error(
            "database_session_rollback",
            error=str(e),
            error_type=type(e).__name__
        )
        raise
    except Exception as e:
        session.rollback()
        logger.error(
            "database_session_error",
            error=str(e),
            error_type=type(e).__name__
        )
        raise
    finally:
        session.close()
        logger.debug("database_session_closed")


def health_check(session: Session) -> bool:
    """
    Check database connection health.

    Args:
        session: Database session

    Returns:
        True if database is accessible, False otherwise
    """
    try:
        session.execute(text("SELECT 1"))
        return True
    except exc.SQLAlchemyError as e:
        logger.error(
            "database_health_check_failed",
            error=str(e),
            error_type=type(e).__name__
        )
        return False


def create_all_tables(bind=None):
    """
    Create all database tables defined in models.

    Args:
        bind: Engine to create tables on (default: application engine)
    """
    from src.realestate_directory.db.base import Base, import_all_models

    logger.info("creating_database_tables")

    import_all_models()
    Base.metadata.create_all(bind=bind or engine)

    logger.info("database_tables_created")
