"""
FastAPI Dependencies

Provides dependency injection for database sessions, settings and the
shared suburb gazetteer.
"""
from functools import lru_cache
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from config.settings import settings
from src.realestate_directory.db.session import SessionLocal
from src.realestate_directory.geo.gazetteer import SuburbGazetteer
from src.realestate_directory.search.engine import FilterEngine
from src.realestate_directory.search.expander import DistanceExpander
from src.realestate_directory.services.search_service import DirectorySearchService


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency.

    Commits when the request handler returns normally.

    Yields:
        SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_settings():
    """
    Settings dependency.

    Returns:
        Application settings
    """
    return settings


@lru_cache(maxsize=1)
def get_gazetteer() -> SuburbGazetteer:
    """Suburb dataset, loaded once per process."""
    if settings.suburbs_csv:
        return SuburbGazetteer.from_csv(settings.suburbs_csv)
    return SuburbGazetteer.default()


def get_expander(gazetteer: SuburbGazetteer = Depends(get_gazetteer)) -> DistanceExpander:
    return DistanceExpander(gazetteer)


def get_search_service(
    db: Session = Depends(get_db),
    expander: DistanceExpander = Depends(get_expander),
) -> DirectorySearchService:
    return DirectorySearchService(db, engine=FilterEngine(expander))
