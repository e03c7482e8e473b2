"""
Database Package

Database models, connection management, and data persistence layer.
"""
from src.realestate_directory.db.base import Base
from src.realestate_directory.db.session import (
    engine,
    SessionLocal,
    get_db_session,
    health_check,
    create_all_tables,
)
from src.realestate_directory.db.models import DirectoryEntry, ReviewRecord
from src.realestate_directory.db.repository import (
    BaseRepository,
    DirectoryRepository,
    ReviewRepository,
)

__all__ = [
    # Base
    "Base",
    # Session management
    "engine",
    "SessionLocal",
    "get_db_session",
    "health_check",
    "create_all_tables",
    # Models
    "DirectoryEntry",
    "ReviewRecord",
    # Repositories
    "BaseRepository",
    "DirectoryRepository",
    "ReviewRepository",
]
