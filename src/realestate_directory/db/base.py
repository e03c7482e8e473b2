"""
SQLAlchemy Base and Mixins

Declarative base shared by the directory tables.
"""
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Declarative base for directory tables."""

    id: Any


class TimestampMixin:
    """
    Row bookkeeping columns.

    created_at is set by the database unless the caller supplies one (reviews
    carry their own); updated_at moves on every UPDATE, e.g. status changes.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="When the row was inserted"
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
        comment="When the row last changed"
    )


def import_all_models():
    """
    Register every table on Base.metadata.

    Must run before Base.metadata.create_all.
    """
    from src.realestate_directory.db import models  # noqa: F401
