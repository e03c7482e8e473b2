"""
SQLAlchemy ORM Models

Directory records are stored as validated JSON payloads keyed by entity
type, with the columns the repository filters on (email, status) pulled out.
"""
from typing import Optional

from sqlalchemy import JSON, Integer, String, Text, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column

from src.realestate_directory.db.base import Base, TimestampMixin


class DirectoryEntry(Base, TimestampMixin):
    """
    One property listing or account of any kind.

    payload holds the pydantic model dump (mode="json") of the record;
    status and email duplicate payload fields for indexed lookups.
    """
    __tablename__ = "directory_entries"

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="Record identifier (property_id for listings)"
    )
    seq: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Insertion order, used for stable listing order"
    )
    entity_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="property, agency, agent, service, tool or consumer"
    )
    email: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Lowercased sign-in email (accounts only)"
    )
    status: Mapped[Optional[str]] = mapped_column(
        String(20),
        nullable=True,
        comment="Profile or listing status"
    )
    payload: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        comment="Serialized record"
    )

    __table_args__ = (
        Index("idx_directory_entries_type_status", "entity_type", "status"),
        Index("idx_directory_entries_type_email", "entity_type", "email"),
    )

    def __repr__(self) -> str:
        return f"<DirectoryEntry(type={self.entity_type}, id={self.id}, status={self.status})>"


class ReviewRecord(Base, TimestampMixin):
    """Review left by a consumer on an agency or agent."""
    __tablename__ = "reviews"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    seq: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Insertion order within the table"
    )
    target_id: Mapped[str] = mapped_column(String(64), nullable=False)
    target_type: Mapped[str] = mapped_column(String(20), nullable=False)
    author_id: Mapped[str] = mapped_column(String(64), nullable=False)
    author_name: Mapped[str] = mapped_column(String(255), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="check_rating_range"),
        Index("idx_reviews_target_id", "target_id"),
    )

    def __repr__(self) -> str:
        return f"<ReviewRecord(target={self.target_id}, rating={self.rating})>"
