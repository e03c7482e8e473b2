"""
Repository Pattern for Data Access

Reads and writes directory records (listings, accounts) and reviews. The
search and domain services only ever talk to storage through these classes.
"""
from typing import List, Optional, Any, Iterable, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from src.realestate_directory.db.models import DirectoryEntry, ReviewRecord
from src.realestate_directory.models.enums import EntityType, ReviewTarget
from src.realestate_directory.models.listing import Property
from src.realestate_directory.models.profiles import (
    AgencyProfile,
    AgentProfile,
    ConsumerProfile,
    Review,
    ServiceProvider,
    ToolProvider,
)
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')

ENTITY_MODELS = {
    EntityType.PROPERTY: Property,
    EntityType.AGENCY: AgencyProfile,
    EntityType.AGENT: AgentProfile,
    EntityType.SERVICE: ServiceProvider,
    EntityType.TOOL: ToolProvider,
    EntityType.CONSUMER: ConsumerProfile,
}


def entity_type_of(record: BaseModel) -> EntityType:
    """Entity type for a record instance."""
    for entity_type, model in ENTITY_MODELS.items():
        if type(record) is model:
            return entity_type
    raise TypeError(f"Unsupported record type: {type(record).__name__}")


def record_id_of(record: BaseModel) -> str:
    if isinstance(record, Property):
        return record.property_id
    return record.id


def _status_value(status) -> Optional[str]:
    if status is None:
        return None
    return getattr(status, "value", status)


class BaseRepository:
    """
    Base repository with common CRUD operations.

    Generic repository that can be extended for specific models.
    """

    def __init__(self, model: Type[T]):
        """
        Initialize repository with model class.

        Args:
            model: SQLAlchemy model class
        """
        self.model = model
        logger.debug("repository_initialized", model=model.__name__)

    def get_by_id(self, session: Session, id_value: Any) -> Optional[T]:
        """
        Get single record by primary key.

        Args:
            session: Database session
            id_value: Primary key value

        Returns:
            Model instance or None
        """
        result = session.get(self.model, id_value)
        logger.debug(
            "repository_get_by_id",
            model=self.model.__name__,
            id=id_value,
            found=result is not None
        )
        return result

    def create(self, session: Session, **kwargs) -> T:
        """
        Create new record.

        Args:
            session: Database session
            **kwargs: Model field values

        Returns:
            Created model instance
        """
        kwargs.setdefault("seq", self._next_seq(session))
        instance = self.model(**kwargs)
        session.add(instance)
        session.flush()
        logger.info("repository_created", model=self.model.__name__, id=getattr(instance, 'id', None))
        return instance

    def update(self, session: Session, id_value: Any, **kwargs) -> Optional[T]:
        """
        Update existing record.

        Args:
            session: Database session
            id_value: Primary key value
            **kwargs: Fields to update

        Returns:
            Updated model instance or None
        """
        instance = self.get_by_id(session, id_value)
        if not instance:
            logger.warning("repository_update_not_found", model=self.model.__name__, id=id_value)
            return None

        for key, value in kwargs.items():
            setattr(instance, key, value)

        session.flush()
        logger.info("repository_updated", model=self.model.__name__, id=id_value)
        return instance

    def count(self, session: Session) -> int:
        """
        Count total records.

        Args:
            session: Database session

        Returns:
            Total count
        """
        count = session.scalar(select(func.count()).select_from(self.model))
        logger.debug("repository_count", model=self.model.__name__, count=count)
        return count

    def _next_seq(self, session: Session) -> int:
        current = session.scalar(select(func.max(self.model.seq)))
        return (current or 0) + 1


class DirectoryRepository(BaseRepository):
    """
    Repository for listings and accounts.

    Records go in and come out as pydantic models; rows whose payload no
    longer validates are skipped with a warning rather than failing a read.
    """

    def __init__(self):
        super().__init__(DirectoryEntry)

    def add(self, session: Session, record: BaseModel) -> BaseModel:
        """
        Persist a new record.

        Args:
            session: Database session
            record: Property or profile model

        Returns:
            The same record
        """
        entity_type = entity_type_of(record)
        self.create(
            session,
            id=record_id_of(record),
            entity_type=entity_type.value,
            email=getattr(record, "email", None),
            status=_status_value(getattr(record, "status", None)),
            payload=record.model_dump(mode="json"),
        )
        return record

    def save(self, session: Session, record: BaseModel) -> Optional[BaseModel]:
        """
        Overwrite a stored record with the given model.

        Returns:
            The record, or None if it was never added
        """
        entry = self.update(
            session,
            record_id_of(record),
            email=getattr(record, "email", None),
            status=_status_value(getattr(record, "status", None)),
            payload=record.model_dump(mode="json"),
        )
        return record if entry is not None else None

    def list(self, session: Session, entity_type: EntityType,
             statuses: Optional[Iterable] = None) -> List[BaseModel]:
        """
        List records of one kind in insertion order.

        Args:
            session: Database session
            entity_type: Kind of record
            statuses: Only return records with one of these statuses (None = all)

        Returns:
            List of pydantic models
        """
        entity_type = EntityType(entity_type)
        query = select(DirectoryEntry).where(DirectoryEntry.entity_type == entity_type.value)

        if statuses is not None:
            values = [_status_value(status) for status in statuses]
            query = query.where(DirectoryEntry.status.in_(values))

        entries = session.execute(query.order_by(DirectoryEntry.seq)).scalars().all()
        records = [self._to_model(entry) for entry in entries]
        records = [record for record in records if record is not None]

        logger.debug(
            "repository_list",
            entity_type=entity_type.value,
            statuses=None if statuses is None else sorted(values),
            count=len(records),
        )
        return records

    def get(self, session: Session, entity_type: EntityType, record_id: str) -> Optional[BaseModel]:
        """
        Get a record of one kind by id.

        Returns:
            Pydantic model or None (also None when the id belongs to another kind)
        """
        entry = self.get_by_id(session, record_id)
        if entry is None or entry.entity_type != EntityType(entity_type).value:
            return None
        return self._to_model(entry)

    def get_by_email(self, session: Session, entity_type: EntityType, email: str) -> Optional[BaseModel]:
        """
        Find an account by email, case-insensitively.

        Returns:
            Pydantic model or None
        """
        if not email:
            return None

        query = (
            select(DirectoryEntry)
            .where(DirectoryEntry.entity_type == EntityType(entity_type).value)
            .where(DirectoryEntry.email == email.strip().lower())
            .order_by(DirectoryEntry.seq)
        )
        entry = session.execute(query).scalars().first()
        return self._to_model(entry) if entry is not None else None

    def update_status(self, session: Session, entity_type: EntityType, record_id: str,
                      status) -> Optional[BaseModel]:
        """
        Change a record's status.

        Returns:
            Updated model, or None if not found
        """
        record = self.get(session, entity_type, record_id)
        if record is None:
            logger.warning("repository_status_update_not_found", entity_type=str(entity_type), id=record_id)
            return None

        record.status = status
        self.save(session, record)
        logger.info(
            "repository_status_updated",
            entity_type=EntityType(entity_type).value,
            id=record_id,
            status=_status_value(status),
        )
        return record

    def _to_model(self, entry: DirectoryEntry) -> Optional[BaseModel]:
        model = ENTITY_MODELS[EntityType(entry.entity_type)]
        try:
            return model.model_validate(entry.payload)
        except ValidationError as e:
            logger.warning(
                "repository_payload_invalid",
                entity_type=entry.entity_type,
                id=entry.id,
                error_count=e.error_count(),
            )
            return None


class ReviewRepository(BaseRepository):
    """Repository for reviews."""

    def __init__(self):
        super().__init__(ReviewRecord)

    def add(self, session: Session, review: Review) -> Review:
        self.create(
            session,
            id=review.id,
            target_id=review.target_id,
            target_type=review.target_type.value,
            author_id=review.author_id,
            author_name=review.author_name,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
        )
        return review

    def list_for_target(self, session: Session, target_id: str) -> List[Review]:
        """
        Reviews of one agency or agent, oldest first.
        """
        query = (
            select(ReviewRecord)
            .where(ReviewRecord.target_id == target_id)
            .order_by(ReviewRecord.seq)
        )
        rows = session.execute(query).scalars().all()
        return [
            Review(
                id=row.id,
                target_id=row.target_id,
                target_type=ReviewTarget(row.target_type),
                author_id=row.author_id,
                author_name=row.author_name,
                rating=row.rating,
                comment=row.comment,
                created_at=row.created_at,
            )
            for row in rows
        ]

    def average_rating(self, session: Session, target_id: str) -> Optional[float]:
        """
        Mean rating for a target, or None without reviews.
        """
        average = session.scalar(
            select(func.avg(ReviewRecord.rating)).where(ReviewRecord.target_id == target_id)
        )
        return float(average) if average is not None else None
