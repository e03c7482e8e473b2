"""
Approval Service

Admin moderation of professional profiles.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from src.realestate_directory.db.repository import DirectoryRepository
from src.realestate_directory.exceptions import (
    InvalidStatusTransition,
    ProfileNotFoundError,
)
from src.realestate_directory.models.enums import EntityType, ProfileStatus
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)

MODERATED_TYPES = (EntityType.AGENCY, EntityType.AGENT, EntityType.SERVICE, EntityType.TOOL)

# Statuses each target status may be reached from
ALLOWED_FROM = {
    ProfileStatus.APPROVED: {ProfileStatus.PENDING, ProfileStatus.REJECTED, ProfileStatus.SUSPENDED},
    ProfileStatus.REJECTED: {ProfileStatus.PENDING, ProfileStatus.APPROVED, ProfileStatus.SUSPENDED},
    ProfileStatus.SUSPENDED: {ProfileStatus.APPROVED},
}


def can_transition(current: ProfileStatus, requested: ProfileStatus) -> bool:
    return ProfileStatus(current) in ALLOWED_FROM.get(ProfileStatus(requested), set())


class ApprovalService:
    def __init__(self, session: Session, repository: Optional[DirectoryRepository] = None):
        self.session = session
        self.repository = repository or DirectoryRepository()

    def list_profiles(self, entity_type: EntityType) -> List:
        """Every profile of one kind, whatever its status."""
        return self.repository.list(self.session, self._moderated(entity_type))

    def set_status(self, entity_type: EntityType, record_id: str, new_status: ProfileStatus):
        """
        Approve, reject or suspend a profile.

        Raises:
            ProfileNotFoundError: No profile of this kind has the id
            InvalidStatusTransition: The change is not allowed from the current status
        """
        entity_type = self._moderated(entity_type)
        new_status = ProfileStatus(new_status)

        profile = self.repository.get(self.session, entity_type, record_id)
        if profile is None:
            raise ProfileNotFoundError(entity_type.value, record_id)

        if not can_transition(profile.status, new_status):
            logger.warning(
                "status_transition_rejected",
                entity_type=entity_type.value,
                id=record_id,
                current=profile.status.value,
                requested=new_status.value,
            )
            raise InvalidStatusTransition(profile.status.value, new_status.value)

        updated = self.repository.update_status(self.session, entity_type, record_id, new_status)
        logger.info(
            "profile_status_changed",
            entity_type=entity_type.value,
            id=record_id,
            previous=profile.status.value,
            status=new_status.value,
        )
        return updated

    @staticmethod
    def _moderated(entity_type: EntityType) -> EntityType:
        entity_type = EntityType(entity_type)
        if entity_type not in MODERATED_TYPES:
            raise ValueError(f"{entity_type.value} records are not moderated")
        return entity_type
