"""
Profile Service

Public profile pages and owner edits from the agency and agent dashboards.
"""
from typing import Optional

from sqlalchemy.orm import Session as DbSession

from src.realestate_directory.db.repository import DirectoryRepository
from src.realestate_directory.exceptions import NotProfileOwnerError, ProfileNotFoundError
from src.realestate_directory.models.enums import EntityType, Role
from src.realestate_directory.models.profile_updates import AgencyUpdate, AgentUpdate, ProfileUpdate
from src.realestate_directory.models.profiles import Session
from src.realestate_directory.services.approval_service import MODERATED_TYPES
from src.realestate_directory.services.auth_service import has_role
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)

EDITABLE_TYPES = {
    EntityType.AGENCY: AgencyUpdate,
    EntityType.AGENT: AgentUpdate,
}


class ProfileService:
    def __init__(self, session: DbSession, repository: Optional[DirectoryRepository] = None):
        self.session = session
        self.repository = repository or DirectoryRepository()

    def get_public_profile(self, entity_type: EntityType, record_id: str):
        """
        One approved profile by id.

        Pending, rejected and suspended profiles are reported as missing, the
        same as unknown ids.

        Raises:
            ProfileNotFoundError: No visible profile of this kind has the id
        """
        entity_type = EntityType(entity_type)
        if entity_type not in MODERATED_TYPES:
            raise ProfileNotFoundError(entity_type.value, record_id)

        profile = self.repository.get(self.session, entity_type, record_id)
        if profile is None or not profile.is_visible():
            raise ProfileNotFoundError(entity_type.value, record_id)
        return profile

    def update_own_profile(self, current: Session, entity_type: EntityType, record_id: str,
                           changes: ProfileUpdate):
        """
        Apply a dashboard edit to the signed-in account's own profile.

        Only fields present in the edit model change; status is untouched.

        Args:
            current: Signed-in session
            entity_type: agency or agent
            record_id: Profile being edited
            changes: AgencyUpdate or AgentUpdate

        Raises:
            NotProfileOwnerError: The session is not this profile's account
            ProfileNotFoundError: The account's profile no longer exists
        """
        entity_type = EntityType(entity_type)
        if entity_type not in EDITABLE_TYPES:
            raise ValueError(f"{entity_type.value} profiles are not editable")

        if not has_role(current, Role(entity_type.value)) or current.user_id != record_id:
            logger.warning(
                "profile_update_forbidden",
                entity_type=entity_type.value,
                id=record_id,
                user_id=current.user_id if current else None,
            )
            raise NotProfileOwnerError(entity_type.value, record_id)

        profile = self.repository.get(self.session, entity_type, record_id)
        if profile is None:
            raise ProfileNotFoundError(entity_type.value, record_id)

        fields = EDITABLE_TYPES[entity_type].model_validate(
            changes.model_dump(exclude_unset=True)
        ).model_dump(exclude_unset=True, exclude_none=True)
        for name, value in fields.items():
            setattr(profile, name, value)

        self.repository.save(self.session, profile)
        logger.info("profile_updated", entity_type=entity_type.value, id=record_id, fields=sorted(fields))
        return profile
