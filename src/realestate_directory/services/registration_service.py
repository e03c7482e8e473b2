"""
Registration Service

Creates consumer accounts and professional profiles. Professional profiles
start out pending and only appear in search once an admin approves them.
"""
import random
import string
import time
import uuid
from typing import Optional

from pydantic import BaseModel
from sqlalchemy.orm import Session

from config.settings import settings
from src.realestate_directory.db.repository import DirectoryRepository
from src.realestate_directory.exceptions import DuplicateEmailError
from src.realestate_directory.models.enums import EntityType, ProfileStatus
from src.realestate_directory.models.profiles import (
    AgencyProfile,
    AgentProfile,
    ConsumerProfile,
    ServiceProvider,
    ToolProvider,
)
from src.realestate_directory.models.registration import (
    AgencyRegistration,
    AgentRegistration,
    ConsumerRegistration,
    MIN_PASSWORD_LENGTH,
    ServiceRegistration,
    ToolRegistration,
    is_reserved_email,
)
from src.realestate_directory.services.auth_service import get_password_hash
from src.realestate_directory.utils.logger import get_logger

logger = get_logger(__name__)

SERVICE_ID_PREFIX = "SVC"
TOOL_ID_PREFIX = "TOL"
_BASE36 = string.digits + string.ascii_uppercase


def to_base36(value: int) -> str:
    if value <= 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def generate_public_id(prefix: str, rng: Optional[random.Random] = None) -> str:
    """
    Public provider ID, e.g. SVC-LZ3K9QF2ABCD.

    The middle part is the current time in milliseconds (base 36), followed
    by four random uppercase letters.
    """
    rng = rng or random
    stamp = to_base36(int(time.time() * 1000))
    suffix = "".join(rng.choice(string.ascii_uppercase) for _ in range(4))
    return f"{prefix}-{stamp}{suffix}"


def new_record_id() -> str:
    return uuid.uuid4().hex


class RegistrationService:
    """Registers accounts of every kind."""

    def __init__(self, session: Session, repository: Optional[DirectoryRepository] = None):
        self.session = session
        self.repository = repository or DirectoryRepository()

    def register_agency(self, form: AgencyRegistration) -> AgencyProfile:
        profile = AgencyProfile(**self._account_fields(EntityType.AGENCY, form))
        return self._store(EntityType.AGENCY, profile)

    def register_agent(self, form: AgentRegistration) -> AgentProfile:
        profile = AgentProfile(**self._account_fields(EntityType.AGENT, form))
        return self._store(EntityType.AGENT, profile)

    def register_service_provider(self, form: ServiceRegistration) -> ServiceProvider:
        profile = ServiceProvider(
            service_id=generate_public_id(SERVICE_ID_PREFIX),
            **self._account_fields(EntityType.SERVICE, form),
        )
        return self._store(EntityType.SERVICE, profile, public_id=profile.service_id)

    def register_tool_provider(self, form: ToolRegistration) -> ToolProvider:
        profile = ToolProvider(
            tool_id=generate_public_id(TOOL_ID_PREFIX),
            **self._account_fields(EntityType.TOOL, form),
        )
        return self._store(EntityType.TOOL, profile, public_id=profile.tool_id)

    def register_consumer(self, form: ConsumerRegistration) -> ConsumerProfile:
        consumer = ConsumerProfile(**self._account_fields(EntityType.CONSUMER, form))
        return self._store(EntityType.CONSUMER, consumer)

    def provision_admin(self, email: str, password: str, first_name: str = "Site",
                        surname: str = "Admin") -> ConsumerProfile:
        """
        Create an administrator account.

        Admin addresses cannot come through the public registration forms;
        operators create them here. The account signs in as a consumer.

        Raises:
            ValueError: Email outside the admin domain or password too short
            DuplicateEmailError: The address is already registered
        """
        email = email.strip().lower()
        if not is_reserved_email(email):
            raise ValueError(f"admin accounts must use the {settings.admin_email_domain} domain")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"password must be at least {MIN_PASSWORD_LENGTH} characters")
        if self.repository.get_by_email(self.session, EntityType.CONSUMER, email) is not None:
            raise DuplicateEmailError(EntityType.CONSUMER.value, email)

        admin = ConsumerProfile(
            id=new_record_id(),
            email=email,
            password_hash=get_password_hash(password),
            first_name=first_name,
            surname=surname,
        )
        self.repository.add(self.session, admin)
        logger.info("admin_provisioned", id=admin.id)
        return admin

    def _account_fields(self, entity_type: EntityType, form: BaseModel) -> dict:
        if self.repository.get_by_email(self.session, entity_type, form.email) is not None:
            logger.warning("registration_duplicate_email", entity_type=entity_type.value)
            raise DuplicateEmailError(entity_type.value, form.email)

        fields = form.model_dump(exclude={"password"})
        fields["id"] = new_record_id()
        fields["password_hash"] = get_password_hash(form.password)
        if entity_type != EntityType.CONSUMER:
            fields["status"] = ProfileStatus.PENDING
        return fields

    def _store(self, entity_type: EntityType, record: BaseModel, public_id: Optional[str] = None):
        self.repository.add(self.session, record)
        logger.info("registration_created", entity_type=entity_type.value, id=record.id)
        logger.info(
            "welcome_email_stub",
            entity_type=entity_type.value,
            recipient=record.email,
            public_id=public_id,
        )
        return record
