"""
Registration Input Models

What a new account submits: the profile details plus sign-in credentials.
Server-assigned fields (id, status, counters, public IDs) are not accepted.
"""
from pydantic import BaseModel, Field, field_validator, model_validator

from config.settings import settings
from src.realestate_directory.models.profiles import (
    AgencyDetails,
    AgentDetails,
    ConsumerDetails,
    ServiceDetails,
    ToolDetails,
)

MIN_PASSWORD_LENGTH = 9


def is_reserved_email(email: str) -> bool:
    """Admin addresses are provisioned by operators, never self-registered."""
    return email.strip().lower().endswith(settings.admin_email_domain.lower())


class Credentials(BaseModel):
    email: str
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip().lower()
        if "@" not in v:
            raise ValueError("email must contain '@'")
        if is_reserved_email(v):
            raise ValueError("this email domain is reserved for administrators")
        return v


class AgencyRegistration(Credentials, AgencyDetails):
    pass


class AgentRegistration(Credentials, AgentDetails):
    pass


class ServiceRegistration(Credentials, ServiceDetails):
    @model_validator(mode="after")
    def require_categories_and_areas(self):
        if not self.categories:
            raise ValueError("Select at least one category")
        if not self.service_areas:
            raise ValueError("Add at least one service area")
        return self


class ToolRegistration(Credentials, ToolDetails):
    @model_validator(mode="after")
    def require_coverage(self):
        if not self.coverage_areas:
            raise ValueError("Add at least one coverage area")
        return self


class ConsumerRegistration(Credentials, ConsumerDetails):
    pass
