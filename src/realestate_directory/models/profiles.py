"""
Profile Data Models

Pydantic models for consumer accounts, professional profiles (agencies,
agents, service and tool providers), reviews and signed-in sessions.
"""
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from src.realestate_directory.models.enums import (
    AgentType,
    AustralianState,
    Classification,
    ProfileStatus,
    ReviewTarget,
    Role,
    ServiceCategory,
    ToolCategory,
    VISIBLE_PROFILE_STATUSES,
)
from src.realestate_directory.models.listing import utc_now
from src.realestate_directory.models.location import LocationRef, ServiceArea
from src.realestate_directory.transformers.address_formatter import format_address_text


class AccountBase(BaseModel):
    """
    Fields shared by every account that can sign in.

    Attributes:
        id: Internal identifier
        email: Sign-in email (stored lowercase)
        password_hash: passlib hash of the password
        created_at: Registration timestamp
    """

    id: str
    email: str
    password_hash: str = ""
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip().lower()
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v

    def public_dict(self) -> dict:
        """JSON-ready representation without credentials."""
        return self.model_dump(mode="json", exclude={"password_hash"})

    class Config:
        """Pydantic model configuration."""
        str_strip_whitespace = True
        validate_assignment = True


class ProfileBase(AccountBase):
    """An account that must be approved before it appears in search."""

    status: ProfileStatus = ProfileStatus.PENDING

    def is_visible(self) -> bool:
        return self.status in VISIBLE_PROFILE_STATUSES


class ConsumerDetails(BaseModel):
    first_name: str
    surname: str
    mobile: str = ""
    suburb: str = ""
    postcode: str = ""


class ConsumerProfile(AccountBase, ConsumerDetails):
    """Member of the public; can sign in and write reviews."""

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.surname}".strip()


class AgencyDetails(BaseModel):
    """Agency fields supplied at registration."""

    classification: Classification
    name: str
    logo: str = ""
    principal_name: str = ""
    principal_email: str = ""
    principal_mobile: str = ""
    street_address: str = ""
    suburb: str
    state: AustralianState
    postcode: str
    phone: str = ""
    office_url: str = ""
    crm: str = ""


class AgencyProfile(ProfileBase, AgencyDetails):
    """
    Real estate agency.

    The counters (sold, for sale, leased, for lease) start at zero on
    registration; reviews_score mirrors the average review rating.
    """

    reviews_score: float = 0
    sold_current_year: int = 0
    for_sale: int = 0
    leased_current_year: int = 0
    for_lease: int = 0

    @property
    def display_name(self) -> str:
        return self.name

    def search_locations(self) -> List[LocationRef]:
        return [
            LocationRef(
                suburb=self.suburb,
                postcode=self.postcode,
                address_text=format_address_text(
                    None, self.street_address, self.suburb, self.postcode, self.state.value
                ),
            )
        ]

    def search_text(self) -> str:
        return " ".join([self.name, self.suburb, self.postcode, self.state.value, self.crm])


class AgentDetails(BaseModel):
    classification: Classification
    agent_type: AgentType
    name: str
    agency_name: str = ""
    agency_logo: str = ""
    principal_name: str = ""
    principal_email: str = ""
    principal_mobile: str = ""
    office_url: str = ""
    crm: str = ""
    unique_agent_id: str = ""
    photo: str = ""
    phone: str = ""
    suburb: str
    postcode: str
    state: Optional[AustralianState] = None
    properties_sold: int = Field(default=0, ge=0)
    number_of_listings: int = Field(default=0, ge=0)
    average_sold_price: float = Field(default=0, ge=0)


class AgentProfile(ProfileBase, AgentDetails):
    """Individual agent, optionally attached to an agency by name."""

    @property
    def display_name(self) -> str:
        return self.name

    def search_locations(self) -> List[LocationRef]:
        state = self.state.value if self.state else None
        return [
            LocationRef(
                suburb=self.suburb,
                postcode=self.postcode,
                address_text=format_address_text(None, None, self.suburb, self.postcode, state),
            )
        ]

    def search_text(self) -> str:
        return " ".join([self.name, self.agency_name, self.suburb, self.postcode])


class ProviderDetails(BaseModel):
    """Business details shared by service and tool providers."""

    business_name: str
    principal_name: str = ""
    principal_email: str = ""
    principal_mobile: str = ""
    street_address: str = ""
    suburb: str = ""
    state: Optional[AustralianState] = None
    postcode: str = ""
    phone: str = ""
    website: str = ""
    logo: str = ""
    about_us: str = Field(default="", max_length=1400)


class ServiceDetails(ProviderDetails):
    categories: List[ServiceCategory] = Field(default_factory=list)
    service_areas: List[ServiceArea] = Field(default_factory=list)


class ToolDetails(ProviderDetails):
    tool_category: ToolCategory
    coverage_areas: List[ServiceArea] = Field(default_factory=list)


class ProviderMixin:
    @property
    def display_name(self) -> str:
        return self.business_name

    def _areas(self) -> List[ServiceArea]:
        raise NotImplementedError

    def search_locations(self) -> List[LocationRef]:
        """Providers are found through the areas they service, not their office."""
        return [area.to_location() for area in self._areas()]


class ServiceProvider(ProviderMixin, ProfileBase, ServiceDetails):
    service_id: str

    def _areas(self) -> List[ServiceArea]:
        return self.service_areas

    def search_text(self) -> str:
        return " ".join(
            [self.business_name, self.about_us, *(category.value for category in self.categories)]
        )


class ToolProvider(ProviderMixin, ProfileBase, ToolDetails):
    tool_id: str

    def _areas(self) -> List[ServiceArea]:
        return self.coverage_areas

    def search_text(self) -> str:
        return " ".join([self.business_name, self.about_us, self.tool_category.value])


class Review(BaseModel):
    """
    Consumer review of an agency or agent.

    Attributes:
        id: Review identifier
        target_id: Reviewed profile id
        target_type: agency or agent
        author_id: Reviewer account id
        author_name: Reviewer display name
        rating: Whole stars from 1 to 5
        comment: Free text
        created_at: When the review was written
    """

    id: str
    target_id: str
    target_type: ReviewTarget
    author_id: str
    author_name: str
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""
    created_at: datetime = Field(default_factory=utc_now)


class Session(BaseModel):
    """Identity carried by a signed-in user's token."""

    user_id: str
    email: str
    role: Role
    name: str
