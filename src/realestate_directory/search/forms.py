"""
Search Forms

Raw search input per entity type, validated where it enters the system.
Enumerated choices accept the UI wildcards ("any", "Any", "all", "") and
map them to None; free-form numeric fields stay text and are parsed
leniently by the facets. An unreadable radius falls back to the default.
"""
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from config.settings import settings
from src.realestate_directory.models.enums import (
    AgentType,
    Classification,
    Intent,
    Segment,
    ServiceCategory,
    ToolCategory,
)
from src.realestate_directory.search.facets import parse_number

WILDCARD_INPUTS = {"", "any", "all"}


def wildcard_to_none(v):
    """Map UI wildcard choices to None before enum validation."""
    if v is None:
        return None
    if isinstance(v, str) and v.strip().lower() in WILDCARD_INPUTS:
        return None
    return v


def to_text(v) -> str:
    """Accept numbers or text for free-form numeric inputs."""
    if v is None:
        return ""
    return str(v)


class LocationForm(BaseModel):
    """Location fields shared by every search page."""

    query_text: str = Field("", description="Suburb, postcode or address fragment")
    include_surrounding: bool = Field(False, description="Include surrounding suburbs")
    radius_km: float = Field(settings.default_radius_km, description="Surrounding radius (km)")

    @field_validator("query_text", mode="before")
    @classmethod
    def coerce_query(cls, v) -> str:
        return to_text(v)

    @field_validator("radius_km", mode="before")
    @classmethod
    def lenient_radius(cls, v) -> float:
        radius = parse_number(v)
        return settings.default_radius_km if radius is None else radius


class PropertySearchForm(LocationForm):
    segment: Optional[Segment] = None
    intent: Optional[Intent] = None
    property_type: str = "Any"
    price_min: str = ""
    price_max: str = ""
    only_with_price: bool = False
    bedrooms: str = "Any"
    bathrooms: str = "Any"
    car_spaces: str = "Any"
    keyword: str = ""
    feature_keywords: List[str] = Field(default_factory=list)

    @field_validator("segment", "intent", mode="before")
    @classmethod
    def allow_any(cls, v):
        return wildcard_to_none(v)

    @field_validator("price_min", "price_max", "bedrooms", "bathrooms", "car_spaces", mode="before")
    @classmethod
    def numeric_text(cls, v) -> str:
        return to_text(v)


class AgencySearchForm(LocationForm):
    classification: Optional[Classification] = Classification.RESIDENTIAL
    keyword: str = Field("", description="Matches agency name and location text")

    @field_validator("classification", mode="before")
    @classmethod
    def allow_any(cls, v):
        return wildcard_to_none(v)


class AgentSearchForm(LocationForm):
    classification: Optional[Classification] = Classification.RESIDENTIAL
    agent_type: Optional[AgentType] = AgentType.SELLING
    keyword: str = Field("", description="Matches agent and agency names")

    @field_validator("classification", "agent_type", mode="before")
    @classmethod
    def allow_any(cls, v):
        return wildcard_to_none(v)


class ServiceSearchForm(LocationForm):
    category: Optional[ServiceCategory] = None

    @field_validator("category", mode="before")
    @classmethod
    def allow_all(cls, v):
        return wildcard_to_none(v)


class ToolSearchForm(LocationForm):
    tool_category: Optional[ToolCategory] = None

    @field_validator("tool_category", mode="before")
    @classmethod
    def allow_all(cls, v):
        return wildcard_to_none(v)
