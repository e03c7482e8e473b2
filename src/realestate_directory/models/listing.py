"""
Property Listing Models

Pydantic models for property listings shown on the properties search page.
"""
from typing import Optional, List
from datetime import datetime, timezone
from pydantic import BaseModel, Field, field_validator

from src.realestate_directory.models.enums import (
    Intent,
    ListingStatus,
    Segment,
    VISIBLE_LISTING_STATUSES,
)
from src.realestate_directory.models.location import Address, LocationRef


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Property(BaseModel):
    """
    A property listed for sale or lease.

    Attributes:
        property_id: Unique listing identifier
        address: Street address
        segment: Residential or commercial
        intent: buy, lease, sold or leased
        property_type: Free-text type (House, Apartment & Unit, Office, ...)
        price: Asking or sold price in AUD, if disclosed
        bedrooms: Bedroom count, if known
        bathrooms: Bathroom count, if known
        car_spaces: Car space count, if known
        features: Feature tags (Pool, Garage, ...)
        description: Listing copy
        media_urls: Photo and video URLs
        status: Publication status
        created_at: When the listing was created
    """

    property_id: str = Field(..., description="Listing identifier")
    address: Address
    segment: Segment
    intent: Intent
    property_type: str = Field(..., description="Property type label")
    price: Optional[float] = Field(None, ge=0, description="Price in AUD")
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    car_spaces: Optional[int] = Field(None, ge=0)
    features: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    media_urls: List[str] = Field(default_factory=list)
    status: ListingStatus = ListingStatus.UNPUBLISHED
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("features")
    @classmethod
    def strip_features(cls, v: List[str]) -> List[str]:
        """Drop blank feature tags."""
        return [feature.strip() for feature in v if feature and feature.strip()]

    def is_visible(self) -> bool:
        """Only published listings are shown in search results."""
        return self.status in VISIBLE_LISTING_STATUSES

    def search_locations(self) -> List[LocationRef]:
        return [self.address.to_location()]

    def search_text(self) -> str:
        """Descriptive text searched by the keyword filter."""
        state = self.address.state.value if self.address.state else ""
        return " ".join(
            [
                self.property_type,
                self.description or "",
                self.address.suburb,
                self.address.postcode,
                state,
                *self.features,
            ]
        )

    class Config:
        """Pydantic model configuration."""
        str_strip_whitespace = True
        validate_assignment = True
