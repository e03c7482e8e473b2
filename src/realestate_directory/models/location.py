"""
Location Data Models

Pydantic models for suburbs, street addresses and provider service areas.
"""
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.realestate_directory.models.enums import AREA_RADII_KM, AustralianState
from src.realestate_directory.transformers.address_formatter import (
    format_address_text,
    normalize_postcode,
)


class SuburbRecord(BaseModel):
    """
    Gazetteer entry for a single Australian suburb.

    Attributes:
        suburb: Suburb name as displayed
        postcode: 4-digit postcode (leading zero kept, e.g. "0800")
        state: State or territory code
        latitude: WGS84 latitude, if known
        longitude: WGS84 longitude, if known
    """

    suburb: str = Field(..., min_length=1, description="Suburb name")
    postcode: str = Field(..., pattern=r"^\d{4}$", description="4-digit postcode")
    state: AustralianState = Field(..., description="State or territory")
    latitude: Optional[float] = Field(None, description="WGS84 latitude", ge=-90, le=90)
    longitude: Optional[float] = Field(None, description="WGS84 longitude", ge=-180, le=180)

    @field_validator("postcode", mode="before")
    @classmethod
    def pad_postcode(cls, v):
        """Restore leading zeros lost by numeric sources."""
        if v is None:
            return v
        return normalize_postcode(v) or str(v).strip()

    def has_coordinates(self) -> bool:
        """Check if record has valid coordinates."""
        return self.latitude is not None and self.longitude is not None

    class Config:
        """Pydantic model configuration."""
        frozen = True
        str_strip_whitespace = True


@dataclass(frozen=True)
class LocationRef:
    """
    The location fields of a search candidate that the location facet reads.

    Attributes:
        suburb: Suburb name
        postcode: Postcode text
        address_text: Full formatted address for substring matching
    """
    suburb: str
    postcode: str
    address_text: str


class Address(BaseModel):
    """Street address of a property listing."""

    unit: Optional[str] = None
    street: Optional[str] = None
    suburb: str
    state: Optional[AustralianState] = None
    postcode: str

    def to_location(self) -> LocationRef:
        state = self.state.value if self.state else None
        return LocationRef(
            suburb=self.suburb,
            postcode=self.postcode,
            address_text=format_address_text(
                self.unit, self.street, self.suburb, self.postcode, state
            ),
        )

    class Config:
        str_strip_whitespace = True


class ServiceArea(BaseModel):
    """A suburb a provider services, with the radius they travel."""

    suburb: str
    postcode: str
    state: AustralianState
    radius_km: int = Field(25, description="One of 5, 25 or 50")

    @field_validator("radius_km")
    @classmethod
    def validate_radius(cls, v: int) -> int:
        if v not in AREA_RADII_KM:
            raise ValueError(f"radius_km must be one of {AREA_RADII_KM}")
        return v

    def to_location(self) -> LocationRef:
        return LocationRef(
            suburb=self.suburb,
            postcode=self.postcode,
            address_text=format_address_text(
                None, None, self.suburb, self.postcode, self.state.value
            ),
        )

    class Config:
        str_strip_whitespace = True
