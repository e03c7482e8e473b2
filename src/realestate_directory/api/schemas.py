"""
Pydantic Schemas for API Request/Response Models

These schemas define the JSON structure for API endpoints. Search forms,
registration inputs and domain records are reused from the models
package; this module only adds the envelopes around them.
"""
from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from src.realestate_directory.models.enums import ProfileStatus, ReviewTarget
from src.realestate_directory.models.profiles import Review


def to_public(record: BaseModel) -> Dict[str, Any]:
    """JSON-ready record with credentials removed."""
    if hasattr(record, "public_dict"):
        return record.public_dict()
    return record.model_dump(mode="json")


class HealthCheck(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "0.1.0"
    database: str = "connected"
    suburbs: int = 0
    timestamp: datetime


class ExpansionResult(BaseModel):
    """Suburbs considered near a query."""
    query: str
    radius_km: float
    suburbs: List[str]


class SearchResults(BaseModel):
    """Search response."""
    count: int
    results: List[Dict[str, Any]]


class ReviewCreate(BaseModel):
    """Review submitted by a signed-in consumer."""
    target_type: ReviewTarget
    rating: int
    comment: str = Field(default="", max_length=2000)


class ReviewList(BaseModel):
    """Reviews of one target with their average."""
    target_id: str
    average_rating: Optional[float] = None
    reviews: List[Review]


class StatusChange(BaseModel):
    """Admin moderation action."""
    status: ProfileStatus
