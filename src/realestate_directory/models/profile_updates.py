"""
Profile Edit Models

Fields a signed-in agency or agent may change on its own profile. Anything
else (status, classification, counters) is set at registration or by an
admin, and is rejected here.
"""
from typing import Optional

from pydantic import BaseModel, Field


class ProfileUpdate(BaseModel):
    class Config:
        """Pydantic model configuration."""
        extra = "forbid"
        str_strip_whitespace = True


class AgencyUpdate(ProfileUpdate):
    phone: Optional[str] = None
    street_address: Optional[str] = None


class AgentUpdate(ProfileUpdate):
    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
