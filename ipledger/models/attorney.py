"""
Attorney data model
Represents a registered intellectual-property attorney
"""

from enum import Enum
from pydantic import BaseModel, Field


class AttorneyStatus(str, Enum):
    """Registration status, changed only by the contract owner"""
    PENDING = "pending"  # Registered, awaiting owner review
    VERIFIED = "verified"
    SUSPENDED = "suspended"


class Attorney(BaseModel):
    """
    Attorney registration record
    One record per principal; the ID never changes once assigned
    """
    attorney_id: int = Field(..., ge=1, description="Sequential attorney identifier")
    principal: str = Field(..., description="Identity that owns this registration")
    name: str
    specialization: str
    bar_number: str
    status: AttorneyStatus = Field(default=AttorneyStatus.PENDING)
    registration_date: int = Field(..., ge=0, description="Block height at registration")
    verified: bool = Field(default=False, description="True iff status is verified")

    class Config:
        use_enum_values = True
