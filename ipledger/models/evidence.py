"""
Evidence data model
"""

from enum import Enum
from pydantic import BaseModel, Field


class EvidenceType(str, Enum):
    """Kinds of evidence a party can put on file"""
    DOCUMENTATION = "documentation"
    TESTIMONY = "testimony"
    TECHNICAL_ANALYSIS = "technical-analysis"
    OTHER = "other"


class Evidence(BaseModel):
    """
    Evidence entry, keyed by (case_id, evidence_id)
    Append-only; only the verified flag changes after submission
    """
    evidence_id: int = Field(..., ge=0, description="Globally unique, ordered by submission")
    case_id: int = Field(..., ge=1)
    evidence_type: EvidenceType
    description: str
    submitted_by: str
    submission_date: int = Field(..., ge=0)
    verified: bool = Field(default=False, description="Set by the contract owner only")

    class Config:
        use_enum_values = True
