"""
Infringement case data model
Represents one patent-infringement dispute tracked through its lifecycle
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, validator


class Severity(str, Enum):
    """How serious the reported infringement is"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class CaseStatus(str, Enum):
    """Current status of the case"""
    REPORTED = "reported"  # Initial state on creation
    EVIDENCE_SUBMITTED = "evidence-submitted"  # At least one piece of evidence on file
    ENFORCEMENT_INITIATED = "enforcement-initiated"  # Enforcement action opened
    SETTLEMENT_PROPOSED = "settlement-proposed"  # Proposal awaiting both parties
    RESOLVED = "resolved"  # Settlement executed
    DISMISSED = "dismissed"  # Closed without settlement


TERMINAL_STATUSES = (CaseStatus.RESOLVED, CaseStatus.DISMISSED)


class InfringementCase(BaseModel):
    """
    Complete case record
    Reporter and alleged infringer are fixed at creation and drive every
    permission check on the case
    """
    case_id: int = Field(..., ge=1, description="Sequential case identifier")
    patent_id: int = Field(..., ge=0, description="Opaque patent reference")

    # Parties
    reporter: str = Field(..., description="Patent holder who filed the case")
    alleged_infringer: str = Field(..., description="Counterparty accused in the case")

    description: str
    severity: Severity
    status: CaseStatus = Field(default=CaseStatus.REPORTED)

    # Heights
    report_date: int = Field(..., ge=0)
    resolution_date: Optional[int] = Field(None, ge=0)

    damages_claimed: int = Field(..., ge=0)

    class Config:
        use_enum_values = True

    @validator('alleged_infringer')
    def validate_parties(cls, v, values):
        """A principal cannot report itself"""
        if v == values.get('reporter'):
            raise ValueError("Reporter and alleged infringer must differ")
        return v

    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def is_party(self, principal: str) -> bool:
        """Check if principal is the reporter or the alleged infringer"""
        return principal in (self.reporter, self.alleged_infringer)
