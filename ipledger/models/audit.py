"""
Audit logging models
Trail of every accepted mutation on the ledger
"""

from enum import Enum
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class AuditAction(str, Enum):
    """Types of actions that are audited"""
    # Attorney registry
    ATTORNEY_REGISTERED = "attorney_registered"
    ATTORNEY_VERIFIED = "attorney_verified"
    ATTORNEY_STATUS_UPDATED = "attorney_status_updated"

    # Case lifecycle
    CASE_REPORTED = "case_reported"
    CASE_STATUS_UPDATED = "case_status_updated"

    # Evidence
    EVIDENCE_SUBMITTED = "evidence_submitted"
    EVIDENCE_VERIFIED = "evidence_verified"

    # Enforcement
    ENFORCEMENT_INITIATED = "enforcement_initiated"
    ENFORCEMENT_UPDATED = "enforcement_updated"

    # Settlement
    SETTLEMENT_PROPOSED = "settlement_proposed"
    SETTLEMENT_ACCEPTED = "settlement_accepted"
    SETTLEMENT_EXECUTED = "settlement_executed"


class AuditLog(BaseModel):
    """
    Individual audit log entry
    Sequence numbers are assigned by the ledger state in append order
    """
    sequence: int = Field(..., ge=1, description="Position in the audit trail")
    height: int = Field(..., ge=0, description="Block height of the mutation")

    action: AuditAction
    caller: str = Field(..., description="Principal that performed the action")

    # Context
    case_id: Optional[int] = None
    attorney_id: Optional[int] = None

    details: Dict[str, Any] = Field(
        default_factory=dict,
        description="Structured details about the action"
    )

    class Config:
        use_enum_values = True
