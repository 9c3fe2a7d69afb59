"""Pydantic models for API request validation."""

from typing import Optional
from pydantic import BaseModel, Field

from ipledger.models import ActionStatus, ActionType, AttorneyStatus, CaseStatus, EvidenceType, Severity


class AttorneyRegistration(BaseModel):
    """Request model for registering the caller as an attorney."""
    name: str
    specialization: str
    bar_number: str


class AttorneyStatusChange(BaseModel):
    """Request model for owner status changes on an attorney."""
    status: AttorneyStatus


class PatentOwnerRecord(BaseModel):
    """Request model for recording patent ownership."""
    patent_id: int = Field(..., ge=0)
    owner: str


class InfringementReport(BaseModel):
    """Request model for reporting an infringement."""
    patent_id: int = Field(..., ge=0)
    alleged_infringer: str
    description: str
    severity: Severity
    damages_claimed: int = Field(..., ge=0)


class EvidenceSubmission(BaseModel):
    """Request model for submitting evidence."""
    evidence_type: EvidenceType
    description: str


class EvidenceVerification(BaseModel):
    verified: bool = True


class EnforcementRequest(BaseModel):
    """Request model for initiating enforcement."""
    action_type: ActionType


class EnforcementUpdate(BaseModel):
    """Request model for moving an enforcement action forward."""
    status: ActionStatus
    outcome: Optional[str] = None


class SettlementProposal(BaseModel):
    """Request model for proposing a settlement."""
    amount: int = Field(..., ge=0)
    terms: str


class CaseStatusChange(BaseModel):
    status: CaseStatus
