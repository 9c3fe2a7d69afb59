"""
Infringement case routes: reporting, evidence, enforcement, settlement.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from ipledger.api.config import get_ledger
from ipledger.api.dependencies import commit, get_caller
from ipledger.api.models import (
    CaseStatusChange,
    EnforcementRequest,
    EnforcementUpdate,
    EvidenceSubmission,
    EvidenceVerification,
    InfringementReport,
    SettlementProposal,
)
from ipledger.ledger import IPLedger
from ipledger.models import AuditLog, EnforcementAction, Evidence, InfringementCase, Settlement

router = APIRouter()


@router.post("/cases")
def report_infringement(
    report: InfringementReport,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    """
    Report an infringement of a patent the caller owns.

    Returns:
        {"ok": case_id} or {"error": code}
    """
    return commit(
        ledger, ledger.cases.report_infringement, caller,
        report.patent_id, report.alleged_infringer, report.description,
        report.severity, report.damages_claimed,
    )


@router.get("/cases/count")
def total_cases(ledger: IPLedger = Depends(get_ledger)):
    return {"total": ledger.cases.total_cases()}


@router.get("/cases/{case_id}", response_model=InfringementCase)
def get_case(case_id: int, ledger: IPLedger = Depends(get_ledger)):
    case = ledger.cases.get_case(case_id)
    if not case:
        raise HTTPException(status_code=404, detail="Case not found")
    return case


@router.get("/cases/{case_id}/resolved")
def is_resolved(case_id: int, ledger: IPLedger = Depends(get_ledger)):
    return {"resolved": ledger.cases.is_resolved(case_id)}


@router.patch("/cases/{case_id}/status")
def update_case_status(
    case_id: int,
    change: CaseStatusChange,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    """
    Override a case's status (reporter or contract owner), e.g. dismiss it.
    """
    return commit(ledger, ledger.cases.update_case_status, caller, case_id, change.status)


@router.get("/cases/{case_id}/audit", response_model=List[AuditLog])
def get_case_audit(case_id: int, ledger: IPLedger = Depends(get_ledger)):
    return ledger.cases.audit_trail(case_id)


# Evidence

@router.post("/cases/{case_id}/evidence")
def submit_evidence(
    case_id: int,
    submission: EvidenceSubmission,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    """
    Submit evidence as the reporter or the alleged infringer.

    Returns:
        {"ok": evidence_id} or {"error": code}
    """
    return commit(
        ledger, ledger.evidence.submit_evidence, caller,
        case_id, submission.evidence_type, submission.description,
    )


@router.get("/cases/{case_id}/evidence", response_model=List[Evidence])
def list_evidence(case_id: int, ledger: IPLedger = Depends(get_ledger)):
    return ledger.evidence.list_evidence(case_id)


@router.get("/cases/{case_id}/evidence/{evidence_id}", response_model=Evidence)
def get_evidence(case_id: int, evidence_id: int, ledger: IPLedger = Depends(get_ledger)):
    evidence = ledger.evidence.get_evidence(case_id, evidence_id)
    if not evidence:
        raise HTTPException(status_code=404, detail="Evidence not found")
    return evidence


@router.post("/cases/{case_id}/evidence/{evidence_id}/verify")
def verify_evidence(
    case_id: int,
    evidence_id: int,
    verification: Optional[EvidenceVerification] = None,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    """
    Mark evidence verified or unverified (contract owner only).
    """
    verified = verification.verified if verification else True
    return commit(ledger, ledger.evidence.verify_evidence, caller, case_id, evidence_id, verified)


# Enforcement

@router.post("/cases/{case_id}/enforcement")
def initiate_enforcement(
    case_id: int,
    request: EnforcementRequest,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    """
    Initiate (or replace) the case's enforcement action.
    """
    return commit(ledger, ledger.enforcement.initiate_enforcement, caller, case_id, request.action_type)


@router.patch("/cases/{case_id}/enforcement")
def update_enforcement(
    case_id: int,
    update: EnforcementUpdate,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    return commit(
        ledger, ledger.enforcement.update_enforcement_status, caller,
        case_id, update.status, update.outcome,
    )


@router.get("/cases/{case_id}/enforcement", response_model=EnforcementAction)
def get_enforcement_action(case_id: int, ledger: IPLedger = Depends(get_ledger)):
    action = ledger.enforcement.get_enforcement_action(case_id)
    if not action:
        raise HTTPException(status_code=404, detail="Enforcement action not found")
    return action


# Settlement

@router.post("/cases/{case_id}/settlement")
def propose_settlement(
    case_id: int,
    proposal: SettlementProposal,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    """
    Propose settlement terms; replaces any earlier proposal.
    """
    return commit(
        ledger, ledger.settlements.propose_settlement, caller,
        case_id, proposal.amount, proposal.terms,
    )


@router.post("/cases/{case_id}/settlement/accept")
def accept_settlement(
    case_id: int,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    """
    Accept the current proposal; the second party's acceptance resolves the case.
    """
    return commit(ledger, ledger.settlements.accept_settlement, caller, case_id)


@router.get("/cases/{case_id}/settlement", response_model=Settlement)
def get_settlement(case_id: int, ledger: IPLedger = Depends(get_ledger)):
    settlement = ledger.settlements.get_settlement(case_id)
    if not settlement:
        raise HTTPException(status_code=404, detail="Settlement not found")
    return settlement
