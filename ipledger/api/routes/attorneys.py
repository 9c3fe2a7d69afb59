"""
Attorney registry routes.
"""

from fastapi import APIRouter, Depends, HTTPException

from ipledger.api.config import get_ledger
from ipledger.api.dependencies import commit, get_caller
from ipledger.api.models import AttorneyRegistration, AttorneyStatusChange
from ipledger.ledger import IPLedger
from ipledger.models import Attorney

router = APIRouter()


@router.post("/attorneys")
def register_attorney(
    registration: AttorneyRegistration,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    """
    Register the calling principal as an attorney.

    Returns:
        {"ok": attorney_id} or {"error": code}
    """
    return commit(
        ledger, ledger.attorneys.register, caller,
        registration.name, registration.specialization, registration.bar_number,
    )


@router.get("/attorneys/count")
def total_attorneys(ledger: IPLedger = Depends(get_ledger)):
    return {"total": ledger.attorneys.total_attorneys()}


@router.get("/attorneys/{attorney_id}", response_model=Attorney)
def get_attorney(attorney_id: int, ledger: IPLedger = Depends(get_ledger)):
    """
    Get an attorney record by ID.

    Args:
        attorney_id: Sequential attorney ID

    Returns:
        Attorney if found
    """
    attorney = ledger.attorneys.get_attorney(attorney_id)
    if not attorney:
        raise HTTPException(status_code=404, detail="Attorney not found")
    return attorney


@router.get("/attorneys/{attorney_id}/verified")
def is_attorney_verified(attorney_id: int, ledger: IPLedger = Depends(get_ledger)):
    return {"verified": ledger.attorneys.is_verified(attorney_id)}


@router.post("/attorneys/{attorney_id}/verify")
def verify_attorney(
    attorney_id: int,
    change: AttorneyStatusChange,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    """
    Set an attorney's verification status (contract owner only).
    """
    return commit(ledger, ledger.attorneys.verify, caller, attorney_id, change.status)


@router.post("/attorneys/{attorney_id}/status")
def update_attorney_status(
    attorney_id: int,
    change: AttorneyStatusChange,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    """
    Change an attorney's status, e.g. suspend (contract owner only).
    """
    return commit(ledger, ledger.attorneys.update_status, caller, attorney_id, change.status)
