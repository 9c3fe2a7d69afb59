"""
Patent ownership routes.
The standalone service keeps patent ownership in memory; only the contract
owner may record it.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ipledger.api.config import get_ledger
from ipledger.api.dependencies import get_caller
from ipledger.api.models import PatentOwnerRecord
from ipledger.chain.patents import InMemoryPatentRegistry
from ipledger.ledger import IPLedger
from ipledger.models import ErrorCode, Result

router = APIRouter()


@router.post("/patents")
def record_patent_owner(
    record: PatentOwnerRecord,
    caller: str = Depends(get_caller),
    ledger: IPLedger = Depends(get_ledger),
):
    """
    Record the owner of a patent.

    Host setup for the in-memory ownership collaborator, not a ledger
    transaction: it writes no audit entry and leaves the block height alone.

    Returns:
        {"ok": true} or {"error": 100}
    """
    if not ledger.chain.is_owner(caller) or not isinstance(ledger.patents, InMemoryPatentRegistry):
        return JSONResponse(status_code=403, content=Result.failure(ErrorCode.UNAUTHORIZED).to_wire())

    with ledger.state.lock:
        ledger.patents.record_owner(record.patent_id, record.owner)
    return Result.success(True).to_wire()


@router.get("/patents/{patent_id}/owner")
def get_patent_owner(patent_id: int, ledger: IPLedger = Depends(get_ledger)):
    owner = None
    if isinstance(ledger.patents, InMemoryPatentRegistry):
        owner = ledger.patents.owner_of(patent_id)
    return {"patent_id": patent_id, "owner": owner}
