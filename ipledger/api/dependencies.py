"""
Shared route helpers: caller identity and result encoding.
"""

from typing import Any, Callable

from fastapi import Header
from fastapi.responses import JSONResponse

from ipledger.ledger import IPLedger
from ipledger.models import ErrorCode, Result

ERROR_HTTP_STATUS = {
    ErrorCode.UNAUTHORIZED: 403,
    ErrorCode.ATTORNEY_NOT_FOUND: 404,
    ErrorCode.CASE_NOT_FOUND: 404,
    ErrorCode.EVIDENCE_NOT_FOUND: 404,
    ErrorCode.ACTION_NOT_FOUND: 404,
    ErrorCode.SETTLEMENT_NOT_FOUND: 404,
    ErrorCode.ATTORNEY_EXISTS: 409,
    ErrorCode.ALREADY_AGREED: 409,
    ErrorCode.INVALID_STATUS: 422,
    ErrorCode.INVALID_PARTIES: 422,
    ErrorCode.INVALID_INPUT: 422,
}


def get_caller(x_caller: str = Header(..., alias="X-Caller")) -> str:
    """Identity of the calling principal, as asserted by the gateway."""
    return x_caller


def commit(ledger: IPLedger, operation: Callable[..., Result], caller: str, *args: Any) -> JSONResponse:
    """
    Run a mutating ledger operation and encode its result.

    Each accepted transaction is sealed in its own block, so the height
    advances after every success. Both steps run under the ledger write lock.
    """
    with ledger.state.lock:
        result = operation(caller, *args)
        if result.is_ok:
            ledger.chain.height.advance()

    if result.is_ok:
        return JSONResponse(status_code=200, content=result.to_wire())
    return JSONResponse(status_code=ERROR_HTTP_STATUS.get(result.error, 400), content=result.to_wire())
