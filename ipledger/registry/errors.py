"""
Ledger error hierarchy and the operation decorator that turns them into
tagged results
"""

import functools
from typing import Callable

import structlog

from ipledger.models.result import ErrorCode, Result

logger = structlog.get_logger()


class LedgerError(Exception):
    """Base exception for rejected ledger operations"""
    code: ErrorCode = ErrorCode.INVALID_INPUT

    def __init__(self, message: str = ""):
        super().__init__(message or self.code.name.lower())
        self.message = message or self.code.name.lower()


class Unauthorized(LedgerError):
    code = ErrorCode.UNAUTHORIZED


class AttorneyNotFound(LedgerError):
    code = ErrorCode.ATTORNEY_NOT_FOUND


class AttorneyExists(LedgerError):
    code = ErrorCode.ATTORNEY_EXISTS


class CaseNotFound(LedgerError):
    code = ErrorCode.CASE_NOT_FOUND


class EvidenceNotFound(LedgerError):
    code = ErrorCode.EVIDENCE_NOT_FOUND


class ActionNotFound(LedgerError):
    code = ErrorCode.ACTION_NOT_FOUND


class SettlementNotFound(LedgerError):
    code = ErrorCode.SETTLEMENT_NOT_FOUND


class InvalidStatus(LedgerError):
    code = ErrorCode.INVALID_STATUS


class InvalidParties(LedgerError):
    code = ErrorCode.INVALID_PARTIES


class AlreadyAgreed(LedgerError):
    code = ErrorCode.ALREADY_AGREED


class InvalidInput(LedgerError):
    code = ErrorCode.INVALID_INPUT


def ledger_operation(func: Callable) -> Callable:
    """
    Run a mutating registry method as one serialized transaction

    The method runs under the state's write lock and must raise before its
    first write. A LedgerError becomes Result.failure, anything returned
    becomes Result.success. Other exceptions propagate.
    """
    @functools.wraps(func)
    def wrapper(self, caller: str, *args, **kwargs) -> Result:
        with self.state.lock:
            try:
                value = func(self, caller, *args, **kwargs)
            except LedgerError as e:
                logger.warning(
                    "Operation rejected",
                    operation=func.__name__,
                    caller=caller,
                    error_code=int(e.code),
                    reason=e.message,
                )
                return Result.failure(e.code)
        return Result.success(value)

    return wrapper
