"""
Result encoding for ledger operations
Every mutating operation returns either {ok: value} or {error: code}
"""

from enum import IntEnum
from typing import Optional, Any, Dict
from pydantic import BaseModel


class ErrorCode(IntEnum):
    """Stable numeric error codes. Callers pattern-match on these, never renumber."""
    UNAUTHORIZED = 100
    ATTORNEY_NOT_FOUND = 101
    ATTORNEY_EXISTS = 102
    CASE_NOT_FOUND = 103
    EVIDENCE_NOT_FOUND = 104
    ACTION_NOT_FOUND = 105
    SETTLEMENT_NOT_FOUND = 106
    INVALID_STATUS = 107
    INVALID_PARTIES = 108
    ALREADY_AGREED = 109
    INVALID_INPUT = 110


class Result(BaseModel):
    """Tagged result of a mutating operation"""
    ok: Optional[Any] = None
    error: Optional[ErrorCode] = None

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(ok=value)

    @classmethod
    def failure(cls, code: ErrorCode) -> "Result":
        return cls(error=code)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the success value, raising if this is an error result"""
        if self.error is not None:
            raise ValueError(f"Called unwrap on error result {int(self.error)}")
        return self.ok

    def to_wire(self) -> Dict[str, Any]:
        """Encode as {"ok": value} or {"error": code}"""
        if self.error is not None:
            return {"error": int(self.error)}
        return {"ok": self.ok}
