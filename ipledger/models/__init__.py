"""
Data models for the patent dispute ledger
"""

from .attorney import Attorney, AttorneyStatus
from .case import InfringementCase, CaseStatus, Severity, TERMINAL_STATUSES
from .evidence import Evidence, EvidenceType
from .enforcement import EnforcementAction, ActionType, ActionStatus
from .settlement import Settlement
from .audit import AuditLog, AuditAction
from .result import Result, ErrorCode

__all__ = [
    "Attorney",
    "AttorneyStatus",
    "InfringementCase",
    "CaseStatus",
    "Severity",
    "TERMINAL_STATUSES",
    "Evidence",
    "EvidenceType",
    "EnforcementAction",
    "ActionType",
    "ActionStatus",
    "Settlement",
    "AuditLog",
    "AuditAction",
    "Result",
    "ErrorCode",
]
