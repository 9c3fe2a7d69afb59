"""
Registries and ledger components that operate on the shared state
"""

from .state import LedgerState
from .attorney_registry import AttorneyRegistry
from .case_registry import CaseRegistry
from .evidence_ledger import EvidenceLedger
from .enforcement_log import EnforcementLog
from .settlement_ledger import SettlementLedger
from .errors import LedgerError, ledger_operation

__all__ = [
    "LedgerState",
    "AttorneyRegistry",
    "CaseRegistry",
    "EvidenceLedger",
    "EnforcementLog",
    "SettlementLedger",
    "LedgerError",
    "ledger_operation",
]
