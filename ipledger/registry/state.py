"""
Registry state
All tables, ID counters and the audit trail live here, behind one write lock
"""

import threading
from typing import Dict, List, Optional, Tuple, Any

from ipledger.models import (
    Attorney,
    InfringementCase,
    Evidence,
    EnforcementAction,
    Settlement,
    AuditLog,
    AuditAction,
)


class LedgerState:
    """
    Process-wide table group for both registries

    Holds no business rules. Registries validate first, then write here, so a
    rejected call never touches these tables.
    """

    def __init__(self):
        # Reentrant so a registry can read through other components while
        # already holding the lock
        self.lock = threading.RLock()

        self.attorneys: Dict[int, Attorney] = {}
        self.attorney_by_principal: Dict[str, int] = {}
        self.last_attorney_id = 0

        self.cases: Dict[int, InfringementCase] = {}
        self.last_case_id = 0

        self.evidence: Dict[Tuple[int, int], Evidence] = {}
        self.last_evidence_id = 0

        self.enforcement_actions: Dict[int, EnforcementAction] = {}
        self.settlements: Dict[int, Settlement] = {}

        self.audit_log: List[AuditLog] = []

    # ID allocation

    def next_attorney_id(self) -> int:
        self.last_attorney_id += 1
        return self.last_attorney_id

    def next_case_id(self) -> int:
        self.last_case_id += 1
        return self.last_case_id

    def next_evidence_id(self, height: int) -> int:
        """
        Evidence IDs follow the submission height but stay strictly
        increasing when several submissions land in the same block
        """
        self.last_evidence_id = max(height, self.last_evidence_id + 1)
        return self.last_evidence_id

    # Audit trail

    def record(
        self,
        action: AuditAction,
        caller: str,
        height: int,
        case_id: Optional[int] = None,
        attorney_id: Optional[int] = None,
        **details: Any
    ) -> AuditLog:
        """Append an audit entry for an accepted mutation"""
        entry = AuditLog(
            sequence=len(self.audit_log) + 1,
            height=height,
            action=action,
            caller=caller,
            case_id=case_id,
            attorney_id=attorney_id,
            details=details,
        )
        self.audit_log.append(entry)
        return entry
