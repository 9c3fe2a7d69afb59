"""
Case Registry
Creates infringement cases and owns the case status state machine

    reported -> evidence-submitted -> enforcement-initiated
             -> settlement-proposed -> resolved

dismissed is terminal and reachable from any open state through
update_case_status. Evidence, enforcement and settlement components move
the status as a side effect of their own operations.
"""

from typing import List, Optional

import structlog

from ipledger.chain.patents import PatentOwnership
from ipledger.models import AuditAction, AuditLog, CaseStatus, InfringementCase, Severity
from ipledger.registry.base import RegistryComponent
from ipledger.registry.errors import InvalidParties, InvalidStatus, Unauthorized, ledger_operation

logger = structlog.get_logger()


class CaseRegistry(RegistryComponent):
    """
    Table of infringement cases keyed by sequential case ID
    """

    def __init__(self, state, chain, policy, patents: PatentOwnership):
        """
        Args:
            state: Shared LedgerState
            chain: ChainContext for owner identity and height
            policy: PolicyEngine for field limits
            patents: Patent-ownership collaborator consulted on report
        """
        super().__init__(state, chain, policy)
        self.patents = patents

    @ledger_operation
    def report_infringement(
        self,
        caller: str,
        patent_id: int,
        alleged_infringer: str,
        description: str,
        severity: str,
        damages_claimed: int
    ) -> int:
        """
        Open a new case as the holder of patent_id

        Returns:
            The new case ID (sequential from 1)
        """
        if not self.patents.owns_patent(caller, patent_id):
            raise Unauthorized(f"{caller} does not own patent {patent_id}")
        if alleged_infringer == caller:
            raise InvalidParties("Reporter cannot accuse itself")
        self._check_principal("alleged_infringer", alleged_infringer)
        self._check_amount("patent_id", patent_id)
        parsed_severity = self._parse_enum(Severity, severity)
        self._check_text("description", description)
        self._check_amount("damages_claimed", damages_claimed)

        height = self.chain.block_height
        # The record is built before the counter moves
        case = self._build(
            InfringementCase,
            case_id=self.state.last_case_id + 1,
            patent_id=patent_id,
            reporter=caller,
            alleged_infringer=alleged_infringer,
            description=description,
            severity=parsed_severity,
            status=CaseStatus.REPORTED,
            report_date=height,
            damages_claimed=damages_claimed,
        )
        case_id = self.state.next_case_id()
        self.state.cases[case_id] = case
        self.state.record(
            AuditAction.CASE_REPORTED, caller, height,
            case_id=case_id, patent_id=patent_id, alleged_infringer=alleged_infringer,
        )

        logger.info(
            "Infringement reported",
            case_id=case_id,
            patent_id=patent_id,
            reporter=caller,
            alleged_infringer=alleged_infringer,
            severity=parsed_severity.value,
        )
        return case_id

    @ledger_operation
    def update_case_status(self, caller: str, case_id: int, new_status: str) -> bool:
        """
        Directly set a case's status as its reporter or the contract owner
        Escape hatch for statuses no other operation reaches, e.g. dismissed
        """
        case = self._require_case(case_id)
        if caller != case.reporter and not self.chain.is_owner(caller):
            raise Unauthorized(f"{caller} may not change status of case {case_id}")
        status = self._parse_enum(CaseStatus, new_status, InvalidStatus)
        self._require_open_case(case)

        previous = case.status
        case.status = status.value
        self.state.record(
            AuditAction.CASE_STATUS_UPDATED, caller, self.chain.block_height,
            case_id=case_id, previous_status=previous, status=status.value,
        )
        logger.info("Case status updated", case_id=case_id, previous_status=previous, status=status.value)
        return True

    # Read-only

    def get_case(self, case_id: int) -> Optional[InfringementCase]:
        return self.state.cases.get(case_id)

    def is_resolved(self, case_id: int) -> bool:
        case = self.state.cases.get(case_id)
        return case is not None and case.status == CaseStatus.RESOLVED

    def total_cases(self) -> int:
        return self.state.last_case_id

    def audit_trail(self, case_id: Optional[int] = None) -> List[AuditLog]:
        """Audit entries in append order, optionally for one case"""
        if case_id is None:
            return list(self.state.audit_log)
        return [entry for entry in self.state.audit_log if entry.case_id == case_id]
