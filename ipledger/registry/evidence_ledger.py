"""
Evidence Ledger
Append-only, per-case evidence entries keyed by (case ID, evidence ID)
"""

from typing import List, Optional

import structlog

from ipledger.models import AuditAction, CaseStatus, Evidence, EvidenceType
from ipledger.registry.base import RegistryComponent
from ipledger.registry.errors import EvidenceNotFound, InvalidInput, Unauthorized, ledger_operation

logger = structlog.get_logger()


class EvidenceLedger(RegistryComponent):
    """
    Evidence submission by the case parties, verification by the owner
    """

    @ledger_operation
    def submit_evidence(self, caller: str, case_id: int, evidence_type: str, description: str) -> int:
        """
        Put evidence on file for an open case

        Returns:
            Evidence ID derived from the current block height
        """
        case = self._require_case(case_id)
        if not case.is_party(caller):
            raise Unauthorized(f"{caller} is not a party to case {case_id}")
        self._require_open_case(case)
        parsed_type = self._parse_enum(EvidenceType, evidence_type)
        self._check_text("description", description)

        height = self.chain.block_height
        evidence_id = self.state.next_evidence_id(height)
        self.state.evidence[(case_id, evidence_id)] = Evidence(
            evidence_id=evidence_id,
            case_id=case_id,
            evidence_type=parsed_type,
            description=description,
            submitted_by=caller,
            submission_date=height,
        )
        # Only the first submission moves the case; later ones leave the label alone
        if case.status == CaseStatus.REPORTED:
            case.status = CaseStatus.EVIDENCE_SUBMITTED.value

        self.state.record(
            AuditAction.EVIDENCE_SUBMITTED, caller, height,
            case_id=case_id, evidence_id=evidence_id, evidence_type=parsed_type.value,
        )
        logger.info(
            "Evidence submitted",
            case_id=case_id,
            evidence_id=evidence_id,
            evidence_type=parsed_type.value,
            submitted_by=caller,
        )
        return evidence_id

    @ledger_operation
    def verify_evidence(self, caller: str, case_id: int, evidence_id: int, verified: bool = True) -> bool:
        """Set or clear the verified flag as the contract owner"""
        if not self.chain.is_owner(caller):
            raise Unauthorized(f"{caller} is not the contract owner")
        evidence = self.state.evidence.get((case_id, evidence_id))
        if evidence is None:
            raise EvidenceNotFound(f"Evidence {evidence_id} not on file for case {case_id}")
        if not isinstance(verified, bool):
            raise InvalidInput("verified must be a boolean")

        evidence.verified = verified
        self.state.record(
            AuditAction.EVIDENCE_VERIFIED, caller, self.chain.block_height,
            case_id=case_id, evidence_id=evidence_id, verified=verified,
        )
        logger.info("Evidence verification updated", case_id=case_id, evidence_id=evidence_id, verified=verified)
        return True

    # Read-only

    def get_evidence(self, case_id: int, evidence_id: int) -> Optional[Evidence]:
        return self.state.evidence.get((case_id, evidence_id))

    def list_evidence(self, case_id: int) -> List[Evidence]:
        """All evidence for a case in submission order"""
        entries = [e for (cid, _), e in self.state.evidence.items() if cid == case_id]
        return sorted(entries, key=lambda e: e.evidence_id)
