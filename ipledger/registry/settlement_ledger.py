"""
Settlement Ledger
Two-party settlement: either party proposes, both must accept, and the
second acceptance executes the settlement and resolves the case
"""

from typing import Optional

import structlog

from ipledger.models import AuditAction, CaseStatus, Settlement
from ipledger.registry.base import RegistryComponent
from ipledger.registry.errors import AlreadyAgreed, SettlementNotFound, Unauthorized, ledger_operation

logger = structlog.get_logger()


class SettlementLedger(RegistryComponent):
    """
    Settlement proposals and bilateral acceptance
    """

    @ledger_operation
    def propose_settlement(self, caller: str, case_id: int, amount: int, terms: str) -> bool:
        """
        Propose settlement terms as reporter or alleged infringer

        Replaces any earlier proposal and clears both agreement flags, so a
        party's acceptance always refers to the terms currently on file.
        """
        case = self._require_case(case_id)
        if not case.is_party(caller):
            raise Unauthorized(f"{caller} is not a party to case {case_id}")
        self._require_open_case(case)
        self._check_amount("amount", amount)
        self._check_text("terms", terms)

        height = self.chain.block_height
        replaced = case_id in self.state.settlements
        self.state.settlements[case_id] = Settlement(
            case_id=case_id,
            settlement_amount=amount,
            terms=terms,
            proposed_by=caller,
            proposal_date=height,
        )
        case.status = CaseStatus.SETTLEMENT_PROPOSED.value

        self.state.record(
            AuditAction.SETTLEMENT_PROPOSED, caller, height,
            case_id=case_id, amount=amount, replaced=replaced,
        )
        logger.info("Settlement proposed", case_id=case_id, amount=amount, proposed_by=caller, replaced=replaced)
        return True

    @ledger_operation
    def accept_settlement(self, caller: str, case_id: int) -> bool:
        """
        Record the caller's agreement to the current proposal

        The reporter sets agreed_by_patent_holder, the alleged infringer sets
        agreed_by_infringer. Once both are set the settlement executes:
        settlement date and resolution date are stamped and the case resolves.
        """
        case = self._require_case(case_id)
        if not case.is_party(caller):
            raise Unauthorized(f"{caller} is not a party to case {case_id}")
        settlement = self.state.settlements.get(case_id)
        if settlement is None:
            raise SettlementNotFound(f"No settlement proposed for case {case_id}")
        self._require_open_case(case)

        is_holder = caller == case.reporter
        already = settlement.agreed_by_patent_holder if is_holder else settlement.agreed_by_infringer
        if already:
            raise AlreadyAgreed(f"{caller} already accepted the settlement for case {case_id}")

        height = self.chain.block_height
        if is_holder:
            settlement.agreed_by_patent_holder = True
        else:
            settlement.agreed_by_infringer = True
        self.state.record(
            AuditAction.SETTLEMENT_ACCEPTED, caller, height,
            case_id=case_id, party="patent-holder" if is_holder else "infringer",
        )
        logger.info("Settlement accepted", case_id=case_id, accepted_by=caller)

        if settlement.is_fully_agreed():
            settlement.settlement_date = height
            case.status = CaseStatus.RESOLVED.value
            case.resolution_date = height
            self.state.record(
                AuditAction.SETTLEMENT_EXECUTED, caller, height,
                case_id=case_id, amount=settlement.settlement_amount,
            )
            logger.info(
                "Settlement executed",
                case_id=case_id,
                amount=settlement.settlement_amount,
                height=height,
            )
        return True

    # Read-only

    def get_settlement(self, case_id: int) -> Optional[Settlement]:
        return self.state.settlements.get(case_id)
