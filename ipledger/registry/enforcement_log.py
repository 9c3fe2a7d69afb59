"""
Enforcement Action Log
One active enforcement action per case; a new initiation replaces the old one
"""

from typing import Optional

import structlog

from ipledger.models import ActionStatus, ActionType, AuditAction, CaseStatus, EnforcementAction
from ipledger.models.enforcement import ACTION_STATUS_ORDER
from ipledger.registry.base import RegistryComponent
from ipledger.registry.errors import ActionNotFound, InvalidInput, InvalidStatus, Unauthorized, ledger_operation

logger = structlog.get_logger()


class EnforcementLog(RegistryComponent):
    """
    Enforcement actions opened by the patent holder or the contract owner
    """

    @ledger_operation
    def initiate_enforcement(self, caller: str, case_id: int, action_type: str) -> bool:
        """
        Open an enforcement action against the case's alleged infringer
        and move the case to enforcement-initiated
        """
        case = self._require_case(case_id)
        if caller != case.reporter and not self.chain.is_owner(caller):
            raise Unauthorized(f"{caller} may not enforce case {case_id}")
        self._require_open_case(case)
        parsed_type = self._parse_enum(ActionType, action_type)

        height = self.chain.block_height
        replaced = self.state.enforcement_actions.get(case_id)
        self.state.enforcement_actions[case_id] = EnforcementAction(
            case_id=case_id,
            action_type=parsed_type,
            initiated_by=caller,
            target=case.alleged_infringer,
            action_date=height,
            status=ActionStatus.INITIATED,
        )
        case.status = CaseStatus.ENFORCEMENT_INITIATED.value

        self.state.record(
            AuditAction.ENFORCEMENT_INITIATED, caller, height,
            case_id=case_id, action_type=parsed_type.value,
            replaced_action=replaced.action_type if replaced else None,
        )
        logger.info(
            "Enforcement initiated",
            case_id=case_id,
            action_type=parsed_type.value,
            target=case.alleged_infringer,
            replaced=replaced is not None,
        )
        return True

    @ledger_operation
    def update_enforcement_status(
        self,
        caller: str,
        case_id: int,
        new_status: str,
        outcome: Optional[str] = None
    ) -> bool:
        """
        Move an enforcement action forward
        Concluding requires an outcome; earlier statuses must not carry one
        """
        case = self._require_case(case_id)
        if caller != case.reporter and not self.chain.is_owner(caller):
            raise Unauthorized(f"{caller} may not update enforcement on case {case_id}")
        self._require_open_case(case)
        action = self.state.enforcement_actions.get(case_id)
        if action is None:
            raise ActionNotFound(f"No enforcement action for case {case_id}")
        status = self._parse_enum(ActionStatus, new_status, InvalidStatus)

        current = ActionStatus(action.status)
        if current == ActionStatus.CONCLUDED:
            raise InvalidStatus(f"Enforcement on case {case_id} already concluded")
        if ACTION_STATUS_ORDER.index(status) < ACTION_STATUS_ORDER.index(current):
            raise InvalidStatus(f"Cannot move enforcement from {current.value} to {status.value}")
        if status == ActionStatus.CONCLUDED:
            if not outcome:
                raise InvalidInput("Concluding an enforcement action requires an outcome")
            self._check_text("outcome", outcome)
        elif outcome is not None:
            raise InvalidInput("Outcome is only recorded when the action concludes")

        action.status = status.value
        action.outcome = outcome
        self.state.record(
            AuditAction.ENFORCEMENT_UPDATED, caller, self.chain.block_height,
            case_id=case_id, status=status.value, outcome=outcome,
        )
        logger.info("Enforcement updated", case_id=case_id, status=status.value)
        return True

    # Read-only

    def get_enforcement_action(self, case_id: int) -> Optional[EnforcementAction]:
        return self.state.enforcement_actions.get(case_id)
