"""
Attorney Registry
Registration table for IP attorneys with an owner-only verification gate
"""

from typing import Optional

import structlog

from ipledger.models import Attorney, AttorneyStatus, AuditAction
from ipledger.registry.base import RegistryComponent
from ipledger.registry.errors import (
    AttorneyExists,
    AttorneyNotFound,
    InvalidStatus,
    Unauthorized,
    ledger_operation,
)

logger = structlog.get_logger()


class AttorneyRegistry(RegistryComponent):
    """
    Attorney registration and verification

    Any principal may register once. Only the contract owner changes status.
    """

    @ledger_operation
    def register(self, caller: str, name: str, specialization: str, bar_number: str) -> int:
        """
        Register the caller as an attorney

        Returns:
            The new attorney ID (sequential from 1)
        """
        self._check_principal("caller", caller)
        if caller in self.state.attorney_by_principal:
            raise AttorneyExists(f"{caller} is already registered")
        self._check_text("name", name)
        self._check_text("specialization", specialization)
        self._check_text("bar_number", bar_number)

        height = self.chain.block_height
        attorney = self._build(
            Attorney,
            attorney_id=self.state.last_attorney_id + 1,
            principal=caller,
            name=name,
            specialization=specialization,
            bar_number=bar_number,
            status=AttorneyStatus.PENDING,
            registration_date=height,
            verified=False,
        )
        attorney_id = self.state.next_attorney_id()
        self.state.attorneys[attorney_id] = attorney
        self.state.attorney_by_principal[caller] = attorney_id
        self.state.record(AuditAction.ATTORNEY_REGISTERED, caller, height, attorney_id=attorney_id)

        logger.info("Attorney registered", attorney_id=attorney_id, principal=caller)
        return attorney_id

    @ledger_operation
    def verify(self, caller: str, attorney_id: int, new_status: str = AttorneyStatus.VERIFIED) -> bool:
        """
        Set an attorney's status as the contract owner
        verified follows the status: true only for 'verified'
        """
        attorney = self._owner_lookup(caller, attorney_id)
        status = self._parse_enum(AttorneyStatus, new_status, InvalidStatus)

        self._apply_status(attorney, status)
        self.state.record(
            AuditAction.ATTORNEY_VERIFIED, caller, self.chain.block_height,
            attorney_id=attorney_id, status=status.value,
        )
        logger.info("Attorney verification updated", attorney_id=attorney_id, status=status.value)
        return True

    @ledger_operation
    def update_status(self, caller: str, attorney_id: int, new_status: str) -> bool:
        """
        Change an attorney's status for reasons other than verification,
        e.g. suspension. Granting 'verified' goes through verify().
        """
        attorney = self._owner_lookup(caller, attorney_id)
        status = self._parse_enum(AttorneyStatus, new_status, InvalidStatus)
        if status == AttorneyStatus.VERIFIED:
            raise InvalidStatus("Use verify() to grant verified status")

        self._apply_status(attorney, status)
        self.state.record(
            AuditAction.ATTORNEY_STATUS_UPDATED, caller, self.chain.block_height,
            attorney_id=attorney_id, status=status.value,
        )
        logger.info("Attorney status updated", attorney_id=attorney_id, status=status.value)
        return True

    # Read-only

    def get_attorney(self, attorney_id: int) -> Optional[Attorney]:
        return self.state.attorneys.get(attorney_id)

    def get_attorney_by_principal(self, principal: str) -> Optional[Attorney]:
        attorney_id = self.state.attorney_by_principal.get(principal)
        if attorney_id is None:
            return None
        return self.state.attorneys[attorney_id]

    def is_verified(self, attorney_id: int) -> bool:
        attorney = self.state.attorneys.get(attorney_id)
        return attorney is not None and attorney.verified

    def total_attorneys(self) -> int:
        return self.state.last_attorney_id

    # Helpers

    def _owner_lookup(self, caller: str, attorney_id: int) -> Attorney:
        # Owner gate precedes the table lookup
        if not self.chain.is_owner(caller):
            raise Unauthorized(f"{caller} is not the contract owner")
        attorney = self.state.attorneys.get(attorney_id)
        if attorney is None:
            raise AttorneyNotFound(f"Attorney {attorney_id} does not exist")
        return attorney

    @staticmethod
    def _apply_status(attorney: Attorney, status: AttorneyStatus) -> None:
        attorney.status = status.value
        attorney.verified = status == AttorneyStatus.VERIFIED
