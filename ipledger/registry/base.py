"""
Shared plumbing for registry components
"""

from enum import Enum
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from ipledger.chain.context import ChainContext
from ipledger.governance.policy_engine import PolicyEngine
from ipledger.models import InfringementCase
from ipledger.registry.errors import CaseNotFound, InvalidInput, InvalidStatus, LedgerError
from ipledger.registry.state import LedgerState

E = TypeVar("E", bound=Enum)
M = TypeVar("M", bound=BaseModel)


class RegistryComponent:
    """
    Base for components that read and write the shared ledger state
    """

    def __init__(self, state: LedgerState, chain: ChainContext, policy: PolicyEngine):
        self.state = state
        self.chain = chain
        self.policy = policy

    def _require_case(self, case_id: int) -> InfringementCase:
        case = self.state.cases.get(case_id)
        if case is None:
            raise CaseNotFound(f"Case {case_id} does not exist")
        return case

    def _require_open_case(self, case: InfringementCase) -> None:
        if case.is_terminal():
            raise InvalidStatus(f"Case {case.case_id} is {case.status}")

    def _check_text(self, field: str, value: str) -> None:
        if not isinstance(value, str):
            raise InvalidInput(f"{field} must be text")
        if not self.policy.check_length(field, value):
            raise InvalidInput(f"{field} exceeds {self.policy.get_max_length(field)} characters")

    @staticmethod
    def _check_principal(field: str, value: str) -> None:
        if not isinstance(value, str) or not value:
            raise InvalidInput(f"{field} must be a non-empty principal")

    @staticmethod
    def _check_amount(field: str, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidInput(f"{field} must be a non-negative integer")

    @staticmethod
    def _parse_enum(enum_cls: Type[E], value, error: Type[LedgerError] = InvalidInput) -> E:
        """Convert a raw value to an enum member, raising the given ledger error"""
        try:
            return enum_cls(value)
        except ValueError:
            raise error(f"Unknown {enum_cls.__name__}: {value!r}")

    @staticmethod
    def _build(model_cls: Type[M], **fields) -> M:
        """Construct a record, reporting model constraint failures as InvalidInput"""
        try:
            return model_cls(**fields)
        except ValidationError as e:
            raise InvalidInput(f"Invalid {model_cls.__name__}: {e.errors()[0]['msg']}")
