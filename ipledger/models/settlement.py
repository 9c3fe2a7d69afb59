"""
Settlement data model
Represents the current settlement proposal for a case and who has agreed to it
"""

from typing import Optional
from pydantic import BaseModel, Field


class Settlement(BaseModel):
    """
    Settlement proposal
    Binding only once both the patent holder and the infringer agree
    """
    case_id: int = Field(..., ge=1)
    settlement_amount: int = Field(..., ge=0, description="Proposed amount")
    terms: str
    proposed_by: str
    proposal_date: int = Field(..., ge=0)

    # Agreement flags, each set by its own party only
    agreed_by_infringer: bool = False
    agreed_by_patent_holder: bool = False

    settlement_date: Optional[int] = Field(None, ge=0, description="Set on execution")

    def is_fully_agreed(self) -> bool:
        return self.agreed_by_infringer and self.agreed_by_patent_holder

    def is_executed(self) -> bool:
        return self.settlement_date is not None
