"""
Enforcement action data model
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ActionType(str, Enum):
    """Types of enforcement a patent holder can take"""
    CEASE_AND_DESIST = "cease-and-desist"
    LITIGATION = "litigation"
    INJUNCTION = "injunction"
    OTHER = "other"


class ActionStatus(str, Enum):
    """Progress of an enforcement action; only moves forward"""
    INITIATED = "initiated"
    IN_PROGRESS = "in-progress"
    CONCLUDED = "concluded"


ACTION_STATUS_ORDER = (ActionStatus.INITIATED, ActionStatus.IN_PROGRESS, ActionStatus.CONCLUDED)


class EnforcementAction(BaseModel):
    """The single active enforcement action for a case"""
    case_id: int = Field(..., ge=1)
    action_type: ActionType
    initiated_by: str
    target: str = Field(..., description="Alleged infringer of the case")
    action_date: int = Field(..., ge=0)
    status: ActionStatus = Field(default=ActionStatus.INITIATED)
    outcome: Optional[str] = Field(None, description="Set when the action concludes")

    class Config:
        use_enum_values = True
