from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from core.types import RequiredStr

class RiskSchema(BaseModel):
    risk_id: int
    risk_plan_id: Optional[int] = None
    strategy_plan_id: Optional[int] = None
    action_item_id: Optional[int] = None
    risk_description: str
    likelihood: Optional[str] = None
    impact: Optional[str] = None
    risk_score: int = 0
    mitigation_strategy: Optional[str] = None
    contingency_plan: Optional[str] = None
    responsible_person_id: Optional[int] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

class RiskCreatePayload(BaseModel):
    risk_description: RequiredStr
    risk_plan_id: Optional[int] = None
    strategy_plan_id: Optional[int] = None
    action_item_id: Optional[int] = None
    likelihood: Optional[str] = None
    impact: Optional[str] = None
    risk_score: int = 0
    mitigation_strategy: Optional[str] = None
    contingency_plan: Optional[str] = None
    responsible_person_id: Optional[int] = None
    status: str = "Identified"
    model_config = ConfigDict(extra="forbid")

class RiskUpdate(BaseModel):
    risk_description: Optional[RequiredStr] = None
    risk_plan_id: Optional[int] = None
    strategy_plan_id: Optional[int] = None
    action_item_id: Optional[int] = None
    likelihood: Optional[str] = None
    impact: Optional[str] = None
    risk_score: Optional[int] = None
    mitigation_strategy: Optional[str] = None
    contingency_plan: Optional[str] = None
    responsible_person_id: Optional[int] = None
    status: Optional[str] = None
    model_config = ConfigDict(extra="forbid")
