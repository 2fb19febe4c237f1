from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from core.types import RequiredStr

class ActionPlanSchema(BaseModel):
    action_plan_id: int
    strategy_plan_id: Optional[int] = None
    year: Optional[int] = None
    plan_name: str
    description: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

class ActionPlanCreatePayload(BaseModel):
    strategy_plan_id: int
    year: int = Field(..., ge=1900, le=9999)
    plan_name: RequiredStr
    description: Optional[str] = None
    status: str = "Draft"
    model_config = ConfigDict(extra="forbid")

class ActionPlanUpdate(BaseModel):
    strategy_plan_id: Optional[int] = None
    year: Optional[int] = Field(None, ge=1900, le=9999)
    plan_name: Optional[RequiredStr] = None
    description: Optional[str] = None
    status: Optional[str] = None
    model_config = ConfigDict(extra="forbid")
