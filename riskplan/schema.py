from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from core.types import RequiredStr

class RiskPlanSchema(BaseModel):
    risk_plan_id: int
    plan_name: str
    description: Optional[str] = None
    year: Optional[int] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

class RiskPlanCreatePayload(BaseModel):
    plan_name: RequiredStr
    year: int = Field(..., ge=1900, le=9999)
    description: Optional[str] = None
    status: str = "Draft"
    model_config = ConfigDict(extra="forbid")

class RiskPlanUpdate(BaseModel):
    plan_name: Optional[RequiredStr] = None
    year: Optional[int] = Field(None, ge=1900, le=9999)
    description: Optional[str] = None
    status: Optional[str] = None
    model_config = ConfigDict(extra="forbid")
