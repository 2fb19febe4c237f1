from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from core.types import RequiredStr

class DigitalDevPlanSchema(BaseModel):
    digital_plan_id: int
    strategy_plan_id: Optional[int] = None
    plan_name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

class DigitalDevPlanCreatePayload(BaseModel):
    strategy_plan_id: int
    plan_name: RequiredStr
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    status: str = "Draft"
    model_config = ConfigDict(extra="forbid")

class DigitalDevPlanUpdate(BaseModel):
    strategy_plan_id: Optional[int] = None
    plan_name: Optional[RequiredStr] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    status: Optional[str] = None
    model_config = ConfigDict(extra="forbid")
