from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, model_validator

from core.types import RequiredStr

class StrategyPlanSchema(BaseModel):
    strategy_plan_id: int
    org_id: Optional[int] = None
    plan_name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

class StrategyPlanCreatePayload(BaseModel):
    org_id: int
    plan_name: RequiredStr
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    status: str = "Draft"
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def end_not_before_start(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

class StrategyPlanUpdate(BaseModel):
    org_id: Optional[int] = None
    plan_name: Optional[RequiredStr] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    status: Optional[str] = None
    model_config = ConfigDict(extra="forbid")
