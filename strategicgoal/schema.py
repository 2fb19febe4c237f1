from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from core.types import Progress, RequiredStr

class StrategicGoalSchema(BaseModel):
    goal_id: int
    strategy_plan_id: Optional[int] = None
    goal_description: str
    target_metric: Optional[str] = None
    target_value: Optional[str] = None
    deadline: Optional[date] = None
    actual_value: Optional[str] = None
    progress: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

class StrategicGoalCreatePayload(BaseModel):
    strategy_plan_id: int
    goal_description: RequiredStr
    target_metric: Optional[str] = None
    target_value: Optional[str] = None
    deadline: Optional[date] = None
    actual_value: Optional[str] = None
    progress: Progress = 0
    model_config = ConfigDict(extra="forbid")

class StrategicGoalUpdate(BaseModel):
    strategy_plan_id: Optional[int] = None
    goal_description: Optional[RequiredStr] = None
    target_metric: Optional[str] = None
    target_value: Optional[str] = None
    deadline: Optional[date] = None
    actual_value: Optional[str] = None
    progress: Optional[Progress] = None
    model_config = ConfigDict(extra="forbid")
