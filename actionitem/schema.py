from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from core.types import Progress, RequiredStr

class ActionItemSchema(BaseModel):
    action_item_id: int
    action_plan_id: Optional[int] = None
    goal_id: Optional[int] = None
    item_description: str
    responsible_department_id: Optional[int] = None
    responsible_person_id: Optional[int] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    kpi: Optional[str] = None
    kpi_target: Optional[str] = None
    kpi_actual: Optional[str] = None
    budget: Optional[float] = None
    status: Optional[str] = None
    progress: int = 0
    progress_update: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

class ActionItemCreatePayload(BaseModel):
    action_plan_id: int
    item_description: RequiredStr
    goal_id: Optional[int] = None
    responsible_department_id: Optional[int] = None
    responsible_person_id: Optional[int] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    kpi: Optional[str] = None
    kpi_target: Optional[str] = None
    kpi_actual: Optional[str] = None
    budget: Optional[float] = None
    status: str = "Not Started"
    progress: Progress = 0
    progress_update: Optional[str] = None
    model_config = ConfigDict(extra="forbid")

class ActionItemUpdate(BaseModel):
    action_plan_id: Optional[int] = None
    item_description: Optional[RequiredStr] = None
    goal_id: Optional[int] = None
    responsible_department_id: Optional[int] = None
    responsible_person_id: Optional[int] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    kpi: Optional[str] = None
    kpi_target: Optional[str] = None
    kpi_actual: Optional[str] = None
    budget: Optional[float] = None
    status: Optional[str] = None
    progress: Optional[Progress] = None
    progress_update: Optional[str] = None
    model_config = ConfigDict(extra="forbid")
