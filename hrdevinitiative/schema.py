from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from core.types import Progress, RequiredStr

class HrDevInitiativeSchema(BaseModel):
    hr_initiative_id: int
    hr_plan_id: Optional[int] = None
    initiative_name: str
    description: Optional[str] = None
    required_competencies: Optional[str] = None
    training_resources: Optional[str] = None
    budget: Optional[float] = None
    responsible_person_id: Optional[int] = None
    status: Optional[str] = None
    progress: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

class HrDevInitiativeCreatePayload(BaseModel):
    hr_plan_id: int
    initiative_name: RequiredStr
    description: Optional[str] = None
    required_competencies: Optional[str] = None
    training_resources: Optional[str] = None
    budget: Optional[float] = None
    responsible_person_id: Optional[int] = None
    status: str = "Not Started"
    progress: Progress = 0
    model_config = ConfigDict(extra="forbid")

class HrDevInitiativeUpdate(BaseModel):
    hr_plan_id: Optional[int] = None
    initiative_name: Optional[RequiredStr] = None
    description: Optional[str] = None
    required_competencies: Optional[str] = None
    training_resources: Optional[str] = None
    budget: Optional[float] = None
    responsible_person_id: Optional[int] = None
    status: Optional[str] = None
    progress: Optional[Progress] = None
    model_config = ConfigDict(extra="forbid")
