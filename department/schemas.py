from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from core.types import RequiredStr

class DepartmentSchema(BaseModel):
    department_id: int
    department_name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

# PUBLIC payload, what clients send
class DepartmentCreatePayload(BaseModel):
    department_name: RequiredStr
    description: Optional[str] = None
    model_config = ConfigDict(extra="forbid")

class DepartmentUpdate(BaseModel):
    department_name: Optional[RequiredStr] = None
    description: Optional[str] = None
    model_config = ConfigDict(extra="forbid")
