from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from core.types import RequiredStr

class OrganizationSchema(BaseModel):
    org_id: int
    org_name: str
    vision: Optional[str] = None
    mission: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

# what clients send
class OrganizationCreatePayload(BaseModel):
    org_name: RequiredStr
    vision: Optional[str] = None
    mission: Optional[str] = None
    model_config = ConfigDict(extra="forbid")

class OrganizationUpdate(BaseModel):
    org_name: Optional[RequiredStr] = None
    vision: Optional[str] = None
    mission: Optional[str] = None
    model_config = ConfigDict(extra="forbid")
