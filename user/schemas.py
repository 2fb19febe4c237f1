from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from core.types import RequiredStr
from user.models import Role


class UserSchema(BaseModel):
    id: int
    username: str
    email: Optional[str] = None
    name: Optional[str] = None
    role: Role
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class UserCreate(BaseModel):
    username: RequiredStr
    password: RequiredStr
    role: Role
    email: Optional[EmailStr] = None
    name: Optional[str] = None
    model_config = ConfigDict(extra="forbid")


class UserUpdate(BaseModel):
    username: Optional[RequiredStr] = None
    password: Optional[str] = None
    email: Optional[EmailStr] = None
    name: Optional[str] = None
    role: Optional[Role] = None
    model_config = ConfigDict(extra="forbid")
