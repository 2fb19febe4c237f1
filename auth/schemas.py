from typing import Optional

from pydantic import BaseModel, ConfigDict

from user.models import Role


class LoginPayload(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class CurrentUserSchema(BaseModel):
    id: int
    username: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: Role
    model_config = ConfigDict(from_attributes=True)


class LoginResult(CurrentUserSchema):
    token: str
