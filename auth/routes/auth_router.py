from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from auth.schemas import CurrentUserSchema, LoginPayload, LoginResult
from auth.services import auth_service
from auth.services.auth_service import get_current_user
from core.database import get_db
from core.exceptions import ValidationException
from core.response import Envelope, ok
from user.models import User

auth_router = APIRouter(prefix="/auth", tags=["Auth"])


@auth_router.post("/login", response_model=Envelope[LoginResult])
def login(payload: Optional[LoginPayload] = None, db: Session = Depends(get_db)):
    payload = payload or LoginPayload()
    if not payload.username or not payload.password:
        raise ValidationException("Please provide username and password")
    user, token = auth_service.login(db, payload.username, payload.password)
    return ok(LoginResult(
        id=user.id,
        username=user.username,
        name=user.name,
        email=user.email,
        role=user.role,
        token=token,
    ))


@auth_router.get("/me", response_model=Envelope[CurrentUserSchema])
def me(current_user: User = Depends(get_current_user)):
    return ok(current_user)
