from __future__ import annotations
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.orm import Session

from auth.utils.auth_utils import create_access_token, decode_access_token, verify_password
from core.database import get_db
from core.exceptions import AuthException
from user.models import User

logger = logging.getLogger(__name__)

http_bearer = HTTPBearer(auto_error=False)


def authenticate(db: Session, username: str, password: str) -> User:
    """Return the user for a username/password pair.

    Unknown user and wrong password both raise the same 401.
    """
    user = db.scalars(select(User).where(User.username == username)).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.info("failed login for %r", username)
        raise AuthException("Invalid credentials")
    return user


def login(db: Session, username: str, password: str) -> tuple[User, str]:
    user = authenticate(db, username, password)
    return user, create_access_token(user.id)


def resolve_token(db: Session, token: str) -> User:
    try:
        payload = decode_access_token(token)
        user_id = int(payload["sub"])
    except (ValueError, KeyError, TypeError):
        raise AuthException("Not authorized, token failed")

    user = db.get(User, user_id)
    if user is None:
        raise AuthException("User not found")
    return user


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise AuthException("Not authorized, no token")
    return resolve_token(db, credentials.credentials)
