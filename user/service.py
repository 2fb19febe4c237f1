from __future__ import annotations
import logging
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from auth.utils.auth_utils import get_password_hash
from core import crud
from core.exceptions import ConflictException
from user.models import User
from user.schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

PROTECTED_USERNAME = "admin"


def get_users(db: Session) -> List[User]:
    return crud.list_rows(db, User)


def get_user(db: Session, user_id: int) -> User:
    return crud.get_or_404(db, User, user_id, "User")


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.scalars(select(User).where(User.username == username)).first()


def _taken(db: Session, username: str, email: Optional[str], exclude_id: Optional[int] = None) -> bool:
    clauses = [User.username == username]
    if email:
        clauses.append(User.email == email)
    stmt = select(User.id).where(or_(*clauses))
    if exclude_id is not None:
        stmt = stmt.where(User.id != exclude_id)
    return db.scalars(stmt).first() is not None


def create_user(db: Session, user: UserCreate) -> User:
    if _taken(db, user.username, user.email):
        raise ConflictException("User already exists")

    db_user = User(
        username=user.username,
        password_hash=get_password_hash(user.password),
        email=str(user.email) if user.email else None,
        name=user.name,
        role=user.role.value,
    )
    return crud.insert(db, db_user)


def update_user(db: Session, user_id: int, patch: UserUpdate) -> User:
    db_user = get_user(db, user_id)
    data = patch.model_dump(exclude_unset=True)

    if "username" in data or "email" in data:
        username = data["username"] if "username" in data else db_user.username
        email = data["email"] if "email" in data else db_user.email
        if _taken(db, username, email, exclude_id=db_user.id):
            raise ConflictException("Username or email already taken")

    if "password" in data:
        password = data.pop("password")
        if password:
            data["password_hash"] = get_password_hash(password)
    if data.get("role") is not None:
        data["role"] = data["role"].value
    if data.get("email") is not None:
        data["email"] = str(data["email"])

    crud.apply_patch(db_user, data, required=("username", "role"))
    crud.commit_and_refresh(db, db_user)
    return db_user


def delete_user(db: Session, user_id: int) -> None:
    db_user = get_user(db, user_id)
    if db_user.username == PROTECTED_USERNAME:
        raise ConflictException("Cannot delete default admin account")
    crud.delete(db, db_user)
    logger.info("deleted user %s", user_id)
