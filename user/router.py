from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from authz.deps import require_admin
from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from user.schemas import UserSchema, UserCreate, UserUpdate
from user import service

user_router = APIRouter(
    prefix='/users',
    tags=['Users'],
    dependencies=[Depends(require_admin)],
)


# Get all users
@user_router.get('', response_model=ListEnvelope[UserSchema])
def user_list(db: Session = Depends(get_db)):
    return ok_list(service.get_users(db))


# Get user details
@user_router.get('/{user_id}', response_model=Envelope[UserSchema])
def user_detail(user_id: int, db: Session = Depends(get_db)):
    return ok(service.get_user(db, user_id))


# Create a user
@user_router.post('', response_model=Envelope[UserSchema], status_code=status.HTTP_201_CREATED)
def user_post(payload: UserCreate, db: Session = Depends(get_db)):
    return ok(service.create_user(db, payload))


# Update a user
@user_router.put('/{user_id}', response_model=Envelope[UserSchema])
def user_put(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    return ok(service.update_user(db, user_id, payload))


# Delete a user
@user_router.delete('/{user_id}', response_model=EmptyEnvelope)
def user_delete(user_id: int, db: Session = Depends(get_db)):
    service.delete_user(db, user_id)
    return ok_empty()
