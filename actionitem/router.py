from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management
from .schema import ActionItemSchema, ActionItemCreatePayload, ActionItemUpdate
from . import service

action_item_router = APIRouter(prefix="/action-items", tags=["Action Items"])

@action_item_router.get("", response_model=ListEnvelope[ActionItemSchema])
def list_action_items(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok_list(service.get_action_items(db))

@action_item_router.get("/{item_id}", response_model=Envelope[ActionItemSchema])
def action_item_detail(item_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok(service.get_action_item(db, item_id))

@action_item_router.post("", response_model=Envelope[ActionItemSchema], status_code=status.HTTP_201_CREATED)
def action_item_post(payload: ActionItemCreatePayload, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.create_action_item(db, payload))

@action_item_router.put("/{item_id}", response_model=Envelope[ActionItemSchema])
def action_item_put(item_id: int, payload: ActionItemUpdate, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.update_action_item(db, item_id, payload))

@action_item_router.delete("/{item_id}", response_model=EmptyEnvelope)
def action_item_delete(item_id: int, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    service.delete_action_item(db, item_id)
    return ok_empty()
