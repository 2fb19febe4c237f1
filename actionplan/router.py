from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management
from .schema import ActionPlanSchema, ActionPlanCreatePayload, ActionPlanUpdate
from . import service

action_plan_router = APIRouter(prefix="/action-plans", tags=["Action Plans"])

@action_plan_router.get("", response_model=ListEnvelope[ActionPlanSchema])
def list_action_plans(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok_list(service.get_action_plans(db))

@action_plan_router.get("/{plan_id}", response_model=Envelope[ActionPlanSchema])
def action_plan_detail(plan_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok(service.get_action_plan(db, plan_id))

@action_plan_router.post("", response_model=Envelope[ActionPlanSchema], status_code=status.HTTP_201_CREATED)
def action_plan_post(payload: ActionPlanCreatePayload, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.create_action_plan(db, payload))

@action_plan_router.put("/{plan_id}", response_model=Envelope[ActionPlanSchema])
def action_plan_put(plan_id: int, payload: ActionPlanUpdate, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.update_action_plan(db, plan_id, payload))

# refuses while action items still point at the plan
@action_plan_router.delete("/{plan_id}", response_model=EmptyEnvelope)
def action_plan_delete(plan_id: int, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    service.delete_action_plan(db, plan_id)
    return ok_empty()
