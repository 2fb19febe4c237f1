from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management
from .schema import DigitalDevPlanSchema, DigitalDevPlanCreatePayload, DigitalDevPlanUpdate
from . import service

digital_dev_plan_router = APIRouter(prefix="/digital-dev-plans", tags=["Digital Development Plans"])

@digital_dev_plan_router.get("", response_model=ListEnvelope[DigitalDevPlanSchema])
def list_digital_dev_plans(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok_list(service.get_digital_dev_plans(db))

@digital_dev_plan_router.get("/{plan_id}", response_model=Envelope[DigitalDevPlanSchema])
def digital_dev_plan_detail(plan_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok(service.get_digital_dev_plan(db, plan_id))

@digital_dev_plan_router.post("", response_model=Envelope[DigitalDevPlanSchema], status_code=status.HTTP_201_CREATED)
def digital_dev_plan_post(payload: DigitalDevPlanCreatePayload, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.create_digital_dev_plan(db, payload))

@digital_dev_plan_router.put("/{plan_id}", response_model=Envelope[DigitalDevPlanSchema])
def digital_dev_plan_put(plan_id: int, payload: DigitalDevPlanUpdate, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.update_digital_dev_plan(db, plan_id, payload))

@digital_dev_plan_router.delete("/{plan_id}", response_model=EmptyEnvelope)
def digital_dev_plan_delete(plan_id: int, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    service.delete_digital_dev_plan(db, plan_id)
    return ok_empty()
