from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management
from .schema import HrDevPlanSchema, HrDevPlanCreatePayload, HrDevPlanUpdate
from . import service

hr_dev_plan_router = APIRouter(prefix="/hr-dev-plans", tags=["HR Development Plans"])

@hr_dev_plan_router.get("", response_model=ListEnvelope[HrDevPlanSchema])
def list_hr_dev_plans(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok_list(service.get_hr_dev_plans(db))

@hr_dev_plan_router.get("/{plan_id}", response_model=Envelope[HrDevPlanSchema])
def hr_dev_plan_detail(plan_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok(service.get_hr_dev_plan(db, plan_id))

@hr_dev_plan_router.post("", response_model=Envelope[HrDevPlanSchema], status_code=status.HTTP_201_CREATED)
def hr_dev_plan_post(payload: HrDevPlanCreatePayload, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.create_hr_dev_plan(db, payload))

@hr_dev_plan_router.put("/{plan_id}", response_model=Envelope[HrDevPlanSchema])
def hr_dev_plan_put(plan_id: int, payload: HrDevPlanUpdate, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.update_hr_dev_plan(db, plan_id, payload))

@hr_dev_plan_router.delete("/{plan_id}", response_model=EmptyEnvelope)
def hr_dev_plan_delete(plan_id: int, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    service.delete_hr_dev_plan(db, plan_id)
    return ok_empty()
