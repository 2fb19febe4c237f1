from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management
from .schema import RiskPlanSchema, RiskPlanCreatePayload, RiskPlanUpdate
from . import service

risk_plan_router = APIRouter(prefix="/risk-management-plans", tags=["Risk Management Plans"])

@risk_plan_router.get("", response_model=ListEnvelope[RiskPlanSchema])
def list_risk_plans(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok_list(service.get_risk_plans(db))

@risk_plan_router.get("/{plan_id}", response_model=Envelope[RiskPlanSchema])
def risk_plan_detail(plan_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok(service.get_risk_plan(db, plan_id))

@risk_plan_router.post("", response_model=Envelope[RiskPlanSchema], status_code=status.HTTP_201_CREATED)
def risk_plan_post(payload: RiskPlanCreatePayload, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.create_risk_plan(db, payload))

@risk_plan_router.put("/{plan_id}", response_model=Envelope[RiskPlanSchema])
def risk_plan_put(plan_id: int, payload: RiskPlanUpdate, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.update_risk_plan(db, plan_id, payload))

@risk_plan_router.delete("/{plan_id}", response_model=EmptyEnvelope)
def risk_plan_delete(plan_id: int, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    service.delete_risk_plan(db, plan_id)
    return ok_empty()
