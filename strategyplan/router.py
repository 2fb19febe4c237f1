from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management
from .schema import StrategyPlanSchema, StrategyPlanCreatePayload, StrategyPlanUpdate
from . import service

strategy_plan_router = APIRouter(prefix="/strategy-plans", tags=["Strategy Plans"])

# List all strategy plans
@strategy_plan_router.get("", response_model=ListEnvelope[StrategyPlanSchema])
def list_strategy_plans(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok_list(service.get_strategy_plans(db))

# Get strategy plan by id
@strategy_plan_router.get("/{plan_id}", response_model=Envelope[StrategyPlanSchema])
def strategy_plan_detail(plan_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok(service.get_strategy_plan(db, plan_id))

# Create strategy plan
@strategy_plan_router.post("", response_model=Envelope[StrategyPlanSchema], status_code=status.HTTP_201_CREATED)
def strategy_plan_post(payload: StrategyPlanCreatePayload, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.create_strategy_plan(db, payload))

# Update strategy plan
@strategy_plan_router.put("/{plan_id}", response_model=Envelope[StrategyPlanSchema])
def strategy_plan_put(plan_id: int, payload: StrategyPlanUpdate, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.update_strategy_plan(db, plan_id, payload))

# Delete strategy plan
@strategy_plan_router.delete("/{plan_id}", response_model=EmptyEnvelope)
def strategy_plan_delete(plan_id: int, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    service.delete_strategy_plan(db, plan_id)
    return ok_empty()
