from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management
from .schema import StrategicGoalSchema, StrategicGoalCreatePayload, StrategicGoalUpdate
from . import service

strategic_goal_router = APIRouter(prefix="/strategic-goals", tags=["Strategic Goals"])

@strategic_goal_router.get("", response_model=ListEnvelope[StrategicGoalSchema])
def list_strategic_goals(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok_list(service.get_strategic_goals(db))

@strategic_goal_router.get("/{goal_id}", response_model=Envelope[StrategicGoalSchema])
def strategic_goal_detail(goal_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok(service.get_strategic_goal(db, goal_id))

@strategic_goal_router.post("", response_model=Envelope[StrategicGoalSchema], status_code=status.HTTP_201_CREATED)
def strategic_goal_post(payload: StrategicGoalCreatePayload, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.create_strategic_goal(db, payload))

@strategic_goal_router.put("/{goal_id}", response_model=Envelope[StrategicGoalSchema])
def strategic_goal_put(goal_id: int, payload: StrategicGoalUpdate, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.update_strategic_goal(db, goal_id, payload))

@strategic_goal_router.delete("/{goal_id}", response_model=EmptyEnvelope)
def strategic_goal_delete(goal_id: int, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    service.delete_strategic_goal(db, goal_id)
    return ok_empty()
