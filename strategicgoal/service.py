from typing import List
from sqlalchemy.orm import Session

from core import crud
from core.integrity import Reference, ensure_references
from strategyplan.models import StrategyPlan
from .models import StrategicGoal
from .schema import StrategicGoalCreatePayload, StrategicGoalUpdate

def get_strategic_goals(db: Session) -> List[StrategicGoal]:
    return crud.list_rows(db, StrategicGoal)

def get_strategic_goal(db: Session, goal_id: int) -> StrategicGoal:
    return crud.get_or_404(db, StrategicGoal, goal_id, "Strategic goal")

def create_strategic_goal(db: Session, dto: StrategicGoalCreatePayload) -> StrategicGoal:
    ensure_references(db, Reference(StrategyPlan, dto.strategy_plan_id, "Strategy plan"))
    return crud.insert(db, StrategicGoal(**dto.model_dump()))

def update_strategic_goal(db: Session, goal_id: int, patch: StrategicGoalUpdate) -> StrategicGoal:
    goal = get_strategic_goal(db, goal_id)
    data = patch.model_dump(exclude_unset=True)
    ensure_references(db, Reference(StrategyPlan, data.get("strategy_plan_id"), "Strategy plan"))
    crud.apply_patch(goal, data, required=("strategy_plan_id", "goal_description", "progress"))
    crud.commit_and_refresh(db, goal)
    return goal

def delete_strategic_goal(db: Session, goal_id: int) -> None:
    goal = get_strategic_goal(db, goal_id)
    crud.delete(db, goal)
