from typing import List
from sqlalchemy.orm import Session

from core import crud
from core.integrity import DependentGuard, Reference, ensure_references
from actionitem.models import ActionItem
from strategyplan.models import StrategyPlan
from .models import ActionPlan
from .schema import ActionPlanCreatePayload, ActionPlanUpdate

items_guard = DependentGuard(
    ActionItem.action_plan_id,
    "Cannot delete action plan with associated action items. Please delete action items first.",
)

def get_action_plans(db: Session) -> List[ActionPlan]:
    return crud.list_rows(db, ActionPlan)

def get_action_plan(db: Session, plan_id: int) -> ActionPlan:
    return crud.get_or_404(db, ActionPlan, plan_id, "Action plan")

def create_action_plan(db: Session, dto: ActionPlanCreatePayload) -> ActionPlan:
    ensure_references(db, Reference(StrategyPlan, dto.strategy_plan_id, "Strategy plan"))
    return crud.insert(db, ActionPlan(**dto.model_dump()))

def update_action_plan(db: Session, plan_id: int, patch: ActionPlanUpdate) -> ActionPlan:
    plan = get_action_plan(db, plan_id)
    data = patch.model_dump(exclude_unset=True)
    ensure_references(db, Reference(StrategyPlan, data.get("strategy_plan_id"), "Strategy plan"))
    crud.apply_patch(plan, data, required=("strategy_plan_id", "plan_name", "year"))
    crud.commit_and_refresh(db, plan)
    return plan

def delete_action_plan(db: Session, plan_id: int) -> None:
    plan = get_action_plan(db, plan_id)
    items_guard.check(db, plan_id)
    crud.delete(db, plan)
