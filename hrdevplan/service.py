from typing import List
from sqlalchemy.orm import Session

from core import crud
from core.integrity import Reference, ensure_references
from strategyplan.models import StrategyPlan
from .models import HrDevPlan
from .schema import HrDevPlanCreatePayload, HrDevPlanUpdate

def get_hr_dev_plans(db: Session) -> List[HrDevPlan]:
    return crud.list_rows(db, HrDevPlan)

def get_hr_dev_plan(db: Session, plan_id: int) -> HrDevPlan:
    return crud.get_or_404(db, HrDevPlan, plan_id, "HR development plan")

def create_hr_dev_plan(db: Session, dto: HrDevPlanCreatePayload) -> HrDevPlan:
    ensure_references(db, Reference(StrategyPlan, dto.strategy_plan_id, "Strategy plan"))
    return crud.insert(db, HrDevPlan(**dto.model_dump()))

def update_hr_dev_plan(db: Session, plan_id: int, patch: HrDevPlanUpdate) -> HrDevPlan:
    plan = get_hr_dev_plan(db, plan_id)
    data = patch.model_dump(exclude_unset=True)
    ensure_references(db, Reference(StrategyPlan, data.get("strategy_plan_id"), "Strategy plan"))
    crud.apply_patch(plan, data, required=("strategy_plan_id", "plan_name"))
    crud.commit_and_refresh(db, plan)
    return plan

def delete_hr_dev_plan(db: Session, plan_id: int) -> None:
    plan = get_hr_dev_plan(db, plan_id)
    crud.delete(db, plan)
