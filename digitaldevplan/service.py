from typing import List
from sqlalchemy.orm import Session

from core import crud
from core.integrity import Reference, ensure_references
from strategyplan.models import StrategyPlan
from .models import DigitalDevPlan
from .schema import DigitalDevPlanCreatePayload, DigitalDevPlanUpdate

def get_digital_dev_plans(db: Session) -> List[DigitalDevPlan]:
    return crud.list_rows(db, DigitalDevPlan)

def get_digital_dev_plan(db: Session, plan_id: int) -> DigitalDevPlan:
    return crud.get_or_404(db, DigitalDevPlan, plan_id, "Digital development plan")

def create_digital_dev_plan(db: Session, dto: DigitalDevPlanCreatePayload) -> DigitalDevPlan:
    ensure_references(db, Reference(StrategyPlan, dto.strategy_plan_id, "Strategy plan"))
    return crud.insert(db, DigitalDevPlan(**dto.model_dump()))

def update_digital_dev_plan(db: Session, plan_id: int, patch: DigitalDevPlanUpdate) -> DigitalDevPlan:
    plan = get_digital_dev_plan(db, plan_id)
    data = patch.model_dump(exclude_unset=True)
    ensure_references(db, Reference(StrategyPlan, data.get("strategy_plan_id"), "Strategy plan"))
    crud.apply_patch(plan, data, required=("strategy_plan_id", "plan_name"))
    crud.commit_and_refresh(db, plan)
    return plan

def delete_digital_dev_plan(db: Session, plan_id: int) -> None:
    plan = get_digital_dev_plan(db, plan_id)
    crud.delete(db, plan)
