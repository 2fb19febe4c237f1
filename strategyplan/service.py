from typing import List
from sqlalchemy.orm import Session

from core import crud
from core.exceptions import ValidationException
from core.integrity import Reference, ensure_references
from organization.models import Organization
from .models import StrategyPlan
from .schema import StrategyPlanCreatePayload, StrategyPlanUpdate

def get_strategy_plans(db: Session) -> List[StrategyPlan]:
    return crud.list_rows(db, StrategyPlan)

def get_strategy_plan(db: Session, plan_id: int) -> StrategyPlan:
    return crud.get_or_404(db, StrategyPlan, plan_id, "Strategy plan")

def create_strategy_plan(db: Session, dto: StrategyPlanCreatePayload) -> StrategyPlan:
    ensure_references(db, Reference(Organization, dto.org_id, "Organization"))
    return crud.insert(db, StrategyPlan(**dto.model_dump()))

def update_strategy_plan(db: Session, plan_id: int, patch: StrategyPlanUpdate) -> StrategyPlan:
    plan = get_strategy_plan(db, plan_id)
    data = patch.model_dump(exclude_unset=True)
    ensure_references(db, Reference(Organization, data.get("org_id"), "Organization"))
    start = data["start_date"] if "start_date" in data else plan.start_date
    end = data["end_date"] if "end_date" in data else plan.end_date
    if start and end and end < start:
        raise ValidationException("end_date must not be before start_date")
    crud.apply_patch(plan, data, required=("org_id", "plan_name"))
    crud.commit_and_refresh(db, plan)
    return plan

def delete_strategy_plan(db: Session, plan_id: int) -> None:
    plan = get_strategy_plan(db, plan_id)
    crud.delete(db, plan)
