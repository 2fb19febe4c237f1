from typing import List
from sqlalchemy.orm import Session

from core import crud
from core.integrity import DependentGuard
from risk.models import Risk
from .models import RiskManagementPlan
from .schema import RiskPlanCreatePayload, RiskPlanUpdate

risks_guard = DependentGuard(
    Risk.risk_plan_id,
    "Cannot delete risk management plan with associated risks. Please delete risks first.",
)

def get_risk_plans(db: Session) -> List[RiskManagementPlan]:
    return crud.list_rows(db, RiskManagementPlan)

def get_risk_plan(db: Session, plan_id: int) -> RiskManagementPlan:
    return crud.get_or_404(db, RiskManagementPlan, plan_id, "Risk management plan")

def create_risk_plan(db: Session, dto: RiskPlanCreatePayload) -> RiskManagementPlan:
    return crud.insert(db, RiskManagementPlan(**dto.model_dump()))

def update_risk_plan(db: Session, plan_id: int, patch: RiskPlanUpdate) -> RiskManagementPlan:
    plan = get_risk_plan(db, plan_id)
    crud.apply_patch(plan, patch.model_dump(exclude_unset=True), required=("plan_name", "year"))
    crud.commit_and_refresh(db, plan)
    return plan

def delete_risk_plan(db: Session, plan_id: int) -> None:
    plan = get_risk_plan(db, plan_id)
    risks_guard.check(db, plan_id)
    crud.delete(db, plan)
