from __future__ import annotations
from typing import Any, List, Mapping

from sqlalchemy.orm import Session

from core import crud
from core.integrity import Reference, ensure_references
from actionitem.models import ActionItem
from riskplan.models import RiskManagementPlan
from strategyplan.models import StrategyPlan
from user.models import User
from .models import Risk
from .schema import RiskCreatePayload, RiskUpdate


# every reference is optional; absent keys are skipped by ensure_references
def _references(data: Mapping[str, Any]) -> list[Reference]:
    return [
        Reference(RiskManagementPlan, data.get("risk_plan_id"), "Risk management plan"),
        Reference(StrategyPlan, data.get("strategy_plan_id"), "Strategy plan"),
        Reference(ActionItem, data.get("action_item_id"), "Action item"),
        Reference(User, data.get("responsible_person_id"), "Responsible person"),
    ]


def get_risks(db: Session) -> List[Risk]:
    return crud.list_rows(db, Risk)


def get_risk(db: Session, risk_id: int) -> Risk:
    return crud.get_or_404(db, Risk, risk_id, "Risk")


def create_risk(db: Session, dto: RiskCreatePayload) -> Risk:
    data = dto.model_dump()
    ensure_references(db, *_references(data))
    return crud.insert(db, Risk(**data))


def update_risk(db: Session, risk_id: int, patch: RiskUpdate) -> Risk:
    risk = get_risk(db, risk_id)
    data = patch.model_dump(exclude_unset=True)
    ensure_references(db, *_references(data))
    crud.apply_patch(risk, data, required=("risk_description", "risk_score"))
    crud.commit_and_refresh(db, risk)
    return risk


def delete_risk(db: Session, risk_id: int) -> None:
    crud.delete(db, get_risk(db, risk_id))
