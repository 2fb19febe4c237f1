from __future__ import annotations
from typing import Any, List, Mapping

from sqlalchemy.orm import Session

from core import crud
from core.integrity import DependentGuard, Reference, ensure_references
from actionplan.models import ActionPlan
from department.models import Department
from risk.models import Risk
from strategicgoal.models import StrategicGoal
from user.models import User
from .models import ActionItem
from .schema import ActionItemCreatePayload, ActionItemUpdate

risks_guard = DependentGuard(
    Risk.action_item_id,
    "Cannot delete action item with associated risks. Please delete risks first.",
)


# up to four parents; all are checked before the first failure is reported
def _references(data: Mapping[str, Any]) -> list[Reference]:
    return [
        Reference(ActionPlan, data.get("action_plan_id"), "Action plan"),
        Reference(StrategicGoal, data.get("goal_id"), "Strategic goal"),
        Reference(Department, data.get("responsible_department_id"), "Department"),
        Reference(User, data.get("responsible_person_id"), "Responsible person"),
    ]


def get_action_items(db: Session) -> List[ActionItem]:
    return crud.list_rows(db, ActionItem)


def get_action_item(db: Session, item_id: int) -> ActionItem:
    return crud.get_or_404(db, ActionItem, item_id, "Action item")


def create_action_item(db: Session, dto: ActionItemCreatePayload) -> ActionItem:
    data = dto.model_dump()
    ensure_references(db, *_references(data))
    return crud.insert(db, ActionItem(**data))


def update_action_item(db: Session, item_id: int, patch: ActionItemUpdate) -> ActionItem:
    item = get_action_item(db, item_id)
    data = patch.model_dump(exclude_unset=True)
    ensure_references(db, *_references(data))
    crud.apply_patch(item, data, required=("action_plan_id", "item_description", "progress"))
    crud.commit_and_refresh(db, item)
    return item


def delete_action_item(db: Session, item_id: int) -> None:
    item = get_action_item(db, item_id)
    risks_guard.check(db, item_id)
    crud.delete(db, item)
