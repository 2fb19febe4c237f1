from typing import List
from sqlalchemy.orm import Session

from core import crud
from core.integrity import Reference, ensure_references
from hrdevplan.models import HrDevPlan
from user.models import User
from .models import HrDevInitiative
from .schema import HrDevInitiativeCreatePayload, HrDevInitiativeUpdate

def get_hr_dev_initiatives(db: Session) -> List[HrDevInitiative]:
    return crud.list_rows(db, HrDevInitiative)

def get_hr_dev_initiative(db: Session, initiative_id: int) -> HrDevInitiative:
    return crud.get_or_404(db, HrDevInitiative, initiative_id, "HR development initiative")

def create_hr_dev_initiative(db: Session, dto: HrDevInitiativeCreatePayload) -> HrDevInitiative:
    ensure_references(
        db,
        Reference(HrDevPlan, dto.hr_plan_id, "HR development plan"),
        Reference(User, dto.responsible_person_id, "Responsible person"),
    )
    return crud.insert(db, HrDevInitiative(**dto.model_dump()))

def update_hr_dev_initiative(db: Session, initiative_id: int, patch: HrDevInitiativeUpdate) -> HrDevInitiative:
    initiative = get_hr_dev_initiative(db, initiative_id)
    data = patch.model_dump(exclude_unset=True)
    ensure_references(
        db,
        Reference(HrDevPlan, data.get("hr_plan_id"), "HR development plan"),
        Reference(User, data.get("responsible_person_id"), "Responsible person"),
    )
    crud.apply_patch(initiative, data, required=("hr_plan_id", "initiative_name", "progress"))
    crud.commit_and_refresh(db, initiative)
    return initiative

def delete_hr_dev_initiative(db: Session, initiative_id: int) -> None:
    initiative = get_hr_dev_initiative(db, initiative_id)
    crud.delete(db, initiative)
