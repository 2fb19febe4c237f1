from typing import List
from sqlalchemy.orm import Session

from core import crud
from core.integrity import Reference, ensure_references
from digitaldevplan.models import DigitalDevPlan
from user.models import User
from .models import DigitalInitiative
from .schema import DigitalInitiativeCreatePayload, DigitalInitiativeUpdate

def get_digital_initiatives(db: Session) -> List[DigitalInitiative]:
    return crud.list_rows(db, DigitalInitiative)

def get_digital_initiative(db: Session, initiative_id: int) -> DigitalInitiative:
    return crud.get_or_404(db, DigitalInitiative, initiative_id, "Digital initiative")

def create_digital_initiative(db: Session, dto: DigitalInitiativeCreatePayload) -> DigitalInitiative:
    ensure_references(
        db,
        Reference(DigitalDevPlan, dto.digital_plan_id, "Digital development plan"),
        Reference(User, dto.responsible_person_id, "Responsible person"),
    )
    return crud.insert(db, DigitalInitiative(**dto.model_dump()))

def update_digital_initiative(db: Session, initiative_id: int, patch: DigitalInitiativeUpdate) -> DigitalInitiative:
    initiative = get_digital_initiative(db, initiative_id)
    data = patch.model_dump(exclude_unset=True)
    ensure_references(
        db,
        Reference(DigitalDevPlan, data.get("digital_plan_id"), "Digital development plan"),
        Reference(User, data.get("responsible_person_id"), "Responsible person"),
    )
    crud.apply_patch(initiative, data, required=("digital_plan_id", "initiative_name", "progress"))
    crud.commit_and_refresh(db, initiative)
    return initiative

def delete_digital_initiative(db: Session, initiative_id: int) -> None:
    initiative = get_digital_initiative(db, initiative_id)
    crud.delete(db, initiative)
