from typing import List
from sqlalchemy.orm import Session

from core import crud
from core.integrity import DependentGuard
from actionitem.models import ActionItem
from .models import Department
from .schemas import DepartmentCreatePayload, DepartmentUpdate

items_guard = DependentGuard(
    ActionItem.responsible_department_id,
    "Cannot delete department with assigned action items. Please reassign action items first.",
)

def get_departments(db: Session) -> List[Department]:
    return crud.list_rows(db, Department)

def get_department(db: Session, department_id: int) -> Department:
    return crud.get_or_404(db, Department, department_id, "Department")

def create_department(db: Session, dto: DepartmentCreatePayload) -> Department:
    return crud.insert(db, Department(**dto.model_dump()))

def update_department(db: Session, department_id: int, patch: DepartmentUpdate) -> Department:
    dept = get_department(db, department_id)
    crud.apply_patch(dept, patch.model_dump(exclude_unset=True), required=("department_name",))
    crud.commit_and_refresh(db, dept)
    return dept

def delete_department(db: Session, department_id: int) -> None:
    dept = get_department(db, department_id)
    items_guard.check(db, department_id)
    crud.delete(db, dept)
