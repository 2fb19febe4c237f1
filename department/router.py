from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management
from .schemas import DepartmentSchema, DepartmentCreatePayload, DepartmentUpdate
from . import service

department_router = APIRouter(prefix="/departments", tags=["Departments"])

# List all departments
@department_router.get("", response_model=ListEnvelope[DepartmentSchema])
def list_departments(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok_list(service.get_departments(db))

# Get department by id
@department_router.get("/{department_id}", response_model=Envelope[DepartmentSchema])
def department_detail(department_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok(service.get_department(db, department_id))

# Create department
@department_router.post("", response_model=Envelope[DepartmentSchema], status_code=status.HTTP_201_CREATED)
def department_post(payload: DepartmentCreatePayload, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.create_department(db, payload))

# Update department
@department_router.put("/{department_id}", response_model=Envelope[DepartmentSchema])
def department_put(department_id: int, payload: DepartmentUpdate, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.update_department(db, department_id, payload))

# Delete department
@department_router.delete("/{department_id}", response_model=EmptyEnvelope)
def department_delete(department_id: int, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    service.delete_department(db, department_id)
    return ok_empty()
