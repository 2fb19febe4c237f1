from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management
from .schema import HrDevInitiativeSchema, HrDevInitiativeCreatePayload, HrDevInitiativeUpdate
from . import service

hr_dev_initiative_router = APIRouter(prefix="/hr-dev-initiatives", tags=["HR Development Initiatives"])

@hr_dev_initiative_router.get("", response_model=ListEnvelope[HrDevInitiativeSchema])
def list_hr_dev_initiatives(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok_list(service.get_hr_dev_initiatives(db))

@hr_dev_initiative_router.get("/{initiative_id}", response_model=Envelope[HrDevInitiativeSchema])
def hr_dev_initiative_detail(initiative_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok(service.get_hr_dev_initiative(db, initiative_id))

@hr_dev_initiative_router.post("", response_model=Envelope[HrDevInitiativeSchema], status_code=status.HTTP_201_CREATED)
def hr_dev_initiative_post(payload: HrDevInitiativeCreatePayload, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.create_hr_dev_initiative(db, payload))

@hr_dev_initiative_router.put("/{initiative_id}", response_model=Envelope[HrDevInitiativeSchema])
def hr_dev_initiative_put(initiative_id: int, payload: HrDevInitiativeUpdate, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.update_hr_dev_initiative(db, initiative_id, payload))

@hr_dev_initiative_router.delete("/{initiative_id}", response_model=EmptyEnvelope)
def hr_dev_initiative_delete(initiative_id: int, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    service.delete_hr_dev_initiative(db, initiative_id)
    return ok_empty()
