from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management
from .schema import DigitalInitiativeSchema, DigitalInitiativeCreatePayload, DigitalInitiativeUpdate
from . import service

digital_initiative_router = APIRouter(prefix="/digital-initiatives", tags=["Digital Initiatives"])

@digital_initiative_router.get("", response_model=ListEnvelope[DigitalInitiativeSchema])
def list_digital_initiatives(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok_list(service.get_digital_initiatives(db))

@digital_initiative_router.get("/{initiative_id}", response_model=Envelope[DigitalInitiativeSchema])
def digital_initiative_detail(initiative_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok(service.get_digital_initiative(db, initiative_id))

@digital_initiative_router.post("", response_model=Envelope[DigitalInitiativeSchema], status_code=status.HTTP_201_CREATED)
def digital_initiative_post(payload: DigitalInitiativeCreatePayload, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.create_digital_initiative(db, payload))

@digital_initiative_router.put("/{initiative_id}", response_model=Envelope[DigitalInitiativeSchema])
def digital_initiative_put(initiative_id: int, payload: DigitalInitiativeUpdate, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.update_digital_initiative(db, initiative_id, payload))

@digital_initiative_router.delete("/{initiative_id}", response_model=EmptyEnvelope)
def digital_initiative_delete(initiative_id: int, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    service.delete_digital_initiative(db, initiative_id)
    return ok_empty()
