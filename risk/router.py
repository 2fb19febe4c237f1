from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management
from .schema import RiskSchema, RiskCreatePayload, RiskUpdate
from . import service

risk_router = APIRouter(prefix="/risks", tags=["Risks"])

@risk_router.get("", response_model=ListEnvelope[RiskSchema])
def list_risks(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok_list(service.get_risks(db))

@risk_router.get("/{risk_id}", response_model=Envelope[RiskSchema])
def risk_detail(risk_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return ok(service.get_risk(db, risk_id))

@risk_router.post("", response_model=Envelope[RiskSchema], status_code=status.HTTP_201_CREATED)
def risk_post(payload: RiskCreatePayload, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.create_risk(db, payload))

@risk_router.put("/{risk_id}", response_model=Envelope[RiskSchema])
def risk_put(risk_id: int, payload: RiskUpdate, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    return ok(service.update_risk(db, risk_id, payload))

@risk_router.delete("/{risk_id}", response_model=EmptyEnvelope)
def risk_delete(risk_id: int, db: Session = Depends(get_db), _mgr=Depends(require_management)):
    service.delete_risk(db, risk_id)
    return ok_empty()
