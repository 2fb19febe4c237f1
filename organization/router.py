from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import EmptyEnvelope, Envelope, ListEnvelope, ok, ok_empty, ok_list
from auth.services.auth_service import get_current_user
from authz.deps import require_management

from .schema import OrganizationSchema, OrganizationCreatePayload, OrganizationUpdate
from . import service

organization_router = APIRouter(prefix="/organizations", tags=["Organizations"])

@organization_router.get("", response_model=ListEnvelope[OrganizationSchema])
def list_organizations(
    db: Session = Depends(get_db),
    _user = Depends(get_current_user)
    ):
    return ok_list(service.list_organizations(db))

# Get org by id
@organization_router.get("/{org_id}", response_model=Envelope[OrganizationSchema])
def organization_detail(
    org_id: int,
    db: Session = Depends(get_db),
    _user = Depends(get_current_user)
    ):
    return ok(service.get_organization(db, org_id))

# Create org
@organization_router.post("", response_model=Envelope[OrganizationSchema], status_code=status.HTTP_201_CREATED)
def organization_post(
    payload: OrganizationCreatePayload,
    db: Session = Depends(get_db),
    _mgr = Depends(require_management)
    ):
    return ok(service.create_organization(db, payload))

# Update org
@organization_router.put("/{org_id}", response_model=Envelope[OrganizationSchema])
def organization_put(
    org_id: int,
    payload: OrganizationUpdate,
    db: Session = Depends(get_db),
    _mgr = Depends(require_management),
    ):
    return ok(service.update_organization(db, org_id, payload))

# Delete org
@organization_router.delete("/{org_id}", response_model=EmptyEnvelope)
def organization_delete(
    org_id: int,
    db: Session = Depends(get_db),
    _mgr = Depends(require_management),
    ):
    service.delete_organization(db, org_id)
    return ok_empty()
