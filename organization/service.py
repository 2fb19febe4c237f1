from typing import List
from sqlalchemy.orm import Session

from core import crud
from .models import Organization
from .schema import OrganizationCreatePayload, OrganizationUpdate

def list_organizations(db: Session) -> List[Organization]:
    return crud.list_rows(db, Organization)

def get_organization(db: Session, org_id: int) -> Organization:
    return crud.get_or_404(db, Organization, org_id, "Organization")

def create_organization(db: Session, dto: OrganizationCreatePayload) -> Organization:
    org = Organization(**dto.model_dump())
    return crud.insert(db, org)

def update_organization(db: Session, org_id: int, patch: OrganizationUpdate) -> Organization:
    org = get_organization(db, org_id)
    crud.apply_patch(org, patch.model_dump(exclude_unset=True), required=("org_name",))
    crud.commit_and_refresh(db, org)
    return org

def delete_organization(db: Session, org_id: int) -> None:
    org = get_organization(db, org_id)
    crud.delete(db, org)
