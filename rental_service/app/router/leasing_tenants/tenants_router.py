from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_rental_db as get_db
from shared.core.schemas import DeleteResult, DocumentAttach, Lookup, UserToken
from ...crud.leasing_tenants import tenants_crud as crud
from ...schemas.leasing_tenants.tenants_schemas import (
    TenantCreate, TenantListResponse, TenantOut, TenantRequest, TenantUpdate
)

router = APIRouter(
    prefix="/api/tenants",
    tags=["tenants"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("/all", response_model=TenantListResponse)
def get_tenants(
    params: TenantRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_all_tenants(db, current_user.user_id, params)


@router.get("/lookup", response_model=List[Lookup])
def tenant_lookup(
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.tenant_lookup(db, current_user.user_id)


@router.post("/", response_model=TenantOut)
def create_tenant(
    tenant: TenantCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.create_tenant(db, current_user.user_id, tenant)


@router.put("/", response_model=TenantOut)
def update_tenant(
    tenant: TenantUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.update_tenant(db, current_user.user_id, tenant)


@router.get("/{tenant_id}", response_model=TenantOut)
def get_tenant(
    tenant_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_tenant(db, current_user.user_id, tenant_id)


@router.put("/{tenant_id}/document", response_model=TenantOut)
def attach_id_document(
    tenant_id: UUID,
    document: DocumentAttach,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.attach_id_document(db, current_user.user_id, tenant_id, document.document_url)


@router.delete("/{tenant_id}", response_model=DeleteResult)
def delete_tenant(
    tenant_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.delete_tenant(db, current_user.user_id, tenant_id)
