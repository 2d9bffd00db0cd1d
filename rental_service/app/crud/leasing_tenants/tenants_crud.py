import logging
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session

from shared.core.database import commit_or_rollback
from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import not_found
from shared.helpers.property_helper import index_by_id
from ...models.leasing_tenants.contracts import Contract
from ...models.leasing_tenants.tenants import Tenant
from ...models.space_sites.buildings import Building
from ...models.space_sites.units import Unit
from ...schemas.leasing_tenants.tenants_schemas import (
    TenantCreate, TenantListResponse, TenantOut, TenantRequest, TenantUpdate
)

logger = logging.getLogger(__name__)


def enrich_tenant(tenant: Tenant, contracts, units: dict, buildings: dict) -> TenantOut:
    """Locate a tenant through its active contract, blanks when there is none."""
    active = next(
        (c for c in contracts if c.tenant_id == tenant.id and c.status == "active"),
        None
    )

    building_name = ""
    unit_number = ""
    if active:
        unit = units.get(active.unit_id)
        if unit:
            unit_number = unit.unit_number
            building = buildings.get(unit.building_id)
            if building:
                building_name = building.name

    return TenantOut.model_validate(tenant).model_copy(update={
        "building_name": building_name,
        "unit_number": unit_number,
        "has_active_contract": active is not None,
    })


def get_all_tenants(db: Session, user_id: str, params: TenantRequest) -> TenantListResponse:
    tenant_query = db.query(Tenant).filter(Tenant.user_id == user_id)

    if params.search:
        search_term = f"%{params.search}%"
        tenant_query = tenant_query.filter(or_(
            Tenant.first_name.ilike(search_term),
            Tenant.last_name.ilike(search_term),
            Tenant.email.ilike(search_term),
            Tenant.phone.ilike(search_term),
        ))

    total = tenant_query.count()
    tenants = (
        tenant_query
        .order_by(Tenant.created_at.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )

    contracts = db.query(Contract).filter(Contract.user_id == user_id).all()
    units = index_by_id(db.query(Unit).filter(Unit.user_id == user_id).all())
    buildings = index_by_id(
        db.query(Building).filter(Building.user_id == user_id).all())

    return TenantListResponse(
        tenants=[enrich_tenant(t, contracts, units, buildings) for t in tenants],
        total=total
    )


def get_tenant_by_id(db: Session, user_id: str, tenant_id: UUID):
    return db.query(Tenant).filter(
        Tenant.id == tenant_id,
        Tenant.user_id == user_id
    ).first()


def get_tenant(db: Session, user_id: str, tenant_id: UUID) -> TenantOut:
    db_tenant = get_tenant_by_id(db, user_id, tenant_id)
    if not db_tenant:
        not_found("Tenant")

    contracts = db.query(Contract).filter(Contract.tenant_id == tenant_id).all()
    units = index_by_id(db.query(Unit).filter(Unit.user_id == user_id).all())
    buildings = index_by_id(
        db.query(Building).filter(Building.user_id == user_id).all())
    return enrich_tenant(db_tenant, contracts, units, buildings)


def tenant_lookup(db: Session, user_id: str):
    tenants = (
        db.query(Tenant)
        .filter(Tenant.user_id == user_id)
        .order_by(Tenant.last_name.asc(), Tenant.first_name.asc())
        .all()
    )
    return [Lookup(id=t.id, name=t.full_name) for t in tenants]


def create_tenant(db: Session, user_id: str, tenant: TenantCreate) -> TenantOut:
    db_tenant = Tenant(user_id=user_id, **tenant.model_dump())
    db.add(db_tenant)
    commit_or_rollback(db)
    db.refresh(db_tenant)
    return TenantOut.model_validate(db_tenant)


def update_tenant(db: Session, user_id: str, tenant: TenantUpdate) -> TenantOut:
    db_tenant = get_tenant_by_id(db, user_id, tenant.id)
    if not db_tenant:
        not_found("Tenant")

    for key, value in tenant.model_dump(exclude={"id"}).items():
        setattr(db_tenant, key, value)
    commit_or_rollback(db)
    db.refresh(db_tenant)
    return TenantOut.model_validate(db_tenant)


def attach_id_document(db: Session, user_id: str, tenant_id: UUID, document_url: str) -> TenantOut:
    db_tenant = get_tenant_by_id(db, user_id, tenant_id)
    if not db_tenant:
        not_found("Tenant")

    db_tenant.id_document_url = document_url
    commit_or_rollback(db)
    db.refresh(db_tenant)
    return TenantOut.model_validate(db_tenant)


def delete_tenant(db: Session, user_id: str, tenant_id: UUID):
    db_tenant = get_tenant_by_id(db, user_id, tenant_id)
    if not db_tenant:
        not_found("Tenant")

    # contracts are removed with the tenant (relationship cascade)
    contract_count = len(db_tenant.contracts)
    db.delete(db_tenant)
    commit_or_rollback(db)
    logger.info("Tenant %s deleted with %d contracts", tenant_id, contract_count)
    return {"id": str(tenant_id), "deleted": True}
