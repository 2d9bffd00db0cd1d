from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from shared.core.database import commit_or_rollback
from shared.helpers.json_response_helper import not_found
from shared.helpers.property_helper import (
    building_label, days_until, index_by_id, tenant_label, unit_label
)
from ...models.leasing_tenants.contracts import Contract
from ...models.leasing_tenants.tenants import Tenant
from ...models.space_sites.buildings import Building
from ...models.space_sites.units import Unit
from ...schemas.leasing_tenants.contracts_schemas import (
    ContractCreate, ContractListResponse, ContractOut, ContractOverview,
    ContractRequest, ContractUpdate
)


def enrich_contract(contract: Contract, tenants: dict, units: dict, buildings: dict,
                    today: Optional[date] = None) -> ContractOut:
    unit = units.get(contract.unit_id)
    building = buildings.get(unit.building_id) if unit else None

    return ContractOut.model_validate(contract).model_copy(update={
        "tenant_name": tenant_label(tenants.get(contract.tenant_id)),
        "unit_number": unit_label(unit),
        "building_name": building_label(building),
        "days_until_expiry": days_until(contract.end_date, today),
    })


def _load_context(db: Session, user_id: str):
    tenants = index_by_id(db.query(Tenant).filter(Tenant.user_id == user_id).all())
    units = index_by_id(db.query(Unit).filter(Unit.user_id == user_id).all())
    buildings = index_by_id(
        db.query(Building).filter(Building.user_id == user_id).all())
    return tenants, units, buildings


def get_contracts(db: Session, user_id: str, params: ContractRequest) -> ContractListResponse:
    contract_query = db.query(Contract).filter(Contract.user_id == user_id)

    if params.status and params.status.lower() != "all":
        contract_query = contract_query.filter(Contract.status == params.status)

    contracts = contract_query.order_by(Contract.created_at.desc()).all()
    tenants, units, buildings = _load_context(db, user_id)
    results = [enrich_contract(c, tenants, units, buildings) for c in contracts]

    # names live on other tables, so search runs on the enriched rows
    if params.search:
        term = params.search.lower()
        results = [
            c for c in results
            if term in c.tenant_name.lower()
            or term in c.unit_number.lower()
            or term in c.building_name.lower()
        ]

    skip = params.skip or 0
    page = results[skip:skip + params.limit] if params.limit else results[skip:]
    return ContractListResponse(contracts=page, total=len(results))


def get_contracts_overview(db: Session, user_id: str) -> ContractOverview:
    active = db.query(Contract).filter(
        Contract.user_id == user_id,
        Contract.status == "active"
    ).all()
    return ContractOverview(
        active_contracts=len(active),
        monthly_rent_total=sum((c.rent_amount for c in active), Decimal("0"))
    )


def get_contract_by_id(db: Session, user_id: str, contract_id: UUID):
    return db.query(Contract).filter(
        Contract.id == contract_id,
        Contract.user_id == user_id
    ).first()


def get_contract(db: Session, user_id: str, contract_id: UUID) -> ContractOut:
    db_contract = get_contract_by_id(db, user_id, contract_id)
    if not db_contract:
        not_found("Contract")
    tenants, units, buildings = _load_context(db, user_id)
    return enrich_contract(db_contract, tenants, units, buildings)


def _check_tenant(db: Session, user_id: str, tenant_id: UUID):
    exists = db.query(Tenant.id).filter(
        Tenant.id == tenant_id, Tenant.user_id == user_id).first()
    if not exists:
        not_found("Tenant")


def create_contract(db: Session, user_id: str, contract: ContractCreate) -> ContractOut:
    _check_tenant(db, user_id, contract.tenant_id)

    db_contract = Contract(user_id=user_id, **contract.model_dump())
    db.add(db_contract)
    commit_or_rollback(db)
    db.refresh(db_contract)
    return get_contract(db, user_id, db_contract.id)


def update_contract(db: Session, user_id: str, contract: ContractUpdate) -> ContractOut:
    db_contract = get_contract_by_id(db, user_id, contract.id)
    if not db_contract:
        not_found("Contract")
    _check_tenant(db, user_id, contract.tenant_id)

    for key, value in contract.model_dump(exclude={"id"}).items():
        setattr(db_contract, key, value)
    commit_or_rollback(db)
    return get_contract(db, user_id, contract.id)


def attach_document(db: Session, user_id: str, contract_id: UUID, document_url: str) -> ContractOut:
    db_contract = get_contract_by_id(db, user_id, contract_id)
    if not db_contract:
        not_found("Contract")

    db_contract.document_url = document_url
    commit_or_rollback(db)
    return get_contract(db, user_id, contract_id)


def delete_contract(db: Session, user_id: str, contract_id: UUID):
    db_contract = get_contract_by_id(db, user_id, contract_id)
    if not db_contract:
        not_found("Contract")

    db.delete(db_contract)
    commit_or_rollback(db)
    return {"id": str(contract_id), "deleted": True}
