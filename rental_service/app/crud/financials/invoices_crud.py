import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from shared.core.database import commit_or_rollback
from shared.helpers.json_response_helper import not_found
from shared.helpers.property_helper import (
    building_label, index_by_id, is_overdue, tenant_label, unit_label
)
from ...enum.financials_enum import PaymentStatusFilter, french_month_name
from ...models.financials.invoices import Invoice
from ...models.leasing_tenants.contracts import Contract
from ...models.leasing_tenants.tenants import Tenant
from ...models.space_sites.buildings import Building
from ...models.space_sites.units import Unit
from ...schemas.financials.invoices_schemas import (
    InvoiceCreate, InvoiceOut, InvoicePaid, InvoicesOverview, InvoicesRequest,
    InvoicesResponse, InvoiceUpdate
)

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# CRUD OPERATIONS
# ----------------------------------------------------------------------

def enrich_invoice(invoice: Invoice, contracts: dict, tenants: dict, units: dict,
                   buildings: dict, today: Optional[date] = None) -> InvoiceOut:
    contract = contracts.get(invoice.contract_id)
    tenant = tenants.get(contract.tenant_id) if contract else None
    unit = units.get(contract.unit_id) if contract else None
    building = buildings.get(unit.building_id) if unit else None

    invoice_out = InvoiceOut.model_validate(invoice)
    return invoice_out.model_copy(update={
        "tenant_name": tenant_label(tenant),
        "unit_number": unit_label(unit),
        "building_name": building_label(building),
        "month_name": french_month_name(invoice.month).capitalize(),
        "is_overdue": is_overdue(invoice_out.due_date, invoice_out.is_paid, today),
    })


def build_invoices_filters(user_id: str, params: InvoicesRequest):
    filters = [Invoice.user_id == user_id]

    if params.status == PaymentStatusFilter.paid:
        filters.append(Invoice.is_paid == True)
    elif params.status == PaymentStatusFilter.unpaid:
        filters.append(Invoice.is_paid == False)

    if params.month:
        filters.append(Invoice.month == params.month)
    if params.year:
        filters.append(Invoice.year == params.year)

    return filters


def _enriched_invoices(db: Session, user_id: str, invoices: List[Invoice]) -> List[InvoiceOut]:
    contracts = index_by_id(
        db.query(Contract).filter(Contract.user_id == user_id).all())
    tenants = index_by_id(db.query(Tenant).filter(Tenant.user_id == user_id).all())
    units = index_by_id(db.query(Unit).filter(Unit.user_id == user_id).all())
    buildings = index_by_id(
        db.query(Building).filter(Building.user_id == user_id).all())
    return [enrich_invoice(i, contracts, tenants, units, buildings) for i in invoices]


def get_invoices(db: Session, user_id: str, params: InvoicesRequest) -> InvoicesResponse:
    invoices = (
        db.query(Invoice)
        .filter(*build_invoices_filters(user_id, params))
        .order_by(Invoice.year.desc(), Invoice.month.desc(), Invoice.created_at.desc())
        .all()
    )
    results = _enriched_invoices(db, user_id, invoices)

    if params.search:
        term = params.search.lower()
        results = [
            i for i in results
            if term in i.tenant_name.lower()
            or term in i.unit_number.lower()
            or term in i.building_name.lower()
        ]

    skip = params.skip or 0
    page = results[skip:skip + params.limit] if params.limit else results[skip:]
    return InvoicesResponse(invoices=page, total=len(results))


def get_invoices_overview(db: Session, user_id: str) -> InvoicesOverview:
    invoices = [
        InvoiceOut.model_validate(i)
        for i in db.query(Invoice).filter(Invoice.user_id == user_id).all()
    ]
    paid = [i for i in invoices if i.is_paid]
    unpaid = [i for i in invoices if not i.is_paid]

    return InvoicesOverview(
        total_paid=sum((i.total_amount for i in paid), Decimal("0")),
        total_unpaid=sum((i.total_amount for i in unpaid), Decimal("0")),
        unpaid_count=len(unpaid),
    )


def get_invoice_by_id(db: Session, user_id: str, invoice_id: UUID):
    return db.query(Invoice).filter(
        Invoice.id == invoice_id,
        Invoice.user_id == user_id
    ).first()


def get_invoice(db: Session, user_id: str, invoice_id: UUID) -> InvoiceOut:
    db_invoice = get_invoice_by_id(db, user_id, invoice_id)
    if not db_invoice:
        not_found("Invoice")
    return _enriched_invoices(db, user_id, [db_invoice])[0]


def create_invoice(db: Session, user_id: str, request: InvoiceCreate) -> InvoiceOut:
    db_invoice = Invoice(user_id=user_id, **request.model_dump())
    db.add(db_invoice)
    commit_or_rollback(db)
    db.refresh(db_invoice)
    logger.info("Invoice %s created for %02d/%d",
                db_invoice.id, db_invoice.month, db_invoice.year)
    return get_invoice(db, user_id, db_invoice.id)


def update_invoice(db: Session, user_id: str, request: InvoiceUpdate) -> InvoiceOut:
    db_invoice = get_invoice_by_id(db, user_id, request.id)
    if not db_invoice:
        not_found("Invoice")

    for key, value in request.model_dump(exclude={"id"}).items():
        setattr(db_invoice, key, value)
    commit_or_rollback(db)
    return get_invoice(db, user_id, request.id)


def mark_invoice_paid(db: Session, user_id: str, invoice_id: UUID, request: InvoicePaid) -> InvoiceOut:
    db_invoice = get_invoice_by_id(db, user_id, invoice_id)
    if not db_invoice:
        not_found("Invoice")

    db_invoice.is_paid = True
    db_invoice.paid_date = request.paid_date or db_invoice.paid_date or date.today()
    commit_or_rollback(db)
    return get_invoice(db, user_id, invoice_id)


def attach_document(db: Session, user_id: str, invoice_id: UUID, document_url: str) -> InvoiceOut:
    db_invoice = get_invoice_by_id(db, user_id, invoice_id)
    if not db_invoice:
        not_found("Invoice")

    db_invoice.document_url = document_url
    commit_or_rollback(db)
    return get_invoice(db, user_id, invoice_id)


def delete_invoice(db: Session, user_id: str, invoice_id: UUID):
    db_invoice = get_invoice_by_id(db, user_id, invoice_id)
    if not db_invoice:
        not_found("Invoice")

    db.delete(db_invoice)
    commit_or_rollback(db)
    return {"id": str(invoice_id), "deleted": True}
