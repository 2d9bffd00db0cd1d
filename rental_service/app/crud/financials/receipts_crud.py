import logging
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.core.database import commit_or_rollback
from shared.helpers.json_response_helper import not_found
from shared.helpers.receipt_helper import (
    charge_label, generate_receipt_number, receipt_amount_in_words, receipt_total
)
from ...models.financials.receipts import Receipt
from ...schemas.financials.receipts_schemas import (
    ReceiptCreate, ReceiptDraft, ReceiptLine, ReceiptListResponse, ReceiptOut,
    ReceiptRender, ReceiptRequest, ReceiptUpdate
)

logger = logging.getLogger(__name__)

FIXED_LINES = (
    ("Loyer Net", "base_rent"),
    ("Charges de Gardien/Concierge", "janitor_charge"),
    ("Charges d'Électricité", "electricity_charge"),
    ("Charges d'Eau", "water_charge"),
)


# ----------------------------------------------------------------------
# QUERIES
# ----------------------------------------------------------------------

def build_receipts_filters(user_id: str, params: ReceiptRequest):
    filters = [Receipt.user_id == user_id]

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(or_(
            Receipt.receipt_number.ilike(search_term),
            Receipt.tenant_name.ilike(search_term),
            Receipt.landlord_name.ilike(search_term),
        ))

    return filters


def get_receipts(db: Session, user_id: str, params: ReceiptRequest) -> ReceiptListResponse:
    rows = (
        db.query(Receipt)
        .filter(*build_receipts_filters(user_id, params))
        .order_by(Receipt.created_at.desc())
        .all()
    )
    receipts = [ReceiptOut.model_validate(row) for row in rows]

    # the aggregate covers every matching receipt, not only the page
    total_amount = sum((r.total for r in receipts), Decimal("0"))

    skip = params.skip or 0
    page = receipts[skip:skip + params.limit] if params.limit else receipts[skip:]

    return ReceiptListResponse(
        receipts=page,
        total=len(receipts),
        total_amount=total_amount
    )


def get_receipt_by_id(db: Session, user_id: str, receipt_id: UUID) -> Optional[Receipt]:
    return db.query(Receipt).filter(
        Receipt.id == receipt_id,
        Receipt.user_id == user_id
    ).first()


def get_receipt(db: Session, user_id: str, receipt_id: UUID) -> ReceiptOut:
    db_receipt = get_receipt_by_id(db, user_id, receipt_id)
    if not db_receipt:
        not_found("Receipt")
    return ReceiptOut.model_validate(db_receipt)


def new_receipt_draft(today: Optional[date] = None) -> ReceiptDraft:
    return ReceiptDraft(
        receipt_number=generate_receipt_number(),
        issue_date=today or date.today()
    )


# ----------------------------------------------------------------------
# WRITES
# ----------------------------------------------------------------------

def _receipt_values(request) -> dict:
    values = request.model_dump(exclude={"id", "extra_charges"})
    # JSON column: decimals go in as strings, order is kept
    values["extra_charges"] = [
        charge.model_dump(mode="json") for charge in request.extra_charges
    ]
    return values


def create_receipt(db: Session, user_id: str, request: ReceiptCreate) -> ReceiptOut:
    values = _receipt_values(request)
    values["receipt_number"] = request.receipt_number or generate_receipt_number()
    values["issue_date"] = request.issue_date or date.today()

    db_receipt = Receipt(user_id=user_id, **values)
    db.add(db_receipt)
    commit_or_rollback(
        db, f"Receipt number {values['receipt_number']} already exists")
    db.refresh(db_receipt)

    logger.info("Receipt %s created for user %s",
                db_receipt.receipt_number, user_id)
    return ReceiptOut.model_validate(db_receipt)


def update_receipt(db: Session, user_id: str, request: ReceiptUpdate) -> ReceiptOut:
    db_receipt = get_receipt_by_id(db, user_id, request.id)
    if not db_receipt:
        not_found("Receipt")

    for key, value in _receipt_values(request).items():
        setattr(db_receipt, key, value)

    commit_or_rollback(
        db, f"Receipt number {request.receipt_number} already exists")
    db.refresh(db_receipt)
    return ReceiptOut.model_validate(db_receipt)


def delete_receipt(db: Session, user_id: str, receipt_id: UUID):
    db_receipt = get_receipt_by_id(db, user_id, receipt_id)
    if not db_receipt:
        not_found("Receipt")

    db.delete(db_receipt)
    commit_or_rollback(db)
    logger.info("Receipt %s deleted", receipt_id)
    return {"id": str(receipt_id), "deleted": True}


# ----------------------------------------------------------------------
# RENDERING
# ----------------------------------------------------------------------

def build_receipt_render(receipt: ReceiptOut) -> ReceiptRender:
    lines = [
        ReceiptLine(label=label, amount=getattr(receipt, field))
        for label, field in FIXED_LINES
    ]
    lines.extend(
        ReceiptLine(label=charge_label(charge), amount=charge.amount)
        for charge in receipt.extra_charges
    )
    total = receipt_total(receipt)

    return ReceiptRender(
        receipt_number=receipt.receipt_number,
        landlord_name=receipt.landlord_name,
        tenant_name=receipt.tenant_name,
        property_address=receipt.property_address,
        period_start=receipt.period_start,
        period_end=receipt.period_end,
        signatory_city=receipt.signatory_city,
        issue_date=receipt.issue_date,
        lines=lines,
        total=total,
        total_in_words=receipt_amount_in_words(total),
        currency=settings.CURRENCY_LABEL,
        currency_words=settings.CURRENCY_WORDS,
    )


def render_receipt(db: Session, user_id: str, receipt_id: UUID) -> ReceiptRender:
    return build_receipt_render(get_receipt(db, user_id, receipt_id))
