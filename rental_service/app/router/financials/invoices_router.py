from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_rental_db as get_db
from shared.core.schemas import DeleteResult, DocumentAttach, UserToken
from ...crud.financials import invoices_crud as crud
from ...schemas.financials.invoices_schemas import (
    InvoiceCreate, InvoiceOut, InvoicePaid, InvoicesOverview, InvoicesRequest,
    InvoicesResponse, InvoiceUpdate
)

router = APIRouter(
    prefix="/api/invoices",
    tags=["invoices"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("/all", response_model=InvoicesResponse)
def get_invoices(
    params: InvoicesRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_invoices(db, current_user.user_id, params)


@router.get("/overview", response_model=InvoicesOverview)
def get_invoices_overview(
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_invoices_overview(db, current_user.user_id)


@router.post("/", response_model=InvoiceOut)
def create_invoice(
    invoice: InvoiceCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.create_invoice(db, current_user.user_id, invoice)


@router.put("/", response_model=InvoiceOut)
def update_invoice(
    invoice: InvoiceUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.update_invoice(db, current_user.user_id, invoice)


@router.get("/{invoice_id}", response_model=InvoiceOut)
def get_invoice(
    invoice_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_invoice(db, current_user.user_id, invoice_id)


@router.put("/{invoice_id}/paid", response_model=InvoiceOut)
def mark_invoice_paid(
    invoice_id: UUID,
    payment: InvoicePaid,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.mark_invoice_paid(db, current_user.user_id, invoice_id, payment)


@router.put("/{invoice_id}/document", response_model=InvoiceOut)
def attach_document(
    invoice_id: UUID,
    document: DocumentAttach,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.attach_document(db, current_user.user_id, invoice_id, document.document_url)


@router.delete("/{invoice_id}", response_model=DeleteResult)
def delete_invoice(
    invoice_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.delete_invoice(db, current_user.user_id, invoice_id)
