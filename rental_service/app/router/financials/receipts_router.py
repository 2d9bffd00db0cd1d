from uuid import UUID
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_rental_db as get_db
from shared.core.schemas import DeleteResult, UserToken
from shared.utils.receipt_pdf import generate_receipt_pdf
from ...crud.financials import receipts_crud as crud
from ...schemas.financials.receipts_schemas import (
    ReceiptCreate, ReceiptDraft, ReceiptListResponse, ReceiptOut, ReceiptRender,
    ReceiptRequest, ReceiptUpdate
)

router = APIRouter(
    prefix="/api/receipts",
    tags=["receipts"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("/all", response_model=ReceiptListResponse)
def get_receipts(
    params: ReceiptRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_receipts(db, current_user.user_id, params)


@router.get("/new", response_model=ReceiptDraft)
def new_receipt():
    return crud.new_receipt_draft()


@router.get("/{receipt_id}", response_model=ReceiptOut)
def get_receipt(
    receipt_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_receipt(db, current_user.user_id, receipt_id)


@router.get("/{receipt_id}/render", response_model=ReceiptRender)
def render_receipt(
    receipt_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.render_receipt(db, current_user.user_id, receipt_id)


@router.get("/{receipt_id}/pdf")
def download_receipt_pdf(
    receipt_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    render = crud.render_receipt(db, current_user.user_id, receipt_id)
    return Response(
        content=generate_receipt_pdf(render),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="quittance_{render.receipt_number}.pdf"'
        },
    )


@router.post("/", response_model=ReceiptOut)
def create_receipt(
    receipt: ReceiptCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.create_receipt(db, current_user.user_id, receipt)


@router.put("/", response_model=ReceiptOut)
def update_receipt(
    receipt: ReceiptUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.update_receipt(db, current_user.user_id, receipt)


@router.delete("/{receipt_id}", response_model=DeleteResult)
def delete_receipt(
    receipt_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.delete_receipt(db, current_user.user_id, receipt_id)
