from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_rental_db as get_db
from shared.core.schemas import UserToken
from ...crud.overview import reports_crud as crud
from ...schemas.overview.reports_schemas import PaymentReportRequest, PaymentReportResponse

router = APIRouter(
    prefix="/api/reports",
    tags=["reports"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("/payments", response_model=PaymentReportResponse)
def get_payment_report(
    params: PaymentReportRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_payment_report(db, current_user.user_id, params)
