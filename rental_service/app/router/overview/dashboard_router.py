from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_rental_db as get_db
from shared.core.schemas import UserToken
from ...crud.overview import dashboard_crud as crud
from ...schemas.overview.dashboard_schemas import DashboardRequest, DashboardStats

router = APIRouter(
    prefix="/api/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(
    params: DashboardRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_dashboard_stats(db, current_user.user_id, params)
