from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.helpers.property_helper import occupancy_stats
from ...models.financials.invoices import Invoice
from ...models.leasing_tenants.tenants import Tenant
from ...models.space_sites.buildings import Building
from ...models.space_sites.units import Unit
from ...schemas.financials.invoices_schemas import InvoiceOut
from ...schemas.overview.dashboard_schemas import DashboardRequest, DashboardStats


def get_dashboard_stats(db: Session, user_id: str, params: DashboardRequest,
                        today: Optional[date] = None) -> DashboardStats:
    today = today or date.today()
    month = params.month or today.month
    year = params.year or today.year

    # ------------------- Buildings & occupancy -------------------
    total_buildings = db.query(func.count(Building.id))\
        .filter(Building.user_id == user_id)\
        .scalar() or 0

    units = db.query(Unit).filter(Unit.user_id == user_id).all()
    occupancy = occupancy_stats(units)

    total_tenants = db.query(func.count(Tenant.id))\
        .filter(Tenant.user_id == user_id)\
        .scalar() or 0

    # ------------------- Invoices of the month -------------------
    invoices = [
        InvoiceOut.model_validate(i)
        for i in db.query(Invoice).filter(
            Invoice.user_id == user_id,
            Invoice.month == month,
            Invoice.year == year
        ).all()
    ]
    paid = [i for i in invoices if i.is_paid]

    return DashboardStats(
        total_buildings=total_buildings,
        total_units=occupancy["total"],
        occupied_units=occupancy["occupied"],
        occupancy_rate=occupancy["rate"],
        total_tenants=total_tenants,
        month=month,
        year=year,
        monthly_revenue=sum((i.total_amount for i in paid), Decimal("0")),
        paid_invoices=len(paid),
        unpaid_invoices=len(invoices) - len(paid),
    )
