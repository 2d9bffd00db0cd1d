import math
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from dateutil.relativedelta import relativedelta
from sqlalchemy.orm import Session

from shared.helpers.property_helper import index_by_id, is_overdue
from ...enum.financials_enum import PaymentStatusFilter, french_month_name
from ...models.financials.receipts import Receipt
from ...models.leasing_tenants.contracts import Contract
from ...models.leasing_tenants.tenants import Tenant
from ...models.space_sites.buildings import Building
from ...models.space_sites.units import Unit
from ...schemas.overview.reports_schemas import (
    BuildingPaymentSummary, PaymentReportRequest, PaymentReportResponse, PaymentStatusRow
)

# rent is due on the 5th of every month
RENT_DUE_DAY = 5


def _find_receipt(receipts, tenant, year: int, month: int):
    for receipt in receipts:
        start = receipt.period_start
        if (tenant.first_name in receipt.tenant_name
                and tenant.last_name in receipt.tenant_name
                and start.year == year and start.month == month):
            return receipt
    return None


def build_payment_statuses(contracts: Iterable, tenants: Iterable, units: Iterable,
                           buildings: Iterable, receipts: Iterable, today: date,
                           months_back: int = 6) -> List[PaymentStatusRow]:
    """Expected rent per active contract over the last months, paired with receipts.

    A month counts as paid when a quittance names the tenant (first and last
    name both appear) and its period starts in that month. Contracts whose
    tenant, unit or building is gone are left out. Rows run from the current
    month backwards.
    """
    tenants_by_id = index_by_id(tenants)
    units_by_id = index_by_id(units)
    buildings_by_id = index_by_id(buildings)
    receipts = list(receipts)
    contracts = [c for c in contracts if c.status == "active"]

    rows = []
    first_of_month = today.replace(day=1)
    for offset in range(months_back):
        target = first_of_month - relativedelta(months=offset)
        label = f"{french_month_name(target.month)} {target.year}"
        due_date = target.replace(day=RENT_DUE_DAY)

        for contract in contracts:
            tenant = tenants_by_id.get(contract.tenant_id)
            unit = units_by_id.get(contract.unit_id)
            building = buildings_by_id.get(unit.building_id) if unit else None
            if not (tenant and unit and building):
                continue

            receipt = _find_receipt(receipts, tenant, target.year, target.month)
            is_paid = receipt is not None

            rows.append(PaymentStatusRow(
                id=f"{contract.id}-{target.year}-{target.month}",
                tenant_name=f"{tenant.first_name} {tenant.last_name}",
                unit_number=unit.unit_number,
                building_name=building.name,
                month=label,
                year=target.year,
                amount=contract.rent_amount,
                is_paid=is_paid,
                paid_date=receipt.issue_date if receipt else None,
                due_date=due_date,
                is_overdue=is_overdue(due_date, is_paid, today),
            ))

    return rows


def filter_payment_statuses(rows: List[PaymentStatusRow],
                            params: PaymentReportRequest) -> List[PaymentStatusRow]:
    term = (params.search or "").lower()

    def matches(row: PaymentStatusRow) -> bool:
        if term and not (term in row.tenant_name.lower()
                         or term in row.unit_number.lower()
                         or term in row.building_name.lower()):
            return False
        if params.status == PaymentStatusFilter.paid and not row.is_paid:
            return False
        if params.status == PaymentStatusFilter.unpaid and row.is_paid:
            return False
        if params.month and params.month != "all" and row.month != params.month:
            return False
        if params.building and params.building != "all" and row.building_name != params.building:
            return False
        return True

    return [row for row in rows if matches(row)]


def summarize_by_building(rows: List[PaymentStatusRow]) -> List[BuildingPaymentSummary]:
    """Collected vs expected rent per building, only buildings that have rows."""
    by_building = {}
    for row in rows:
        by_building.setdefault(row.building_name, []).append(row)

    summaries = []
    for name in sorted(by_building):
        building_rows = by_building[name]
        paid = [r for r in building_rows if r.is_paid]
        paid_amount = sum((r.amount for r in paid), Decimal("0"))
        total_amount = sum((r.amount for r in building_rows), Decimal("0"))
        # half-up, same rounding as occupancy
        rate = math.floor(paid_amount * 100 / total_amount + Decimal("0.5")) if total_amount > 0 else 0
        summaries.append(BuildingPaymentSummary(
            building_name=name,
            paid_count=len(paid),
            unpaid_count=len(building_rows) - len(paid),
            paid_amount=paid_amount,
            total_amount=total_amount,
            collected_rate=rate,
        ))
    return summaries


def summarize_payment_statuses(rows: List[PaymentStatusRow]) -> PaymentReportResponse:
    paid = [r for r in rows if r.is_paid]
    unpaid = [r for r in rows if not r.is_paid]
    return PaymentReportResponse(
        payments=rows,
        total=len(rows),
        total_paid=sum((r.amount for r in paid), Decimal("0")),
        total_unpaid=sum((r.amount for r in unpaid), Decimal("0")),
        paid_count=len(paid),
        unpaid_count=len(unpaid),
        buildings=summarize_by_building(rows),
    )


def get_payment_report(db: Session, user_id: str, params: PaymentReportRequest,
                       today: Optional[date] = None) -> PaymentReportResponse:
    rows = build_payment_statuses(
        contracts=db.query(Contract).filter(
            Contract.user_id == user_id, Contract.status == "active").all(),
        tenants=db.query(Tenant).filter(Tenant.user_id == user_id).all(),
        units=db.query(Unit).filter(Unit.user_id == user_id).all(),
        buildings=db.query(Building).filter(Building.user_id == user_id).all(),
        receipts=db.query(Receipt).filter(Receipt.user_id == user_id)
        .order_by(Receipt.created_at).all(),
        today=today or date.today(),
        months_back=params.months_back,
    )
    report = summarize_payment_statuses(filter_payment_statuses(rows, params))

    # totals and building summaries cover every matching row, not only the page
    skip = params.skip or 0
    if params.limit:
        report.payments = report.payments[skip:skip + params.limit]
    else:
        report.payments = report.payments[skip:]
    return report
