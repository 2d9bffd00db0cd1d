from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from shared.core.schemas import CommonQueryParams
from ...enum.financials_enum import PaymentStatusFilter


class PaymentStatusRow(BaseModel):
    id: str
    tenant_name: str
    unit_number: str
    building_name: str
    month: str
    year: int
    amount: Decimal
    is_paid: bool
    paid_date: Optional[date] = None
    due_date: date
    is_overdue: bool = False


class PaymentReportRequest(CommonQueryParams):
    status: PaymentStatusFilter = PaymentStatusFilter.all
    month: Optional[str] = None
    building: Optional[str] = None
    months_back: int = Field(6, ge=1, le=120)


class BuildingPaymentSummary(BaseModel):
    building_name: str
    paid_count: int
    unpaid_count: int
    paid_amount: Decimal
    total_amount: Decimal
    collected_rate: int


class PaymentReportResponse(BaseModel):
    payments: List[PaymentStatusRow]
    # rows matching the filters, before skip/limit
    total: int
    total_paid: Decimal
    total_unpaid: Decimal
    paid_count: int
    unpaid_count: int
    buildings: List[BuildingPaymentSummary] = []
