# app/schemas/financials/invoices_schemas.py
from datetime import date, datetime
from decimal import Decimal
from typing import Any, List, Optional
from uuid import UUID
from pydantic import BaseModel, Field, computed_field, field_validator

from shared.core.schemas import CommonQueryParams
from ...enum.financials_enum import PaymentStatus, PaymentStatusFilter


def coerce_paid_flag(value: Any) -> Any:
    """Legacy rows encode the flag as 0/1 (or "0"/"1"): anything > 0 is paid."""
    if isinstance(value, bool) or value is None:
        return bool(value)
    if isinstance(value, (int, float, Decimal)):
        return value > 0
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if cleaned in ("true", "false"):
            return cleaned == "true"
        try:
            return float(cleaned) > 0
        except ValueError:
            return value
    return value


class InvoiceBase(BaseModel):
    contract_id: Optional[UUID] = None
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1900, le=9999)
    base_rent: Decimal = Decimal("0")
    electricity: Decimal = Decimal("0")
    water: Decimal = Decimal("0")
    stair_cleaning: Decimal = Decimal("0")
    other_services: Decimal = Decimal("0")
    is_paid: bool = False
    paid_date: Optional[date] = None
    due_date: date
    document_url: Optional[str] = None

    @field_validator("is_paid", mode="before")
    @classmethod
    def normalize_paid_flag(cls, value):
        return coerce_paid_flag(value)


class InvoiceCreate(InvoiceBase):
    pass


class InvoiceUpdate(InvoiceBase):
    id: UUID


class InvoiceOut(InvoiceBase):
    id: UUID
    tenant_name: Optional[str] = None
    unit_number: Optional[str] = None
    building_name: Optional[str] = None
    month_name: Optional[str] = None
    is_overdue: bool = False
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def total_amount(self) -> Decimal:
        return (self.base_rent + self.electricity + self.water
                + self.stair_cleaning + self.other_services)

    @computed_field
    @property
    def payment_status(self) -> PaymentStatus:
        return PaymentStatus.from_flag(self.is_paid)


class InvoicesRequest(CommonQueryParams):
    status: PaymentStatusFilter = PaymentStatusFilter.all
    month: Optional[int] = None
    year: Optional[int] = None


class InvoicesResponse(BaseModel):
    invoices: List[InvoiceOut]
    total: int


class InvoicesOverview(BaseModel):
    total_paid: Decimal
    total_unpaid: Decimal
    unpaid_count: int


class InvoicePaid(BaseModel):
    paid_date: Optional[date] = None
