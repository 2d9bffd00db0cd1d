# app/schemas/financials/receipts_schemas.py
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, computed_field

from shared.core.schemas import CommonQueryParams
from shared.helpers.receipt_helper import receipt_total


class ChargeLine(BaseModel):
    label: str = ""
    # negative amounts (credits) are accepted and summed as-is
    amount: Decimal = Decimal("0")


class ReceiptBase(BaseModel):
    landlord_name: str = ""
    tenant_name: str = ""
    property_address: str = ""
    period_start: date
    period_end: date
    base_rent: Decimal = Decimal("0")
    janitor_charge: Decimal = Decimal("0")
    electricity_charge: Decimal = Decimal("0")
    water_charge: Decimal = Decimal("0")
    extra_charges: List[ChargeLine] = []
    signatory_city: str = ""


class ReceiptCreate(ReceiptBase):
    # generated when left empty
    receipt_number: Optional[str] = None
    issue_date: Optional[date] = None


class ReceiptUpdate(ReceiptBase):
    id: UUID
    receipt_number: str
    issue_date: date


class ReceiptDraft(BaseModel):
    """Blank quittance offered by the editor before anything is saved."""
    receipt_number: str
    issue_date: date
    landlord_name: str = ""
    tenant_name: str = ""
    property_address: str = ""
    period_start: Optional[date] = None
    period_end: Optional[date] = None
    base_rent: Decimal = Decimal("0")
    janitor_charge: Decimal = Decimal("0")
    electricity_charge: Decimal = Decimal("0")
    water_charge: Decimal = Decimal("0")
    extra_charges: List[ChargeLine] = []
    signatory_city: str = ""

    @computed_field
    @property
    def total(self) -> Decimal:
        return receipt_total(self)


class ReceiptOut(ReceiptBase):
    id: UUID
    receipt_number: str
    issue_date: date
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def total(self) -> Decimal:
        return receipt_total(self)


class ReceiptRequest(CommonQueryParams):
    pass


class ReceiptListResponse(BaseModel):
    receipts: List[ReceiptOut]
    total: int
    total_amount: Decimal


class ReceiptLine(BaseModel):
    label: str
    amount: Decimal


class ReceiptRender(BaseModel):
    receipt_number: str
    landlord_name: str
    tenant_name: str
    property_address: str
    period_start: date
    period_end: date
    signatory_city: str
    issue_date: date
    lines: List[ReceiptLine]
    total: Decimal
    total_in_words: str
    currency: str
    currency_words: str
