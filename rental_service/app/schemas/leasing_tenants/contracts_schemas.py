# app/schemas/leasing_tenants/contracts_schemas.py
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, model_validator

from shared.core.schemas import CommonQueryParams
from ...enum.leasing_tenants_enum import ContractStatus


class ContractBase(BaseModel):
    model_config = {"use_enum_values": True, "validate_default": True}

    tenant_id: UUID
    unit_id: Optional[UUID] = None
    start_date: date
    end_date: Optional[date] = None
    rent_amount: Decimal = Decimal("0")
    deposit: Decimal = Decimal("0")
    status: ContractStatus = ContractStatus.active
    document_url: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ContractCreate(ContractBase):
    pass


class ContractUpdate(ContractBase):
    id: UUID


class ContractOut(ContractBase):
    id: UUID
    tenant_name: Optional[str] = None
    unit_number: Optional[str] = None
    building_name: Optional[str] = None
    days_until_expiry: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True, "use_enum_values": True}


class ContractRequest(CommonQueryParams):
    status: Optional[str] = None


class ContractListResponse(BaseModel):
    contracts: List[ContractOut]
    total: int


class ContractOverview(BaseModel):
    active_contracts: int
    monthly_rent_total: Decimal
