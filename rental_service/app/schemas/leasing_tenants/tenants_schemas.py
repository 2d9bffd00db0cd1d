# app/schemas/leasing_tenants/tenants_schemas.py
from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel

from shared.core.schemas import CommonQueryParams


class TenantBase(BaseModel):
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    id_document_url: Optional[str] = None


class TenantCreate(TenantBase):
    pass


class TenantUpdate(TenantBase):
    id: UUID


class TenantOut(TenantBase):
    id: UUID
    building_name: Optional[str] = None
    unit_number: Optional[str] = None
    has_active_contract: bool = False
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class TenantRequest(CommonQueryParams):
    pass


class TenantListResponse(BaseModel):
    tenants: List[TenantOut]
    total: int
