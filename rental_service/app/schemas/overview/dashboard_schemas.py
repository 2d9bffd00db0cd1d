from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class DashboardRequest(BaseModel):
    month: Optional[int] = Field(default=None, ge=1, le=12)
    year: Optional[int] = None


class DashboardStats(BaseModel):
    total_buildings: int
    total_units: int
    occupied_units: int
    occupancy_rate: int
    total_tenants: int
    month: int
    year: int
    monthly_revenue: Decimal
    paid_invoices: int
    unpaid_invoices: int
