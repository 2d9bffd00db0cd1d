# app/schemas/space_sites/building_schemas.py
from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel

from shared.core.schemas import CommonQueryParams
from .unit_schemas import UnitOut


class BuildingBase(BaseModel):
    name: str
    address: str = ""


class BuildingCreate(BuildingBase):
    pass


class BuildingUpdate(BaseModel):
    id: UUID
    name: Optional[str] = None
    address: Optional[str] = None


class OccupancyStats(BaseModel):
    occupied: int
    total: int
    rate: int


class BuildingOut(BuildingBase):
    id: UUID
    created_at: Optional[datetime] = None
    units: List[UnitOut] = []
    occupancy: Optional[OccupancyStats] = None
    apartments: int = 0
    garages: int = 0

    model_config = {"from_attributes": True}


class BuildingRequest(CommonQueryParams):
    pass


class BuildingListResponse(BaseModel):
    buildings: List[BuildingOut]
    total: int
