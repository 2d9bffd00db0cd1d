from decimal import Decimal
from typing import Optional
from uuid import UUID
from pydantic import BaseModel

from ...enum.space_sites_enum import UnitStatus, UnitType


class UnitBase(BaseModel):
    model_config = {"use_enum_values": True, "validate_default": True}

    building_id: UUID
    unit_number: str
    type: UnitType = UnitType.apartment
    surface: Decimal = Decimal("0")
    rooms: int = 0
    status: UnitStatus = UnitStatus.free


class UnitCreate(UnitBase):
    pass


class UnitUpdate(BaseModel):
    model_config = {"use_enum_values": True, "validate_default": True}

    id: UUID
    unit_number: Optional[str] = None
    type: Optional[UnitType] = None
    surface: Optional[Decimal] = None
    rooms: Optional[int] = None
    status: Optional[UnitStatus] = None


class UnitOut(UnitBase):
    id: UUID

    model_config = {"from_attributes": True, "use_enum_values": True}
