from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_rental_db as get_db
from shared.core.schemas import DeleteResult, UserToken
from ...crud.space_sites import building_crud as crud
from ...schemas.space_sites.building_schemas import (
    BuildingCreate, BuildingListResponse, BuildingOut, BuildingRequest, BuildingUpdate
)
from ...schemas.space_sites.unit_schemas import UnitCreate, UnitOut, UnitUpdate

router = APIRouter(
    prefix="/api/buildings",
    tags=["buildings"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("/all", response_model=BuildingListResponse)
def get_buildings(
    params: BuildingRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_buildings(db, current_user.user_id, params)


@router.post("/", response_model=BuildingOut)
def create_building(
    building: BuildingCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.create_building(db, current_user.user_id, building)


@router.put("/", response_model=BuildingOut)
def update_building(
    building: BuildingUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.update_building(db, current_user.user_id, building)


# ---------------- Units ----------------
@router.post("/units", response_model=UnitOut)
def create_unit(
    unit: UnitCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.create_unit(db, current_user.user_id, unit)


@router.put("/units", response_model=UnitOut)
def update_unit(
    unit: UnitUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.update_unit(db, current_user.user_id, unit)


@router.delete("/units/{unit_id}", response_model=DeleteResult)
def delete_unit(
    unit_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.delete_unit(db, current_user.user_id, unit_id)


@router.get("/{building_id}", response_model=BuildingOut)
def get_building(
    building_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_building(db, current_user.user_id, building_id)


@router.delete("/{building_id}", response_model=DeleteResult)
def delete_building(
    building_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.delete_building(db, current_user.user_id, building_id)
