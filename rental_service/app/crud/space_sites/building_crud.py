# building_crud.py
import logging
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from shared.core.database import commit_or_rollback
from shared.helpers.json_response_helper import not_found
from shared.helpers.property_helper import occupancy_stats
from ...models.space_sites.buildings import Building
from ...models.space_sites.units import Unit
from ...schemas.space_sites.building_schemas import (
    BuildingCreate, BuildingListResponse, BuildingOut, BuildingRequest, BuildingUpdate
)
from ...schemas.space_sites.unit_schemas import UnitCreate, UnitOut, UnitUpdate

logger = logging.getLogger(__name__)


def to_building_out(building: Building) -> BuildingOut:
    units = list(building.units)
    return BuildingOut(
        id=building.id,
        name=building.name,
        address=building.address,
        created_at=building.created_at,
        units=[UnitOut.model_validate(u) for u in units],
        occupancy=occupancy_stats(units),
        apartments=sum(1 for u in units if u.type == "apartment"),
        garages=sum(1 for u in units if u.type == "garage"),
    )


def get_buildings(db: Session, user_id: str, params: BuildingRequest) -> BuildingListResponse:
    building_query = (
        db.query(Building)
        .options(selectinload(Building.units))
        .filter(Building.user_id == user_id)
    )

    if params.search:
        search_term = f"%{params.search}%"
        building_query = building_query.filter(
            or_(Building.name.ilike(search_term), Building.address.ilike(search_term)))

    total = building_query.count()

    buildings = (
        building_query
        .order_by(Building.created_at.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return BuildingListResponse(
        buildings=[to_building_out(b) for b in buildings],
        total=total
    )


def get_building_by_id(db: Session, user_id: str, building_id: UUID):
    return db.query(Building).filter(
        Building.id == building_id,
        Building.user_id == user_id
    ).first()


def get_building(db: Session, user_id: str, building_id: UUID) -> BuildingOut:
    db_building = get_building_by_id(db, user_id, building_id)
    if not db_building:
        not_found("Building")
    return to_building_out(db_building)


def create_building(db: Session, user_id: str, building: BuildingCreate) -> BuildingOut:
    db_building = Building(user_id=user_id, **building.model_dump())
    db.add(db_building)
    commit_or_rollback(db)
    db.refresh(db_building)
    return to_building_out(db_building)


def update_building(db: Session, user_id: str, building: BuildingUpdate) -> BuildingOut:
    db_building = get_building_by_id(db, user_id, building.id)
    if not db_building:
        not_found("Building")

    for key, value in building.model_dump(exclude_unset=True, exclude={"id"}).items():
        setattr(db_building, key, value)
    commit_or_rollback(db)
    db.refresh(db_building)
    return to_building_out(db_building)


def delete_building(db: Session, user_id: str, building_id: UUID):
    db_building = get_building_by_id(db, user_id, building_id)
    if not db_building:
        not_found("Building")

    # units go with their building
    unit_count = len(db_building.units)
    db.delete(db_building)
    commit_or_rollback(db)
    logger.info("Building %s deleted with %d units", building_id, unit_count)
    return {"id": str(building_id), "deleted": True}


# ----------------------------------------------------------------------
# UNITS
# ----------------------------------------------------------------------

def get_unit_by_id(db: Session, user_id: str, unit_id: UUID):
    return db.query(Unit).filter(
        Unit.id == unit_id,
        Unit.user_id == user_id
    ).first()


def create_unit(db: Session, user_id: str, unit: UnitCreate) -> UnitOut:
    if not get_building_by_id(db, user_id, unit.building_id):
        not_found("Building")

    db_unit = Unit(user_id=user_id, **unit.model_dump())
    db.add(db_unit)
    commit_or_rollback(db)
    db.refresh(db_unit)
    return UnitOut.model_validate(db_unit)


def update_unit(db: Session, user_id: str, unit: UnitUpdate) -> UnitOut:
    db_unit = get_unit_by_id(db, user_id, unit.id)
    if not db_unit:
        not_found("Unit")

    for key, value in unit.model_dump(exclude_unset=True, exclude={"id"}).items():
        setattr(db_unit, key, value)
    commit_or_rollback(db)
    db.refresh(db_unit)
    return UnitOut.model_validate(db_unit)


def delete_unit(db: Session, user_id: str, unit_id: UUID):
    db_unit = get_unit_by_id(db, user_id, unit_id)
    if not db_unit:
        not_found("Unit")

    db.delete(db_unit)
    commit_or_rollback(db)
    return {"id": str(unit_id), "deleted": True}
