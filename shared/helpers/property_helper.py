import math
from datetime import date
from typing import Any, Dict, Iterable, Optional

UNKNOWN_TENANT = "Locataire inconnu"
UNKNOWN_UNIT = "Unité inconnue"
UNKNOWN_BUILDING = "Bâtiment inconnu"


def index_by_id(rows: Iterable[Any]) -> Dict[Any, Any]:
    return {row.id: row for row in rows}


def tenant_label(tenant) -> str:
    return f"{tenant.first_name} {tenant.last_name}" if tenant else UNKNOWN_TENANT


def unit_label(unit) -> str:
    return unit.unit_number if unit else UNKNOWN_UNIT


def building_label(building) -> str:
    return building.name if building else UNKNOWN_BUILDING


def occupancy_stats(units: Iterable[Any]) -> dict:
    units = list(units)
    total = len(units)
    occupied = sum(1 for unit in units if unit.status == "occupied")
    # half-up, 1 of 8 occupied is 13%
    rate = math.floor(occupied * 100 / total + 0.5) if total > 0 else 0
    return {"occupied": occupied, "total": total, "rate": rate}


def days_until(end_date: Optional[date], today: Optional[date] = None) -> Optional[int]:
    if not end_date:
        return None
    today = today or date.today()
    return (end_date - today).days


def is_overdue(due_date: Optional[date], is_paid: bool, today: Optional[date] = None) -> bool:
    # unpaid items count as late from the due date itself
    if is_paid or not due_date:
        return False
    today = today or date.today()
    return due_date <= today
