from enum import Enum


class UnitType(str, Enum):
    apartment = "apartment"
    garage = "garage"


class UnitStatus(str, Enum):
    free = "free"
    occupied = "occupied"
