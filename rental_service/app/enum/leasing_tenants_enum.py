from enum import Enum


class ContractStatus(str, Enum):
    active = "active"
    inactive = "inactive"
