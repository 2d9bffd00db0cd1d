from enum import Enum


class PaymentStatus(str, Enum):
    paid = "paid"
    unpaid = "unpaid"

    @classmethod
    def from_flag(cls, is_paid: bool) -> "PaymentStatus":
        return cls.paid if is_paid else cls.unpaid


class PaymentStatusFilter(str, Enum):
    all = "all"
    paid = "paid"
    unpaid = "unpaid"


FRENCH_MONTHS = [
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
]


def french_month_name(month: int) -> str:
    return FRENCH_MONTHS[month - 1]
