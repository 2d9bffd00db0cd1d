import math
from datetime import datetime
from decimal import Decimal
from typing import Any, Iterable, Optional

from shared.utils.number_to_words import amount_in_words

DEFAULT_CHARGE_LABEL = "Autres Charges"


def _charge_amount(charge: Any):
    # charge lines arrive either as schema objects or as the raw JSON dicts
    # stored on the receipt row
    if isinstance(charge, dict):
        return charge.get("amount") or 0
    return charge.amount


def charge_label(charge: Any) -> str:
    label = charge.get("label") if isinstance(charge, dict) else charge.label
    return label or DEFAULT_CHARGE_LABEL


def compute_receipt_total(base_rent=0, janitor_charge=0, electricity_charge=0,
                          water_charge=0, extra_charges: Optional[Iterable[Any]] = None):
    total = base_rent + janitor_charge + electricity_charge + water_charge
    for charge in extra_charges or []:
        total += _charge_amount(charge)
    return total


def receipt_total(receipt: Any):
    """Total of a receipt: base rent, the three fixed charges and every extra line.

    Every place that shows a receipt amount goes through here, the value is
    never persisted.
    """
    return compute_receipt_total(
        base_rent=receipt.base_rent or 0,
        janitor_charge=receipt.janitor_charge or 0,
        electricity_charge=receipt.electricity_charge or 0,
        water_charge=receipt.water_charge or 0,
        extra_charges=receipt.extra_charges,
    )


def receipt_amount_in_words(total) -> str:
    # words cover the whole dirhams only, centimes are dropped
    if isinstance(total, Decimal) and total.is_finite():
        total = int(total)
    elif isinstance(total, float) and math.isfinite(total):
        total = int(total)
    return amount_in_words(total)


def generate_receipt_number(now: Optional[datetime] = None) -> str:
    """Q-<year>-<month>-<last 6 digits of the epoch millis>.

    Two receipts generated within the same millisecond (or 1000 seconds
    apart to the millisecond) share a number; the receipts table enforces
    uniqueness per owner so a clash surfaces as a failed save.
    """
    now = now or datetime.now()
    millis = int(now.timestamp() * 1000)
    return f"Q-{now.year}-{now.month:02d}-{str(millis)[-6:]}"
