"""French cardinal words for amounts printed on quittances.

The "Montant en lettres" line of a rent receipt is produced here. Bands are
peeled off in descending order (millions, thousands, hundreds, then the 0-99
remainder) and joined with single spaces.

Two simplifications of written French are kept on purpose because issued
receipts already carry them: the "et" of 21, 31, ... 71 is never inserted
("vingt-un", "soixante-dix-un") and "cent"/"vingt" never take a plural "s".
"""
import math
from decimal import Decimal

UNITS = ["", "un", "deux", "trois", "quatre",
         "cinq", "six", "sept", "huit", "neuf"]
TENS = ["", "", "vingt", "trente", "quarante", "cinquante",
        "soixante", "soixante-dix", "quatre-vingt", "quatre-vingt-dix"]
TEENS = ["dix", "onze", "douze", "treize", "quatorze",
         "quinze", "seize", "dix-sept", "dix-huit", "dix-neuf"]

ZERO = "zéro"
MINUS = "moins"


class InvalidAmountError(ValueError):
    """Raised when an amount cannot be spelled out."""


def _as_integer(amount) -> int:
    # bool is an int subclass but never a meaningful amount
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise InvalidAmountError(
            f"Amount must be a number, got {type(amount).__name__}")

    if isinstance(amount, int):
        return amount

    if isinstance(amount, float):
        if not math.isfinite(amount):
            raise InvalidAmountError(f"Amount must be finite, got {amount}")
        if not amount.is_integer():
            raise InvalidAmountError(
                f"Amount must be a whole number, got {amount}")
        return int(amount)

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {amount}")
    if amount != amount.to_integral_value():
        raise InvalidAmountError(f"Amount must be a whole number, got {amount}")
    return int(amount)


def _below_hundred(n: int) -> str:
    if n >= 20:
        word = TENS[n // 10]
        unit = n % 10
        if unit > 0:
            word += "-" + UNITS[unit]
        return word
    if n >= 10:
        return TEENS[n - 10]
    return UNITS[n]


def _spell(n: int) -> str:
    if n == 0:
        return ZERO
    if n < 0:
        return f"{MINUS} {_spell(-n)}"

    parts = []

    if n >= 1_000_000:
        millions = n // 1_000_000
        parts.append(_spell(millions))
        parts.append("million" if millions == 1 else "millions")
        n %= 1_000_000

    if n >= 1000:
        thousands = n // 1000
        # "mille", never "un mille"
        if thousands != 1:
            parts.append(_spell(thousands))
        parts.append("mille")
        n %= 1000

    if n >= 100:
        hundreds = n // 100
        if hundreds != 1:
            parts.append(UNITS[hundreds])
        parts.append("cent")
        n %= 100

    if n > 0:
        parts.append(_below_hundred(n))

    return " ".join(parts).strip()


def amount_in_words(amount) -> str:
    """Spell out a whole amount in French.

    ``amount`` must be an int, or a float/Decimal holding an integral value.
    Anything else (fractions, NaN, infinities, non-numbers) raises
    InvalidAmountError; truncate beforehand if a fractional total is expected.

    >>> amount_in_words(1700)
    'mille sept cent'
    >>> amount_in_words(-42)
    'moins quarante-deux'
    """
    return _spell(_as_integer(amount))
