import math
from decimal import Decimal

import pytest

from shared.utils.number_to_words import InvalidAmountError, amount_in_words


@pytest.mark.parametrize("amount, words", [
    (0, "zéro"),
    (1, "un"),
    (15, "quinze"),
    (21, "vingt-un"),
    (80, "quatre-vingt"),
    (90, "quatre-vingt-dix"),
    (99, "quatre-vingt-dix-neuf"),
    (100, "cent"),
    (101, "cent un"),
    (200, "deux cent"),
    (1000, "mille"),
    (1001, "mille un"),
    (1700, "mille sept cent"),
    (2000, "deux mille"),
    (21000, "vingt-un mille"),
    (1000000, "un million"),
    (2500000, "deux millions cinq cent mille"),
    (-42, "moins quarante-deux"),
])
def test_amount_in_words(amount, words):
    assert amount_in_words(amount) == words


def test_integral_float_and_decimal_are_accepted():
    assert amount_in_words(1200.0) == "mille deux cent"
    assert amount_in_words(Decimal("1200.00")) == "mille deux cent"


def test_words_have_no_stray_whitespace():
    for n in list(range(0, 2100)) + [10000, 100000, 1000000, 1001001, 999999999]:
        words = amount_in_words(n)
        assert words == words.strip()
        assert "  " not in words


@pytest.mark.parametrize("amount", [
    1.5, Decimal("10.25"), math.nan, math.inf, -math.inf, Decimal("NaN"),
    True, "100", None,
])
def test_rejects_amounts_that_cannot_be_spelled(amount):
    with pytest.raises(InvalidAmountError):
        amount_in_words(amount)


def test_invalid_amount_is_a_value_error():
    assert issubclass(InvalidAmountError, ValueError)
