"""Tests for money helpers."""

from decimal import Decimal

import pytest

from chicken_shop.domain.money import (
    format_currency,
    format_quantity,
    round_currency,
    to_decimal,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (0.1, Decimal("0.1")),
        (5, Decimal("5")),
        ("1,250.75", Decimal("1250.75")),
        ("", Decimal("0")),
        ("kg", Decimal("0")),
        ("NaN", Decimal("0")),
        (None, Decimal("0")),
        (True, Decimal("0")),
    ],
)
def test_to_decimal(raw: object, expected: Decimal) -> None:
    assert to_decimal(raw) == expected


def test_float_sum_is_exact_after_conversion() -> None:
    assert to_decimal(0.1) + to_decimal(0.2) == Decimal("0.3")


def test_round_currency_half_up() -> None:
    assert round_currency(Decimal("2.675")) == Decimal("2.68")
    assert round_currency(Decimal("-2.675")) == Decimal("-2.68")


def test_format_currency() -> None:
    assert format_currency(Decimal("1234.5")) == "฿1,234.50"
    assert format_currency(Decimal("-20")) == "-฿20.00"


def test_format_quantity_trims_zeros() -> None:
    assert format_quantity(Decimal("2.500")) == "2.5 kg"
    assert format_quantity(Decimal("10")) == "10 kg"
