from decimal import Decimal

import pytest

from settings import DEFAULT_GROSS_AMOUNT, MAX_GROSS_AMOUNT, parse_amount_setting

FALLBACK = Decimal("5800")
MAXIMUM = Decimal("1000000")


def test_defaults_are_in_range():
    assert 0 < DEFAULT_GROSS_AMOUNT <= MAX_GROSS_AMOUNT


@pytest.mark.parametrize("raw, expected", [
    ("7200", Decimal("7200")),
    (" 1000000 ", Decimal("1000000")),
    ("abc", FALLBACK),
    ("", FALLBACK),
    ("0", FALLBACK),
    ("-5", FALLBACK),
    ("1000001", FALLBACK),
    ("nan", FALLBACK),
    ("1e1000000", FALLBACK),
])
def test_parse_amount_setting(raw, expected):
    assert parse_amount_setting(raw, FALLBACK, MAXIMUM) == expected


def test_parse_amount_setting_without_maximum():
    assert parse_amount_setting("2500000", FALLBACK) == Decimal("2500000")
