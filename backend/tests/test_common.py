from decimal import Decimal

import pytest

from app.api.presale_endpoints.common import (
    calculate_percentage,
    calculate_token_amount,
    format_decimal,
    format_locale_number,
    parse_pay_amount,
    round_half_up,
)
from app.core.config import Settings


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, 1.0),
        (0.5, 0.5),
        ("2.25", 2.25),
        (0, None),
        (-3, None),
        ("abc", None),
        ("nan", None),
        ("inf", None),
        (None, None),
        (True, None),
    ],
)
def test_parse_pay_amount(value, expected):
    assert parse_pay_amount(value) == expected


def test_calculate_token_amount_uses_65_tokens_per_usdt():
    usdt_value, token_amount = calculate_token_amount(2, 180.0)
    assert usdt_value == 360.0
    assert round_half_up(token_amount) == 23400.0


def test_round_half_up_rounds_ties_away_from_zero():
    assert round_half_up(0.125) == 0.13
    assert round_half_up(2.675) == 2.68


def test_calculate_percentage():
    assert calculate_percentage(Decimal("76735.34"), Decimal("200000.00")) == "38.37"
    assert calculate_percentage(Decimal("0"), Decimal("1000000")) == "0.00"
    assert calculate_percentage(Decimal("10"), Decimal("0")) == "0.00"


def test_format_locale_number():
    assert format_locale_number(Decimal("1234567.50")) == "1,234,567.5"
    assert format_locale_number(Decimal("1000.00")) == "1,000"
    assert format_locale_number(Decimal("0")) == "0"
    assert format_locale_number(Decimal("12.34567")) == "12.346"


def test_format_decimal_expands_normalized_values():
    assert format_decimal(Decimal("2E+5"), 2) == "200000.00"
    assert format_decimal(Decimal("0.5"), 8) == "0.50000000"
    assert format_decimal(Decimal("1.23456"), 4) == "1.2346"


def test_cleaned_database_url_strips_sslmode():
    s = Settings(database_url="postgres://u:p@host/db?sslmode=require&application_name=presale")
    assert s.cleaned_database_url == "postgres://u:p@host/db?application_name=presale"

    s = Settings(database_url="postgres://u:p@host/db?sslmode=require")
    assert s.cleaned_database_url == "postgres://u:p@host/db"
    assert s.tortoise_config["connections"]["default"] == "postgres://u:p@host/db"
