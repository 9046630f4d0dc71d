from decimal import Decimal

import pytest

from recipebook.app.services.quantity_formatter import format_quantity
from recipebook.app.services.quantity_parser import parse_quantity


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("0"), "0"),
        (Decimal("0.0000"), "0"),
        (Decimal("2"), "2"),
        (Decimal("2.0000"), "2"),
        (Decimal("2.25"), "2 ¼"),
        (Decimal("0.5"), "½"),
        (Decimal("0.75"), "¾"),
        (Decimal("1.125"), "1 ⅛"),
        (Decimal("0.625"), "⅝"),
        (Decimal("0.875"), "⅞"),
        (Decimal("-0.375"), "-⅜"),
        (Decimal("-1.5"), "-1 ½"),
        (Decimal("0.0625"), "1/16"),
        (Decimal("3.1875"), "3 3/16"),
        (Decimal("0.6667"), "11/16"),
    ],
)
def test_format_quantity(value, expected):
    assert format_quantity(value) == expected


def test_carry_into_whole_part():
    assert format_quantity(Decimal("1.96875")) == "2"
    assert format_quantity(Decimal("1.96874")) == "1 15/16"
    assert format_quantity(Decimal("1.9375")) == "1 15/16"
    assert format_quantity(Decimal("0.99")) == "1"


def test_half_sixteenth_rounds_to_even():
    # 0.03125 * 16 == 0.5 -> 0, 0.09375 * 16 == 1.5 -> 2
    assert format_quantity(Decimal("0.03125")) == "0"
    assert format_quantity(Decimal("0.09375")) == "⅛"


def test_tiny_negative_keeps_sign():
    assert format_quantity(Decimal("-0.01")) == "-0"
    assert format_quantity(Decimal("-0.03")) == "-0"
    assert format_quantity(Decimal("-0.0000")) == "0"


def test_accepts_plain_numbers():
    assert format_quantity(1) == "1"
    assert format_quantity(0.25) == "¼"
    assert format_quantity("1.5") == "1 ½"


def test_coarser_denominator():
    assert format_quantity(Decimal("0.375"), denominator=4) == "½"
    assert format_quantity(Decimal("1.1"), denominator=8) == "1 ⅛"


def test_denominator_from_settings(settings_env):
    settings_env(QUANTITY_DISPLAY_DENOMINATOR=2)
    assert format_quantity(Decimal("1.3")) == "1 ½"


@pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("Infinity"), float("inf")])
def test_non_finite_is_rejected(value):
    with pytest.raises(ValueError):
        format_quantity(value)


def test_parse_then_format_examples():
    assert format_quantity(parse_quantity("2 1/4")) == "2 ¼"
    assert format_quantity(parse_quantity("⅔")) == "11/16"
    assert format_quantity(parse_quantity("-3/8")) == "-⅜"
    assert format_quantity(parse_quantity("")) == "0"


@pytest.mark.parametrize("text", ["1/3", "2 2/3", "0.1", "1,7", "⅝", "-1 1/7", "3", "0.0313"])
def test_reparse_matches_value_snapped_to_sixteenths(text):
    value = parse_quantity(text)
    snapped = (value * 16).to_integral_value() / 16
    assert parse_quantity(format_quantity(value)) == snapped
