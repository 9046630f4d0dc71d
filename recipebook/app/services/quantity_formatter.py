"""Render stored decimal quantities for display, e.g. Decimal("2.25") -> "2 ¼"."""

from decimal import ROUND_FLOOR, ROUND_HALF_EVEN, Decimal
from math import gcd
from typing import Optional, Union

from recipebook.app.core.config import get_settings
from recipebook.app.services.fraction_glyphs import collapse_to_glyphs

Number = Union[Decimal, int, float, str]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # go through repr so 0.1 stays 0.1 rather than its binary expansion
        return Decimal(repr(value))
    return Decimal(value)


def format_quantity(value: Number, denominator: Optional[int] = None) -> str:
    """Format a quantity as a whole number plus the nearest 1/denominator.

    Known fractions are shown as glyphs; a remainder that rounds to a full
    unit carries into the whole part.
    """
    amount = _to_decimal(value)
    if not amount.is_finite():
        raise ValueError(f"Cannot format non-finite quantity: {value!r}")
    if amount == 0:
        return "0"
    if denominator is None:
        denominator = get_settings().quantity_display_denominator

    sign = "-" if amount < 0 else ""
    amount = abs(amount)

    whole = int(amount.to_integral_value(rounding=ROUND_FLOOR))
    remainder = amount - whole
    num = int((remainder * denominator).to_integral_value(rounding=ROUND_HALF_EVEN))

    if num == denominator:
        whole += 1
        num = 0

    if num == 0:
        return f"{sign}{whole}"

    g = gcd(num, denominator)
    num //= g
    den = denominator // g

    text = f"{num}/{den}" if whole == 0 else f"{whole} {num}/{den}"
    return sign + collapse_to_glyphs(text)
