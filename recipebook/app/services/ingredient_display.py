import enum
from decimal import Decimal
from typing import Optional, Union

from recipebook.app.services.quantity_formatter import format_quantity


class Unit(str, enum.Enum):
    PIECE = "piece"
    GRAM = "gram"
    KILOGRAM = "kilogram"
    MILLILITER = "milliliter"
    LITER = "liter"
    CUP = "cup"
    TABLESPOON = "tablespoon"
    TEASPOON = "teaspoon"
    UNIT = "unit"
    OUNCE = "ounce"
    POUND = "pound"

    @property
    def label(self) -> str:
        return self.value

    @property
    def plural(self) -> str:
        return f"{self.value}s"


def unit_label(unit: Union[Unit, str], quantity: Union[Decimal, int, float, None]) -> str:
    """Singular only when the stored quantity is exactly one."""
    unit = Unit(unit)
    if quantity is not None and Decimal(str(quantity)) == 1:
        return unit.label
    return unit.plural


def format_ingredient_amount(
    quantity: Union[Decimal, int, float],
    unit: Optional[Union[Unit, str]] = None,
) -> str:
    text = format_quantity(quantity)
    if unit is None:
        return text
    return f"{text} {unit_label(unit, quantity)}"
