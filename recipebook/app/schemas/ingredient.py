from decimal import Decimal
from functools import cached_property
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field, ValidationError, field_validator

from recipebook.app.services.ingredient_display import Unit, format_ingredient_amount
from recipebook.app.services.quantity_parser import parse_quantity
from recipebook.app.services.text_normalization import normalize_ingredient_name


class IngredientQuantityInput(BaseModel):
    ingredient_id: int
    ingredient_name: Optional[str] = None
    # Accepts decimals and fractions as typed; the raw text is kept for redisplay
    quantity_text: str = "1"
    unit: Unit = Unit.PIECE

    @field_validator("quantity_text")
    @classmethod
    def validate_quantity_text(cls, value: str) -> str:
        parse_quantity(value)
        return value

    @field_validator("ingredient_name")
    @classmethod
    def validate_ingredient_name(cls, value: Optional[str]) -> Optional[str]:
        return normalize_ingredient_name(value)

    @cached_property
    def quantity(self) -> Decimal:
        return parse_quantity(self.quantity_text)

    @property
    def display(self) -> str:
        return format_ingredient_amount(self.quantity, self.unit)


class FieldError(BaseModel):
    field: Optional[str] = None
    message: str


class IngredientBindingResult(BaseModel):
    ingredients: List[IngredientQuantityInput] = Field(default_factory=list)
    errors: List[FieldError] = Field(default_factory=list)
    submitted: List[Dict[str, Any]] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _field_errors(exc: ValidationError, prefix: str) -> List[FieldError]:
    details = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in (prefix, *err.get("loc", ())) if part is not None)
        msg = err.get("msg", "Invalid value")
        ctx_error = (err.get("ctx") or {}).get("error")
        if isinstance(ctx_error, ValueError):
            # pydantic prefixes "Value error, "; show the validator's own message
            msg = str(ctx_error)
        details.append(FieldError(field=loc or None, message=msg))
    return details


def bind_ingredient_rows(rows: Sequence[Dict[str, Any]]) -> IngredientBindingResult:
    """Bind every submitted ingredient row, collecting all errors rather than stopping at the first."""
    result = IngredientBindingResult(submitted=[dict(row) for row in rows])
    for idx, row in enumerate(rows):
        try:
            result.ingredients.append(IngredientQuantityInput.model_validate(row))
        except ValidationError as exc:
            result.errors.extend(_field_errors(exc, f"ingredients.{idx}"))
    return result
