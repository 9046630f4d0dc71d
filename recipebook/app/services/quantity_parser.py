"""Parse free-form ingredient quantities ("1 1/4", "½", "0,5") into decimals."""

import logging
import re
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, localcontext
from typing import Callable, Optional, Sequence, Tuple

from recipebook.app.core.config import get_settings
from recipebook.app.services.fraction_glyphs import expand_glyphs

logger = logging.getLogger(__name__)

QUANTITY_ERROR_MESSAGE = "Enter a decimal (e.g., 0.5) or fraction (e.g., 1/2 or 1 1/4)."

_DECIMAL_RE = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_INTEGER_RE = re.compile(r"[0-9]+")

_CONTEXT = Context(prec=28)


class MalformedQuantity(ValueError):
    """Raised when quantity text matches none of the accepted shapes."""

    def __init__(self, raw: Optional[str] = None):
        super().__init__(QUANTITY_ERROR_MESSAGE)
        self.raw = raw


def normalize_quantity_text(raw: Optional[str]) -> str:
    s = expand_glyphs(raw or "")
    s = s.replace(",", ".")
    s = re.sub(r"\s+", " ", s)
    s = re.sub(r"\s*/\s*", "/", s)
    return s.strip()


def _parse_integer(token: str) -> Optional[Decimal]:
    if not _INTEGER_RE.fullmatch(token):
        return None
    return Decimal(token)


def _parse_decimal(text: str) -> Optional[Decimal]:
    if not _DECIMAL_RE.fullmatch(text):
        return None
    return Decimal(text)


def _parse_simple_fraction(text: str) -> Optional[Decimal]:
    parts = text.split("/")
    if len(parts) != 2:
        return None
    num = _parse_integer(parts[0])
    den = _parse_integer(parts[1])
    if num is None or den is None or den == 0:
        return None
    return num / den


def _parse_mixed_number(text: str) -> Optional[Decimal]:
    tokens = text.split(" ")
    if len(tokens) != 2 or "/" not in tokens[1]:
        return None
    whole = _parse_integer(tokens[0])
    frac = _parse_simple_fraction(tokens[1])
    if whole is None or frac is None:
        return None
    return whole + frac


def _parse_fraction(text: str) -> Optional[Decimal]:
    if "/" not in text:
        return None
    return _parse_simple_fraction(text)


# Tried in order; the first non-None result wins.
STRATEGIES: Sequence[Callable[[str], Optional[Decimal]]] = (
    _parse_decimal,
    _parse_mixed_number,
    _parse_fraction,
)


def _split_sign(text: str) -> Tuple[Decimal, str]:
    if text.startswith("-"):
        return Decimal(-1), text[1:].lstrip()
    if text.startswith("+"):
        return Decimal(1), text[1:].lstrip()
    return Decimal(1), text


def try_parse_quantity(raw: Optional[str], places: Optional[int] = None) -> Optional[Decimal]:
    """Return the quantity as a decimal rounded half away from zero, or None if malformed.

    Blank input is not an error: it yields zero, the "no quantity given" value.
    """
    if places is None:
        places = get_settings().quantity_decimal_places
    exponent = Decimal(1).scaleb(-places)

    text = normalize_quantity_text(raw)
    if not text:
        return Decimal(0).quantize(exponent)

    sign, unsigned = _split_sign(text)
    with localcontext(_CONTEXT):
        for strategy in STRATEGIES:
            value = strategy(unsigned)
            if value is None:
                continue
            try:
                result = (sign * value).quantize(exponent, rounding=ROUND_HALF_UP)
            except InvalidOperation:
                # more digits than the working precision holds
                break
            # "-0" and values that round to zero are stored unsigned
            return result.copy_abs() if result == 0 else result

    logger.debug("Rejected quantity text %r (normalized %r)", raw, text)
    return None


def parse_quantity(raw: Optional[str], places: Optional[int] = None) -> Decimal:
    """Like :func:`try_parse_quantity` but raises :class:`MalformedQuantity` on bad input."""
    value = try_parse_quantity(raw, places=places)
    if value is None:
        raise MalformedQuantity(raw)
    return value
