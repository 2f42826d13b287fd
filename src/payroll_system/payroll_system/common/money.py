from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from ..core.exceptions import ValidationError

# Numeric values as they arrive from storage (DECIMAL columns, strings, ints).
Amount = Union[Decimal, int, float, str, None]

ZERO = Decimal("0")
CENTS = Decimal("0.01")
UNIT = Decimal("1")


def to_decimal(value: Amount, field_name: str) -> Decimal:
    """Coerce a stored numeric value into Decimal.

    None and blank strings count as zero. Anything else that is not a finite
    number raises ValidationError naming the field.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise ValidationError(f"{field_name} is not numeric: {value!r}")
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    else:
        text = str(value).strip()
        if not text:
            return ZERO
        try:
            result = Decimal(text)
        except InvalidOperation:
            raise ValidationError(f"{field_name} is not numeric: {value!r}") from None

    if not result.is_finite():
        raise ValidationError(f"{field_name} is not numeric: {value!r}")
    return result


def round_half_up(value: Decimal) -> Decimal:
    """Round to a whole unit; .5 always goes up."""
    return value.quantize(UNIT, rounding=ROUND_HALF_UP)


def money(value: Decimal) -> Decimal:
    """Quantize to the 2-decimal precision used for stored amounts."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)
