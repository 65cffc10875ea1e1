"""Decimal helpers — constants, coercion, report number formatting. No shape imports."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

# Seeded from the double-precision constant; 2-decimal output matches float-based references.
PI = Decimal(repr(math.pi))

SQRT3 = Decimal(3).sqrt()

_TWO_PLACES = Decimal("0.01")


def to_decimal(value: object) -> object:
    """Coerce a float to Decimal through its shortest repr: 2.75 → Decimal("2.75").

    Anything else is passed through for pydantic to validate.
    """
    if isinstance(value, float):
        return Decimal(repr(value))
    return value


def format_decimal(value: Decimal, separator: str = ".") -> str:
    """Render like the "#.##" pattern: at most 2 places, no trailing zeros, no grouping.

    25 → "25", 51.60 → "51.6", 13.0082 → "13.01". Rounds half away from zero.
    A value that rounds to zero renders as "0". Precision grows with the
    magnitude, so any finite value formats regardless of the caller's context.
    """
    value = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + 3)
        rounded = value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
        if rounded == 0:
            return "0"
        text = format(rounded.normalize(), "f")
    if separator != ".":
        text = text.replace(".", separator)
    return text
