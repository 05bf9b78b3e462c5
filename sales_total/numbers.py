"""
Numeric helpers shared by the parser and the aggregator.

parse_number is deliberately permissive: it reads the longest leading decimal
literal and ignores whatever follows, so "123.45abc" is 123.45 and "N/A" is
not a number. The grammar is locale-invariant (dot decimal separator only).
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from .rules import DISPLAY_DECIMALS

_LEADING_NUMBER = re.compile(
    r"[\s\ufeff]*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def parse_number(value: Optional[str]) -> Optional[float]:
    """Return the float at the start of `value`, or None when there is none."""
    if value is None:
        return None
    match = _LEADING_NUMBER.match(value)
    if match is None:
        return None
    return float(match.group(1))


def is_number(value: Optional[str]) -> bool:
    return parse_number(value) is not None


def format_total(total: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Fixed-point display of a total.

    Halves round away from zero on the exact binary value, and non-finite
    totals render as Infinity, -Infinity or NaN.
    """
    if math.isnan(total):
        return "NaN"
    if math.isinf(total):
        return "Infinity" if total > 0 else "-Infinity"
    if total == 0:
        total = 0.0  # drop the sign of -0.0

    with localcontext() as ctx:
        ctx.prec = 400
        quantum = Decimal(1).scaleb(-decimals)
        rounded = Decimal(total).quantize(quantum, rounding=ROUND_HALF_UP)
    return format(rounded, "f")
