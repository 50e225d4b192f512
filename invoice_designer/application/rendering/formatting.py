"""Cell value formatting for table columns."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Final

_DECIMAL_LITERAL: Final[re.Pattern[str]] = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$"
)
_PREFIXED_LITERAL: Final[re.Pattern[str]] = re.compile(r"^0(?P<base>[xXoObB])(?P<digits>[0-9a-fA-F]+)$")
_BASES: Final[dict[str, int]] = {"x": 16, "o": 8, "b": 2}
_INFINITY: Final[dict[str, float]] = {
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}
_CENT: Final[Decimal] = Decimal("0.01")


def to_number(value: Any) -> float:
    """Coerce a JSON value to a number, treating anything non-numeric as ``0``.

    Numeric strings (``"12.5"``, ``" 1e3 "``, ``"0x10"``) are parsed; empty
    strings, ``None``, objects and ``NaN`` all become zero.
    """

    number = _coerce(value)
    if number is None or math.isnan(number):
        return 0.0
    return number


def _coerce(value: Any) -> float | None:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return _parse_numeric_string(value)
    if isinstance(value, list):
        if not value:
            return 0.0
        if len(value) == 1 and not isinstance(value[0], (dict, list)):
            return _parse_numeric_string("" if value[0] is None else str(value[0]))
    return None


def _parse_numeric_string(text: str) -> float | None:
    stripped = text.strip()
    if not stripped:
        return 0.0
    if stripped in _INFINITY:
        return _INFINITY[stripped]
    if _DECIMAL_LITERAL.match(stripped):
        return float(stripped)
    prefixed = _PREFIXED_LITERAL.match(stripped)
    if prefixed:
        try:
            return float(int(prefixed.group("digits"), _BASES[prefixed.group("base").lower()]))
        except ValueError:
            return None
    return None


def format_currency(value: Any) -> str:
    """Format ``value`` as US dollars, e.g. ``1500 -> "$1,500.00"``."""

    number = to_number(value)
    sign = "-" if number < 0 else ""
    if math.isinf(number):
        return f"{sign}$∞"
    # Round the shortest decimal form, so 1.005 becomes 1.01.
    amount = Decimal(repr(abs(number)))
    with localcontext() as context:
        context.prec = max(context.prec, amount.adjusted() + 4)
        amount = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    return f"{sign}${amount:,.2f}"


def format_cell(value: Any, column_format: str | None) -> Any:
    """Apply a column format; only ``currency`` changes the value."""

    if column_format == "currency":
        return format_currency(value)
    return value


__all__ = ["format_cell", "format_currency", "to_number"]
