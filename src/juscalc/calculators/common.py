"""
Shared coercion and arithmetic helpers for the calculators.

Input coercion follows the dashboard form layer: numbers are parsed
permissively (the longest leading numeric prefix wins) and anything missing,
unparseable, zero or non-finite becomes the field default. Numbers beyond
the float range count as non-finite. Nothing here raises on bad input.
"""

import math
import re
import sys
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

_FLOAT_PREFIX = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^[+-]?\d+")

MAX_FLOAT = sys.float_info.max


def _normalize_separators(text: str) -> str:
    """Accept pt-BR "1.234,56" and "12,5" as well as "1234.56" and "1,234.56"."""
    if "," not in text:
        return text
    if text.rfind(".") > text.rfind(","):
        # Comma is the thousands separator
        return text.replace(",", "")
    return text.replace(".", "").replace(",", ".")


def _in_float_range(number: Any) -> bool:
    return -MAX_FLOAT <= number <= MAX_FLOAT


def clamp_finite(value: float) -> float:
    """Saturate infinities to the largest float of the same sign; NaN becomes 0."""
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return math.copysign(MAX_FLOAT, value)
    return value


def to_number(value: Any, default: float = 0.0) -> float:
    """
    Coerce a form value to a float.

    Args:
        value: Number, numeric string, or anything else
        default: Returned for missing, unparseable, zero or non-finite values

    Returns:
        The parsed float, or default
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal) and not value.is_finite():
        return default
    if isinstance(value, int):
        if not _in_float_range(value):
            return default
        number = float(value)
    elif isinstance(value, (float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(_normalize_separators(value.strip()))
        if not match:
            return default
        number = float(match.group(0))
    else:
        return default

    if not math.isfinite(number) or number == 0:
        return default
    return number


def to_integer(value: Any, default: int = 0) -> int:
    """Coerce a form value to an int, truncating toward zero like parseInt."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal) and not value.is_finite():
        return default
    if isinstance(value, (float, Decimal)):
        if not math.isfinite(float(value)):
            return default
        number = int(value)
    elif isinstance(value, int):
        number = value
    elif isinstance(value, str):
        match = _INT_PREFIX.match(value.strip())
        if not match:
            return default
        try:
            number = int(match.group(0))
        except ValueError:
            # Longer than the interpreter's int string limit
            return default
    else:
        return default
    if not _in_float_range(number):
        return default
    return number or default


def to_date(value: Any) -> Optional[date]:
    """Coerce a date, datetime or ISO "YYYY-MM-DD" string to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def to_choice(
    value: Any,
    choices: Sequence[str],
    default: str,
    aliases: Optional[Mapping[str, str]] = None,
) -> str:
    """Return value if it names one of choices (or an alias), else default."""
    if not isinstance(value, str):
        value = getattr(value, "value", value)
        if not isinstance(value, str):
            return default
    tag = value.strip().lower()
    if aliases and tag in aliases:
        tag = aliases[tag]
    return tag if tag in choices else default


def days_between(start: Any, end: Any) -> int:
    """Signed whole days from start to end; 0 if either date is missing."""
    start_date = to_date(start)
    end_date = to_date(end)
    if start_date is None or end_date is None:
        return 0
    return (end_date - start_date).days


def elapsed_months(start: Any, end: Any) -> int:
    """Thirty-day months between two dates, never less than one."""
    return max(1, math.floor(days_between(start, end) / 30))


def as_fraction(value: float) -> float:
    """Convert a whole-number percentage (50) to a fraction (0.5)."""
    return value / 100
