"""
Result presentation: label/value grid with pt-BR currency formatting.

Dispatch per result field:
- strings pass through
- names containing "percent" render as "12.50%"
- rate fields hold fractions and render as percentages too
- day/month/hour counts render as plain numbers
- everything else renders as BRL currency ("R$ 1.234,56")
"""

import re
from typing import Any, List, Mapping, Optional, Tuple

from .catalog import TotalUnit, get_entry

NBSP = "\u00a0"

COUNT_FIELDS = frozenset(
    {
        "notice_days",
        "elapsed_months",
        "elapsed_days",
        "years",
        "months",
        "days",
        "reduced_hours",
        "hour_difference",
    }
)

# Fractions (0.005) shown as percentages ("0.50%")
RATE_FIELDS = frozenset({"monthly_index_rate", "accumulated_correction"})

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _brazilian_digits(value: float, places: int = 2) -> str:
    """1234567.891 -> "1.234.567,89"."""
    text = f"{value:,.{places}f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(value: float) -> str:
    """Format an amount as Brazilian reais, e.g. "R$ 1.500,00"."""
    amount = round(value, 2)
    sign = "-" if amount < 0 else ""
    return f"{sign}R${NBSP}{_brazilian_digits(abs(amount))}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def format_count(value: Any) -> str:
    if isinstance(value, int) or float(value).is_integer():
        return str(int(value))
    return _brazilian_digits(value)


def is_percent_field(name: str) -> bool:
    return "percent" in name or "Percent" in name


def format_value(name: str, value: Any, unit: TotalUnit = TotalUnit.CURRENCY) -> str:
    """
    Format one result value for display.

    Args:
        name: Result field name, drives the dispatch
        value: Field value
        unit: Unit of the "total" field for this calculation kind

    Returns:
        Display string
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if is_percent_field(name):
        return format_percent(value)
    if name in RATE_FIELDS:
        return format_percent(value * 100)
    if name in COUNT_FIELDS or (name == "total" and unit == TotalUnit.DAYS):
        return format_count(value)
    return format_currency(value)


def humanize(name: str) -> str:
    """balance_of_salary -> "Balance of salary"; saldoSalario -> "Saldo salario"."""
    words = _CAMEL_BOUNDARY.sub(" ", name).replace("_", " ").split()
    text = " ".join(words).lower()
    return text[:1].upper() + text[1:]


def render(
    result: Mapping[str, Any], kind: Optional[Any] = None
) -> List[Tuple[str, str]]:
    """
    Render a result record as (label, display value) rows in field order.

    Args:
        result: Result record from compute()
        kind: Calculation kind, used to pick the unit of "total"

    Returns:
        List of (label, text) pairs
    """
    unit = get_entry(kind).total_unit if kind is not None else TotalUnit.CURRENCY
    return [(humanize(name), format_value(name, value, unit)) for name, value in result.items()]


def render_text(
    result: Mapping[str, Any], kind: Optional[Any] = None, title: str = ""
) -> str:
    """Render a result record as an aligned two-column text block."""
    rows = render(result, kind)
    width = max((len(label) for label, _ in rows), default=0)
    lines = []
    if title:
        lines.extend([title, "-" * len(title)])
    for label, text in rows:
        lines.append(f"{label.ljust(width)}  {text}")
    return "\n".join(lines)
