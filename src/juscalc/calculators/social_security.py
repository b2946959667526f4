"""
Social-security calculators (Cálculos Previdenciários).

Contribution time uses the commercial convention of 365-day years and
30-day months.
"""

from dataclasses import dataclass
from typing import Any

from .common import days_between


@dataclass
class ContributionTimeResult:
    """Tempo de contribuição as a day count and years/months/days."""

    elapsed_days: int
    years: int
    months: int
    days: int
    summary: str
    total: int


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_duration(years: int, months: int, days: int) -> str:
    """Render a duration the way the dashboard shows it, e.g. "2 anos, 1 mês e 3 dias"."""
    return "{}, {} e {}".format(
        _plural(years, "ano", "anos"),
        _plural(months, "mês", "meses"),
        _plural(days, "dia", "dias"),
    )


def calculate_contribution_time(
    start_date: Any = None,
    end_date: Any = None,
) -> ContributionTimeResult:
    """
    Calculate contribution time between two dates.

    The order of the dates does not matter. Missing dates count as zero days.

    Args:
        start_date: First day of contribution
        end_date: Last day of contribution

    Returns:
        ContributionTimeResult; total is the elapsed day count
    """
    elapsed_days = abs(days_between(start_date, end_date))

    years = elapsed_days // 365
    remainder = elapsed_days % 365
    months = remainder // 30
    days = remainder % 30

    return ContributionTimeResult(
        elapsed_days=elapsed_days,
        years=years,
        months=months,
        days=days,
        summary=format_duration(years, months, days),
        total=elapsed_days,
    )
