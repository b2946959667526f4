"""
Civil calculators (Cálculos Cíveis).

Source: CC art. 406 (default interest), CPC art. 85 §2 (attorney fees)
"""

import math
from dataclasses import dataclass
from typing import Any, Optional

from ..rates import (
    DEFAULT_INDEX,
    MonetaryIndex,
    MonetaryIndexRateProvider,
    SimulatedIndexRates,
)
from .common import as_fraction, elapsed_months

CIVIL_PARAMS = {
    # CC art. 406 / CTN art. 161 §1 - 1% a month
    "default_monthly_interest_percent": 1,
    # CPC art. 85 §2 - fees between 10% and 20% of the case value
    "fees_min_rate": 0.10,
    "fees_max_rate": 0.20,
    "default_fees_percent": 10,
}


@dataclass
class MonetaryCorrectionResult:
    """Correção monetária plus juros de mora."""

    original_value: float
    monthly_index_rate: float
    elapsed_months: int
    accumulated_correction: float
    accumulated_correction_percent: float
    corrected_value: float
    accrued_interest: float
    total: float


@dataclass
class DefaultInterestResult:
    """Juros de mora on a principal."""

    original_value: float
    elapsed_months: int
    accrued_interest: float
    total: float


@dataclass
class AttorneyFeesResult:
    """Honorários de sucumbência with the statutory bounds for context."""

    fee_percent: float
    fees: float
    min_10pct: float
    max_20pct: float
    total: float


def calculate_monetary_correction(
    original_value: float = 0,
    start_date: Any = None,
    end_date: Any = None,
    index: str = DEFAULT_INDEX,
    monthly_interest_percent: float = CIVIL_PARAMS["default_monthly_interest_percent"],
    rates: Optional[MonetaryIndexRateProvider] = None,
) -> MonetaryCorrectionResult:
    """
    Update a historical value by a correction index plus simple interest.

    Args:
        original_value: Amount at start_date
        start_date: Date the amount became due
        end_date: Date of the update
        index: "ipca", "inpc", "igpm" or "selic"
        monthly_interest_percent: Simple monthly interest, in percent
        rates: Index rate source (defaults to the simulated rates)

    Returns:
        MonetaryCorrectionResult
    """
    rates = rates or SimulatedIndexRates()
    try:
        index = MonetaryIndex(index)
    except ValueError:
        index = DEFAULT_INDEX
    monthly_rate = rates.monthly_rate(index)
    months = elapsed_months(start_date, end_date)

    # Compounded monthly; saturates to infinity past the float range
    try:
        accumulated_correction = (1 + monthly_rate) ** months - 1
    except OverflowError:
        accumulated_correction = math.inf
    corrected_value = original_value * (1 + accumulated_correction)

    accrued_interest = original_value * as_fraction(monthly_interest_percent) * months

    return MonetaryCorrectionResult(
        original_value=original_value,
        monthly_index_rate=monthly_rate,
        elapsed_months=months,
        accumulated_correction=accumulated_correction,
        accumulated_correction_percent=accumulated_correction * 100,
        corrected_value=corrected_value,
        accrued_interest=accrued_interest,
        total=corrected_value + accrued_interest,
    )


def calculate_default_interest(
    original_value: float = 0,
    start_date: Any = None,
    end_date: Any = None,
    monthly_interest_percent: float = CIVIL_PARAMS["default_monthly_interest_percent"],
) -> DefaultInterestResult:
    """Simple monthly default interest (juros de mora) between two dates."""
    months = elapsed_months(start_date, end_date)
    accrued_interest = original_value * as_fraction(monthly_interest_percent) * months

    return DefaultInterestResult(
        original_value=original_value,
        elapsed_months=months,
        accrued_interest=accrued_interest,
        total=original_value + accrued_interest,
    )


def calculate_attorney_fees(
    case_value: float = 0,
    percent: float = CIVIL_PARAMS["default_fees_percent"],
) -> AttorneyFeesResult:
    """
    Calculate loss-of-suit attorney fees (honorários de sucumbência).

    Args:
        case_value: Value of the case
        percent: Fee percentage awarded

    Returns:
        AttorneyFeesResult
    """
    fees = case_value * as_fraction(percent)

    return AttorneyFeesResult(
        fee_percent=percent,
        fees=fees,
        min_10pct=case_value * CIVIL_PARAMS["fees_min_rate"],
        max_20pct=case_value * CIVIL_PARAMS["fees_max_rate"],
        total=fees,
    )
