"""
Python implementations of the dashboard's legal calculators.

Each calculator is a pure function of its keyword arguments returning a
result dataclass whose last field is the headline total.
"""

from .civil import (
    CIVIL_PARAMS,
    calculate_attorney_fees,
    calculate_default_interest,
    calculate_monetary_correction,
)
from .family import FAMILY_PARAMS, calculate_asset_division, calculate_child_support
from .labor import (
    HAZARD_PARAMS,
    NIGHT_SHIFT_PARAMS,
    OVERTIME_PARAMS,
    SEVERANCE_PARAMS,
    UNHEALTHY_PARAMS,
    NoticeType,
    TerminationReason,
    calculate_hazard_premium,
    calculate_night_shift_premium,
    calculate_overtime,
    calculate_severance_pay,
    calculate_unhealthy_conditions_premium,
)
from .social_security import calculate_contribution_time

__all__ = [
    "calculate_severance_pay",
    "SEVERANCE_PARAMS",
    "NoticeType",
    "TerminationReason",
    "calculate_overtime",
    "OVERTIME_PARAMS",
    "calculate_night_shift_premium",
    "NIGHT_SHIFT_PARAMS",
    "calculate_unhealthy_conditions_premium",
    "UNHEALTHY_PARAMS",
    "calculate_hazard_premium",
    "HAZARD_PARAMS",
    "calculate_monetary_correction",
    "calculate_default_interest",
    "calculate_attorney_fees",
    "CIVIL_PARAMS",
    "calculate_child_support",
    "calculate_asset_division",
    "FAMILY_PARAMS",
    "calculate_contribution_time",
]
