"""
Labor calculators (Cálculos Trabalhistas).

Source: CLT (Decree-Law 5.452/1943), Law 8.036/1990 (FGTS),
Law 12.506/2011 (proportional notice), Law 605/1949 (DSR)
"""

from dataclasses import dataclass
from enum import Enum

from ..config import REFERENCE_MINIMUM_WAGE, STANDARD_MONTHLY_HOURS
from .common import as_fraction

SEVERANCE_PARAMS = {
    # CLT art. 487 / Law 12.506/2011 - 30 days plus 3 per full year, max 90
    "notice_base_days": 30,
    "notice_days_per_year": 3,
    "notice_max_extra_days": 60,
    # Law 8.036/1990 art. 15 - monthly FGTS deposit
    "fgts_rate": 0.08,
    # Law 8.036/1990 art. 18 §1 - penalty on dismissal without cause
    "fgts_penalty_rate": 0.40,
}

OVERTIME_PARAMS = {
    # CF art. 7 XVI - minimum 50%; 100% on Sundays and holidays
    "premium_choices": (50, 100),
    "default_premium_percent": 50,
    # Law 605/1949 - DSR reflex as one sixth of overtime pay
    "rest_reflex_divisor": 6,
}

NIGHT_SHIFT_PARAMS = {
    # CLT art. 73 - 20% premium, night hour of 52m30s
    "premium_rate": 0.20,
    "reduced_hour_minutes": 52.5,
}

UNHEALTHY_PARAMS = {
    # CLT art. 192 - 10%, 20% or 40% of the minimum wage
    "degree_choices": (10, 20, 40),
    "default_degree_percent": 20,
}

HAZARD_PARAMS = {
    # CLT art. 193 §1 - 30% of base salary
    "premium_rate": 0.30,
}


class NoticeType(str, Enum):
    WORKED = "worked"
    INDEMNIFIED = "indemnified"


class TerminationReason(str, Enum):
    WITHOUT_CAUSE = "without_cause"
    WITH_CAUSE = "with_cause"
    RESIGNATION = "resignation"
    MUTUAL_AGREEMENT = "mutual_agreement"


# Tags used by the dashboard forms
NOTICE_TYPE_ALIASES = {
    "trabalhado": NoticeType.WORKED.value,
    "indenizado": NoticeType.INDEMNIFIED.value,
}

TERMINATION_REASON_ALIASES = {
    "sem_justa_causa": TerminationReason.WITHOUT_CAUSE.value,
    "com_justa_causa": TerminationReason.WITH_CAUSE.value,
    "pedido_demissao": TerminationReason.RESIGNATION.value,
    "acordo": TerminationReason.MUTUAL_AGREEMENT.value,
}


@dataclass
class SeverancePayResult:
    """Verbas rescisórias breakdown."""

    balance_of_salary: float
    proportional_13th: float
    proportional_vacation: float
    vacation_third: float
    unused_vacation_total: float
    notice_days: int
    notice_pay: float
    severance_fund_deposited: float
    severance_fund_penalty: float
    total: float


@dataclass
class OvertimeResult:
    """Horas extras with DSR reflex."""

    hourly_rate: float
    overtime_hourly_rate: float
    overtime_total: float
    weekly_rest_reflex: float
    total: float


@dataclass
class NightShiftResult:
    """Adicional noturno result."""

    hourly_rate: float
    premium_20pct: float
    reduced_hours: float
    hour_difference: float
    difference_value: float
    total: float


@dataclass
class PremiumResult:
    """Monthly premium with 13th and vacation reflexes."""

    monthly_premium: float
    total_period: float
    thirteenth_reflex: float
    vacation_reflex: float
    total: float


def calculate_severance_pay(
    base_salary: float = 0,
    months_worked: int = 0,
    unused_vacation_periods: int = 0,
    notice_type: str = NoticeType.WORKED,
    termination_reason: str = TerminationReason.WITHOUT_CAUSE,
) -> SeverancePayResult:
    """
    Calculate severance pay (verbas rescisórias).

    Args:
        base_salary: Monthly base salary
        months_worked: Months of service
        unused_vacation_periods: Accrued vacation periods not yet taken
        notice_type: "worked" or "indemnified"
        termination_reason: "without_cause", "with_cause", "resignation"
            or "mutual_agreement"

    Returns:
        SeverancePayResult with each component and the total
    """
    # Half a month of salary balance
    balance_of_salary = base_salary / 2

    # Months in the current period; a whole year counts as 12
    period_months = months_worked % 12 or 12
    proportional_13th = (base_salary / 12) * period_months
    proportional_vacation = (base_salary / 12) * period_months
    vacation_third = proportional_vacation / 3

    unused_vacation_total = (
        (base_salary + base_salary / 3) * unused_vacation_periods
        if unused_vacation_periods > 0
        else 0
    )

    full_years = months_worked // 12
    notice_days = SEVERANCE_PARAMS["notice_base_days"] + min(
        full_years * SEVERANCE_PARAMS["notice_days_per_year"],
        SEVERANCE_PARAMS["notice_max_extra_days"],
    )
    notice_pay = (
        (base_salary / 30) * notice_days
        if notice_type == NoticeType.INDEMNIFIED
        else 0
    )

    severance_fund_deposited = (
        base_salary * SEVERANCE_PARAMS["fgts_rate"] * months_worked
    )
    severance_fund_penalty = (
        severance_fund_deposited * SEVERANCE_PARAMS["fgts_penalty_rate"]
        if termination_reason == TerminationReason.WITHOUT_CAUSE
        else 0
    )

    total = (
        balance_of_salary
        + proportional_13th
        + proportional_vacation
        + vacation_third
        + unused_vacation_total
        + notice_pay
        + severance_fund_penalty
    )

    return SeverancePayResult(
        balance_of_salary=balance_of_salary,
        proportional_13th=proportional_13th,
        proportional_vacation=proportional_vacation,
        vacation_third=vacation_third,
        unused_vacation_total=unused_vacation_total,
        notice_days=notice_days,
        notice_pay=notice_pay,
        severance_fund_deposited=severance_fund_deposited,
        severance_fund_penalty=severance_fund_penalty,
        total=total,
    )


def calculate_overtime(
    base_salary: float = 0,
    monthly_hours: float = STANDARD_MONTHLY_HOURS,
    overtime_hours: float = 0,
    premium_percent: float = OVERTIME_PARAMS["default_premium_percent"],
) -> OvertimeResult:
    """
    Calculate overtime pay and its weekly rest (DSR) reflex.

    Args:
        base_salary: Monthly base salary
        monthly_hours: Contracted monthly hours (0 means 220)
        overtime_hours: Overtime hours worked
        premium_percent: Overtime premium, 50 or 100

    Returns:
        OvertimeResult
    """
    hourly_rate = base_salary / (monthly_hours or STANDARD_MONTHLY_HOURS)
    overtime_hourly_rate = hourly_rate * (1 + as_fraction(premium_percent))
    overtime_total = overtime_hourly_rate * overtime_hours
    weekly_rest_reflex = overtime_total / OVERTIME_PARAMS["rest_reflex_divisor"]

    return OvertimeResult(
        hourly_rate=hourly_rate,
        overtime_hourly_rate=overtime_hourly_rate,
        overtime_total=overtime_total,
        weekly_rest_reflex=weekly_rest_reflex,
        total=overtime_total + weekly_rest_reflex,
    )


def calculate_night_shift_premium(
    base_salary: float = 0,
    night_hours: float = 0,
    monthly_hours: float = STANDARD_MONTHLY_HOURS,
) -> NightShiftResult:
    """
    Calculate the night-shift premium (adicional noturno).

    Clock hours are converted to legal night hours of 52.5 minutes; the
    difference is paid at the premium hourly rate.
    """
    rate = NIGHT_SHIFT_PARAMS["premium_rate"]
    hourly_rate = base_salary / (monthly_hours or STANDARD_MONTHLY_HOURS)
    premium_20pct = hourly_rate * rate * night_hours

    reduced_hours = night_hours * NIGHT_SHIFT_PARAMS["reduced_hour_minutes"] / 60
    hour_difference = night_hours - reduced_hours
    difference_value = hour_difference * hourly_rate * (1 + rate)

    return NightShiftResult(
        hourly_rate=hourly_rate,
        premium_20pct=premium_20pct,
        reduced_hours=reduced_hours,
        hour_difference=hour_difference,
        difference_value=difference_value,
        total=premium_20pct + difference_value,
    )


def _premium_with_reflexes(monthly_premium: float, months: float) -> PremiumResult:
    total_period = monthly_premium * months
    thirteenth_reflex = monthly_premium
    vacation_reflex = monthly_premium * 4 / 3
    return PremiumResult(
        monthly_premium=monthly_premium,
        total_period=total_period,
        thirteenth_reflex=thirteenth_reflex,
        vacation_reflex=vacation_reflex,
        total=total_period + thirteenth_reflex + vacation_reflex,
    )


def calculate_unhealthy_conditions_premium(
    minimum_wage: float = REFERENCE_MINIMUM_WAGE,
    degree_percent: float = UNHEALTHY_PARAMS["default_degree_percent"],
    months: float = 0,
) -> PremiumResult:
    """
    Calculate the unhealthy-conditions premium (insalubridade).

    Args:
        minimum_wage: Base of the premium (reference minimum wage)
        degree_percent: 10 (minimum), 20 (medium) or 40 (maximum)
        months: Months of exposure

    Returns:
        PremiumResult
    """
    return _premium_with_reflexes(minimum_wage * as_fraction(degree_percent), months)


def calculate_hazard_premium(base_salary: float = 0, months: float = 0) -> PremiumResult:
    """Calculate the hazard premium (periculosidade), 30% of base salary."""
    return _premium_with_reflexes(base_salary * HAZARD_PARAMS["premium_rate"], months)
