"""Engine configuration."""

from dataclasses import dataclass, field

from .rates import MonetaryIndexRateProvider, SimulatedIndexRates

# National minimum wage (BRL), Decree 11.864/2023
REFERENCE_MINIMUM_WAGE = 1412.0

# Standard monthly working hours, CLT art. 58 (44h/week)
STANDARD_MONTHLY_HOURS = 220.0


@dataclass
class EngineConfig:
    """Reference values the formulas fall back to."""

    reference_minimum_wage: float = REFERENCE_MINIMUM_WAGE
    standard_monthly_hours: float = STANDARD_MONTHLY_HOURS
    rate_provider: MonetaryIndexRateProvider = field(
        default_factory=SimulatedIndexRates
    )
