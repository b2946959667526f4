"""
Monthly rates for monetary-correction indices.

The dashboard has no index-rate feed yet, so the default provider returns a
fixed simulated monthly rate per index. Swap in another
MonetaryIndexRateProvider to use published IPCA/INPC/IGP-M/SELIC figures
without touching the correction formula.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional


class MonetaryIndex(str, Enum):
    """Correction indices offered by the dashboard."""

    IPCA = "ipca"
    INPC = "inpc"
    IGPM = "igpm"
    SELIC = "selic"


# Simulated monthly rates (placeholders until a real index source is wired in)
SIMULATED_MONTHLY_RATES: Dict[MonetaryIndex, float] = {
    MonetaryIndex.IPCA: 0.005,
    MonetaryIndex.INPC: 0.0048,
    MonetaryIndex.IGPM: 0.006,
    MonetaryIndex.SELIC: 0.0075,
}

DEFAULT_INDEX = MonetaryIndex.IPCA


class MonetaryIndexRateProvider(ABC):
    """Source of monthly correction rates, as fractions (0.005 == 0.5%)."""

    @abstractmethod
    def monthly_rate(self, index: MonetaryIndex) -> float:
        """Return the monthly rate for an index."""


class SimulatedIndexRates(MonetaryIndexRateProvider):
    """Fixed monthly rates, optionally overridden per index."""

    def __init__(self, overrides: Optional[Dict[MonetaryIndex, float]] = None):
        self.rates = dict(SIMULATED_MONTHLY_RATES)
        if overrides:
            self.rates.update(overrides)

    def monthly_rate(self, index: MonetaryIndex) -> float:
        # Unknown indices use the IPCA rate
        return self.rates.get(index, self.rates[DEFAULT_INDEX])

    def __repr__(self) -> str:
        return f"SimulatedIndexRates({self.rates!r})"
