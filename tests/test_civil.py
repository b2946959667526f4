"""Tests for the civil calculators."""

import math
from datetime import date

import pytest

from juscalc.calculators.civil import (
    calculate_attorney_fees,
    calculate_default_interest,
    calculate_monetary_correction,
)
from juscalc.rates import MonetaryIndex, MonetaryIndexRateProvider, SimulatedIndexRates


class FixedRates(MonetaryIndexRateProvider):
    def __init__(self, rate):
        self.rate = rate

    def monthly_rate(self, index):
        return self.rate


class TestMonetaryCorrection:
    """Tests for monetary correction plus interest."""

    def test_ipca_six_months(self):
        """IPCA over six months with 1% monthly interest."""
        result = calculate_monetary_correction(
            original_value=1000,
            start_date="2024-01-01",
            end_date="2024-07-01",
            index="ipca",
            monthly_interest_percent=1,
        )
        assert result.elapsed_months == 6
        assert result.monthly_index_rate == 0.005
        assert result.accumulated_correction == pytest.approx(1.005 ** 6 - 1)
        assert result.accumulated_correction == pytest.approx(0.03038, abs=1e-5)
        assert result.accumulated_correction_percent == pytest.approx(3.0378, abs=1e-3)
        assert result.corrected_value == pytest.approx(1030.38, abs=0.01)
        assert result.accrued_interest == pytest.approx(60)
        assert result.total == pytest.approx(1090.38, abs=0.01)

    @pytest.mark.parametrize(
        "index,rate",
        [("ipca", 0.005), ("inpc", 0.0048), ("igpm", 0.006), ("selic", 0.0075)],
    )
    def test_simulated_rates(self, index, rate):
        """Each index uses its simulated monthly rate."""
        result = calculate_monetary_correction(
            original_value=100, start_date=date(2024, 1, 1), end_date=date(2024, 2, 1),
            index=index,
        )
        assert result.monthly_index_rate == rate
        assert result.corrected_value == pytest.approx(100 * (1 + rate))

    def test_unknown_index_uses_ipca(self):
        """Unknown index tags fall back to IPCA."""
        result = calculate_monetary_correction(original_value=100, index="cdi")
        assert result.monthly_index_rate == 0.005

    def test_minimum_one_month(self):
        """Missing or reversed dates still count one month."""
        assert calculate_monetary_correction(original_value=100).elapsed_months == 1
        result = calculate_monetary_correction(
            original_value=100, start_date="2024-07-01", end_date="2024-01-01"
        )
        assert result.elapsed_months == 1

    def test_rate_provider_is_swappable(self):
        """A custom provider replaces the simulated rates."""
        result = calculate_monetary_correction(
            original_value=1000,
            start_date="2024-01-01",
            end_date="2024-03-01",
            monthly_interest_percent=1,
            rates=FixedRates(0.01),
        )
        assert result.elapsed_months == 2
        assert result.corrected_value == pytest.approx(1020.1)

    def test_rate_overrides(self):
        """SimulatedIndexRates accepts per-index overrides."""
        rates = SimulatedIndexRates({MonetaryIndex.SELIC: 0.01})
        assert rates.monthly_rate(MonetaryIndex.SELIC) == 0.01
        assert rates.monthly_rate(MonetaryIndex.IPCA) == 0.005

    def test_compounding_overflow_saturates(self):
        """Millennia of SELIC compounding saturate instead of raising."""
        result = calculate_monetary_correction(
            original_value=1000,
            start_date="0001-01-01",
            end_date="9999-12-31",
            index="selic",
        )
        assert result.elapsed_months == 121735
        assert result.accumulated_correction == math.inf
        assert result.total == math.inf


class TestDefaultInterest:
    """Tests for default interest (juros de mora)."""

    def test_one_year_two_percent(self):
        """Simple interest over twelve thirty-day months."""
        result = calculate_default_interest(
            original_value=5000,
            start_date="2023-01-01",
            end_date="2024-01-01",
            monthly_interest_percent=2,
        )
        assert result.elapsed_months == 12
        assert result.accrued_interest == pytest.approx(1200)
        assert result.total == pytest.approx(6200)


class TestAttorneyFees:
    """Tests for attorney fees."""

    def test_fifteen_percent(self):
        """Fees with the 10%-20% reference bounds."""
        result = calculate_attorney_fees(case_value=100000, percent=15)
        assert result.fee_percent == 15
        assert result.fees == pytest.approx(15000)
        assert result.min_10pct == pytest.approx(10000)
        assert result.max_20pct == pytest.approx(20000)
        assert result.total == result.fees

    def test_default_percent(self):
        """Defaults to the 10% minimum."""
        assert calculate_attorney_fees(case_value=1000).fees == pytest.approx(100)
