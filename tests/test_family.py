"""Tests for the family-law calculators."""

import pytest

from juscalc.calculators.family import calculate_asset_division, calculate_child_support


class TestChildSupport:
    """Tests for child support."""

    def test_two_children(self):
        """Monthly, per-child and yearly amounts."""
        result = calculate_child_support(payer_monthly_income=10000, percent=30, child_count=2)
        assert result.support_percent == 30
        assert result.support_total == pytest.approx(3000)
        assert result.per_child == pytest.approx(1500)
        assert result.annual == pytest.approx(36000)
        assert result.thirteenth_reflex == pytest.approx(3000)
        assert result.total == pytest.approx(39000)

    def test_zero_children_guarded(self):
        """A child count below one divides by one."""
        result = calculate_child_support(payer_monthly_income=1000, child_count=0)
        assert result.per_child == result.support_total


class TestAssetDivision:
    """Tests for asset division."""

    def test_half(self):
        """Equal split."""
        result = calculate_asset_division(total_assets=800000)
        assert result.share_value == pytest.approx(400000)
        assert result.other_party_value == pytest.approx(400000)
        assert result.total == result.share_value

    def test_uneven(self):
        """Shares add up to the whole."""
        result = calculate_asset_division(total_assets=1000, percent=70)
        assert result.share_value == pytest.approx(700)
        assert result.share_value + result.other_party_value == pytest.approx(1000)
