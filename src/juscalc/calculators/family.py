"""
Family-law calculators (Cálculos de Família).

Source: CC art. 1.694 (alimentos), CC arts. 1.658-1.666 (partilha)
"""

from dataclasses import dataclass

from .common import as_fraction

FAMILY_PARAMS = {
    # Courts commonly award between 15% and 33% of the payer's income
    "support_percent_choices": (15, 20, 25, 30, 33),
    "default_support_percent": 30,
    # Partial community of property splits half and half
    "default_share_percent": 50,
}


@dataclass
class ChildSupportResult:
    """Pensão alimentícia per month, per child and per year."""

    support_percent: float
    support_total: float
    per_child: float
    annual: float
    thirteenth_reflex: float
    total: float


@dataclass
class AssetDivisionResult:
    """Partilha de bens between two parties."""

    share_percent: float
    share_value: float
    other_party_value: float
    total: float


def calculate_child_support(
    payer_monthly_income: float = 0,
    percent: float = FAMILY_PARAMS["default_support_percent"],
    child_count: int = 1,
) -> ChildSupportResult:
    """
    Calculate child support (pensão alimentícia).

    Args:
        payer_monthly_income: Monthly income of the payer
        percent: Share of income awarded, in percent
        child_count: Number of children sharing the support

    Returns:
        ChildSupportResult; total is the yearly amount including the
        13th-salary reflex
    """
    support_total = payer_monthly_income * as_fraction(percent)
    per_child = support_total / max(1, child_count)
    annual = support_total * 12
    thirteenth_reflex = support_total

    return ChildSupportResult(
        support_percent=percent,
        support_total=support_total,
        per_child=per_child,
        annual=annual,
        thirteenth_reflex=thirteenth_reflex,
        total=annual + thirteenth_reflex,
    )


def calculate_asset_division(
    total_assets: float = 0,
    percent: float = FAMILY_PARAMS["default_share_percent"],
) -> AssetDivisionResult:
    """Split total_assets, giving percent of it to the requesting party."""
    share_value = total_assets * as_fraction(percent)

    return AssetDivisionResult(
        share_percent=percent,
        share_value=share_value,
        other_party_value=total_assets - share_value,
        total=share_value,
    )
