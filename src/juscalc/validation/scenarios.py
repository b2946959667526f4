"""
Reference scenarios for validating the calculators.

Each scenario is a kind, an input record and the hand-checked values of
some result fields. load_scenarios() explodes them into one DataFrame row
per (scenario, field) for the comparator.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

SCENARIO_COLUMNS = ["scenario_id", "kind", "inputs", "field", "expected"]

REFERENCE_SCENARIOS: List[Dict[str, Any]] = [
    {
        "scenario_id": "severance_indemnified_without_cause",
        "kind": "severance_pay",
        "inputs": {
            "base_salary": 3000,
            "months_worked": 12,
            "unused_vacation_periods": 0,
            "notice_type": "indemnified",
            "termination_reason": "without_cause",
        },
        "expected": {
            "balance_of_salary": 1500,
            "proportional_13th": 3000,
            "proportional_vacation": 3000,
            "vacation_third": 1000,
            "notice_days": 33,
            "notice_pay": 3300,
            "severance_fund_deposited": 2880,
            "severance_fund_penalty": 1152,
            "total": 12952,
        },
    },
    {
        "scenario_id": "severance_resignation_unused_vacation",
        "kind": "severance_pay",
        "inputs": {
            "base_salary": 2400,
            "months_worked": 30,
            "unused_vacation_periods": 1,
            "notice_type": "worked",
            "termination_reason": "resignation",
        },
        "expected": {
            "proportional_13th": 1200,
            "unused_vacation_total": 3200,
            "notice_days": 36,
            "notice_pay": 0,
            "severance_fund_deposited": 5760,
            "severance_fund_penalty": 0,
            "total": 7200,
        },
    },
    {
        "scenario_id": "overtime_50",
        "kind": "overtime",
        "inputs": {
            "base_salary": 2200,
            "monthly_hours": 220,
            "overtime_hours": 10,
            "premium_percent": 50,
        },
        "expected": {
            "hourly_rate": 10,
            "overtime_hourly_rate": 15,
            "overtime_total": 150,
            "weekly_rest_reflex": 25,
            "total": 175,
        },
    },
    {
        "scenario_id": "overtime_100",
        "kind": "overtime",
        "inputs": {"base_salary": 4400, "overtime_hours": 8, "premium_percent": 100},
        "expected": {"hourly_rate": 20, "overtime_total": 320, "total": 373.3333},
    },
    {
        "scenario_id": "night_shift",
        "kind": "night_shift_premium",
        "inputs": {"base_salary": 2200, "night_hours": 60},
        "expected": {
            "premium_20pct": 120,
            "reduced_hours": 52.5,
            "hour_difference": 7.5,
            "difference_value": 90,
            "total": 210,
        },
    },
    {
        "scenario_id": "unhealthy_maximum_degree",
        "kind": "unhealthy_conditions_premium",
        "inputs": {"degree_percent": 40, "months": 12},
        "expected": {
            "monthly_premium": 564.8,
            "total_period": 6777.6,
            "vacation_reflex": 753.0667,
            "total": 8095.4667,
        },
    },
    {
        "scenario_id": "hazard",
        "kind": "hazard_premium",
        "inputs": {"base_salary": 3000, "months": 6},
        "expected": {"monthly_premium": 900, "total_period": 5400, "total": 7500},
    },
    {
        "scenario_id": "monetary_correction_ipca",
        "kind": "monetary_correction",
        "inputs": {
            "original_value": 1000,
            "start_date": "2024-01-01",
            "end_date": "2024-07-01",
            "index": "ipca",
            "monthly_interest_percent": 1,
        },
        "expected": {
            "elapsed_months": 6,
            "accumulated_correction": 0.030378,
            "corrected_value": 1030.38,
            "accrued_interest": 60,
            "total": 1090.38,
        },
    },
    {
        "scenario_id": "default_interest_one_year",
        "kind": "default_interest",
        "inputs": {
            "original_value": 5000,
            "start_date": "2023-01-01",
            "end_date": "2024-01-01",
            "monthly_interest_percent": 2,
        },
        "expected": {"elapsed_months": 12, "accrued_interest": 1200, "total": 6200},
    },
    {
        "scenario_id": "attorney_fees_15",
        "kind": "attorney_fees",
        "inputs": {"case_value": 100000, "percent": 15},
        "expected": {"fees": 15000, "min_10pct": 10000, "max_20pct": 20000, "total": 15000},
    },
    {
        "scenario_id": "child_support_two_children",
        "kind": "child_support",
        "inputs": {"payer_monthly_income": 10000, "percent": 30, "child_count": 2},
        "expected": {
            "support_total": 3000,
            "per_child": 1500,
            "annual": 36000,
            "thirteenth_reflex": 3000,
            "total": 39000,
        },
    },
    {
        "scenario_id": "asset_division_half",
        "kind": "asset_division",
        "inputs": {"total_assets": 800000, "percent": 50},
        "expected": {"share_value": 400000, "other_party_value": 400000, "total": 400000},
    },
    {
        "scenario_id": "contribution_time_twenty_years",
        "kind": "contribution_time",
        "inputs": {"start_date": "2000-01-01", "end_date": "2020-01-01"},
        "expected": {"elapsed_days": 7305, "years": 20, "months": 0, "days": 5, "total": 7305},
    },
    {
        "scenario_id": "contribution_time_reversed_dates",
        "kind": "contribution_time",
        "inputs": {"start_date": "2020-01-01", "end_date": "2000-01-01"},
        "expected": {"elapsed_days": 7305, "total": 7305},
    },
]


def _explode(scenarios: List[Dict[str, Any]]) -> pd.DataFrame:
    rows = [
        {
            "scenario_id": scenario["scenario_id"],
            "kind": scenario["kind"],
            "inputs": scenario["inputs"],
            "field": name,
            "expected": float(value),
        }
        for scenario in scenarios
        for name, value in scenario["expected"].items()
    ]
    return pd.DataFrame(rows, columns=SCENARIO_COLUMNS)


def _parse_inputs(cell: Any, scenario_id: Any) -> Dict[str, Any]:
    """Parse one "inputs" cell; it must hold a JSON object."""
    if not isinstance(cell, str):
        if pd.isna(cell):
            raise ValueError(f"Scenario {scenario_id!r} has no inputs")
        raise ValueError(f"Scenario {scenario_id!r} inputs must be a JSON object")
    if not cell.strip():
        raise ValueError(f"Scenario {scenario_id!r} has no inputs")
    try:
        inputs = json.loads(cell)
    except json.JSONDecodeError as e:
        raise ValueError(f"Scenario {scenario_id!r} has invalid inputs JSON: {e}") from e
    if not isinstance(inputs, dict):
        raise ValueError(f"Scenario {scenario_id!r} inputs must be a JSON object")
    return inputs


def load_scenarios(
    csv_path: Optional[str] = None,
    include_reference: bool = True,
) -> pd.DataFrame:
    """
    Load validation scenarios.

    Args:
        csv_path: Optional CSV with columns scenario_id, kind, inputs (a JSON
            object), field, expected
        include_reference: Include the built-in reference scenarios

    Returns:
        DataFrame with one row per (scenario, field)
    """
    frames = []
    if include_reference:
        frames.append(_explode(REFERENCE_SCENARIOS))

    if csv_path:
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(f"Scenario file not found: {path}")
        extra = pd.read_csv(path, dtype={"scenario_id": str, "kind": str, "field": str})
        missing = set(SCENARIO_COLUMNS) - set(extra.columns)
        if missing:
            raise ValueError(f"Scenario file missing columns: {sorted(missing)}")
        extra["inputs"] = [
            _parse_inputs(cell, scenario_id)
            for cell, scenario_id in zip(extra["inputs"], extra["scenario_id"])
        ]
        extra["expected"] = extra["expected"].astype(float)
        frames.append(extra[SCENARIO_COLUMNS])

    if not frames:
        return pd.DataFrame(columns=SCENARIO_COLUMNS)
    return pd.concat(frames, ignore_index=True)
