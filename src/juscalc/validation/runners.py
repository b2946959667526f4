"""
Runners for validation: execute the engine on scenario data.

Each scenario is computed once; its result record is then spread over the
scenario's (field, expected) rows.
"""

from typing import Dict, List, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from ..config import EngineConfig
from ..engine import compute


def _scenarios(df: pd.DataFrame) -> pd.DataFrame:
    return df.drop_duplicates("scenario_id")[["scenario_id", "kind", "inputs"]]


def run_engine(
    df: pd.DataFrame,
    config: Optional[EngineConfig] = None,
    show_progress: bool = True,
) -> pd.DataFrame:
    """
    Compute every scenario and attach the actual value of each field.

    Args:
        df: Scenario rows (from load_scenarios)
        config: Engine configuration
        show_progress: Show progress bar

    Returns:
        Copy of df with an "actual" column (NaN where the result has no such
        field or the value is not numeric) and an "error" column
    """
    scenarios = _scenarios(df)
    iterator = (
        tqdm(scenarios.itertuples(index=False), total=len(scenarios), desc="juscalc")
        if show_progress
        else scenarios.itertuples(index=False)
    )

    results: Dict[str, Dict] = {}
    errors: Dict[str, str] = {}
    for row in iterator:
        try:
            results[row.scenario_id] = compute(row.kind, row.inputs, config)
        except ValueError as e:
            # Unknown kind in a scenario file; reported, not fatal
            results[row.scenario_id] = {}
            errors[row.scenario_id] = str(e)

    def actual(row: pd.Series) -> float:
        value = results[row["scenario_id"]].get(row["field"])
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return np.nan

    out = df.copy()
    out["actual"] = out.apply(actual, axis=1) if len(out) else pd.Series(dtype=float)
    out["error"] = out["scenario_id"].map(errors)
    return out


def check_determinism(
    df: pd.DataFrame,
    config: Optional[EngineConfig] = None,
    repeats: int = 2,
) -> List[str]:
    """
    Recompute each scenario and report any whose result records differ.

    Returns:
        Scenario ids with non-identical results
    """
    unstable = []
    for row in _scenarios(df).itertuples(index=False):
        try:
            first = compute(row.kind, row.inputs, config)
        except ValueError:
            continue
        if any(compute(row.kind, row.inputs, config) != first for _ in range(repeats - 1)):
            unstable.append(row.scenario_id)
    return unstable
