"""
Comparator: compare engine results against reference scenarios.

Tolerance-based matching with a per-kind breakdown and a detailed
mismatch report.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd


@dataclass
class ComparisonConfig:
    """Configuration for validation comparison."""

    # Absolute tolerance, in reais (or units for counts)
    tolerance: float = 0.01

    id_col: str = "scenario_id"


@dataclass
class MismatchRecord:
    """Record of a calculation mismatch."""

    scenario_id: str
    kind: str
    field: str
    actual: float
    expected: float
    difference: float
    pct_difference: Optional[float] = None
    error: Optional[str] = None


@dataclass
class ComparisonResults:
    """Results from comparing the engine against reference scenarios."""

    total_scenarios: int
    kinds_compared: List[str]
    matches: Dict[str, int]
    mismatches: Dict[str, List[MismatchRecord]]
    match_rates: Dict[str, float]
    config: ComparisonConfig
    unstable_scenarios: List[str] = field(default_factory=list)
    full_data: Optional[pd.DataFrame] = None

    @property
    def passed(self) -> bool:
        return not self.unstable_scenarios and not any(self.mismatches.values())

    def summary(self) -> Dict[str, Any]:
        """Generate summary statistics."""
        return {
            "total_scenarios": self.total_scenarios,
            "unstable_scenarios": list(self.unstable_scenarios),
            "kinds": {
                kind: {
                    "matches": self.matches[kind],
                    "mismatches": len(self.mismatches[kind]),
                    "match_rate": self.match_rates[kind],
                }
                for kind in self.kinds_compared
            },
        }

    def detailed_report(self) -> str:
        """Generate detailed text report."""
        lines = [
            "=" * 70,
            "juscalc Reference Validation Report",
            "=" * 70,
            f"Total Scenarios: {self.total_scenarios:,}",
            f"Tolerance:       ±{self.config.tolerance}",
            "",
        ]

        for kind in self.kinds_compared:
            lines.extend([
                f"{kind}:",
                "-" * 40,
                f"  Matches:     {self.matches[kind]:,} ({self.match_rates[kind]:.2f}%)",
                f"  Mismatches:  {len(self.mismatches[kind]):,}",
            ])
            for m in sorted(
                self.mismatches[kind], key=lambda m: abs(np.nan_to_num(m.difference)), reverse=True
            )[:5]:
                detail = m.error or f"actual={m.actual:.4f}, expected={m.expected:.4f}"
                lines.append(f"    {m.scenario_id}.{m.field}: {detail}")
            lines.append("")

        if self.unstable_scenarios:
            lines.append("Non-deterministic scenarios:")
            lines.extend(f"  {s}" for s in self.unstable_scenarios)
            lines.append("")

        lines.append("=" * 70)
        return "\n".join(lines)

    def save_report(self, output_dir: Path):
        """Save comparison results to files."""
        output_dir = Path(output_dir)
        output_dir.mkdir(exist_ok=True, parents=True)

        report_path = output_dir / "validation_report.txt"
        report_path.write_text(self.detailed_report())
        print(f"Saved report to: {report_path}")

        if self.full_data is not None:
            data_path = output_dir / "validation_data.csv"
            self.full_data.to_csv(data_path, index=False)
            print(f"Saved full data to: {data_path}")

        all_mismatches = [m for kind in self.kinds_compared for m in self.mismatches[kind]]
        if all_mismatches:
            mismatch_df = pd.DataFrame([vars(m) for m in all_mismatches])
            mismatch_path = output_dir / "mismatches.csv"
            mismatch_df.to_csv(mismatch_path, index=False)
            print(f"Saved mismatches to: {mismatch_path}")


class Comparator:
    """Compare engine results with expected values."""

    def __init__(self, config: Optional[ComparisonConfig] = None):
        self.config = config or ComparisonConfig()

    def compare(
        self,
        df: pd.DataFrame,
        unstable_scenarios: Optional[List[str]] = None,
    ) -> ComparisonResults:
        """
        Compare actual and expected values.

        Args:
            df: Scenario rows with "actual" (output from runners.run_engine)
            unstable_scenarios: Scenario ids that failed the determinism check

        Returns:
            ComparisonResults with match statistics and mismatches
        """
        matches = {}
        mismatches = {}
        match_rates = {}

        for kind in (sorted(df["kind"].unique()) if len(df) else []):
            kind_df = df[df["kind"] == kind]
            kind_matches, kind_mismatches = self._compare_kind(kind_df, kind)
            matches[kind] = kind_matches
            mismatches[kind] = kind_mismatches
            total = kind_matches + len(kind_mismatches)
            match_rates[kind] = (kind_matches / total * 100) if total > 0 else 0

        return ComparisonResults(
            total_scenarios=int(df[self.config.id_col].nunique()) if len(df) else 0,
            kinds_compared=list(matches.keys()),
            matches=matches,
            mismatches=mismatches,
            match_rates=match_rates,
            config=self.config,
            unstable_scenarios=list(unstable_scenarios or []),
            full_data=df,
        )

    def _compare_kind(self, df: pd.DataFrame, kind: str) -> tuple:
        """Compare the rows of a single calculation kind."""
        # A missing actual (NaN) never matches
        is_match = np.isclose(
            df["actual"].astype(float),
            df["expected"].astype(float),
            atol=self.config.tolerance,
            rtol=0,
        )

        mismatches = []
        for _, row in df[~is_match].iterrows():
            actual = row["actual"]
            expected = row["expected"]
            diff = actual - expected

            pct_diff = None
            if expected != 0 and not np.isnan(diff):
                pct_diff = (diff / expected) * 100

            error = row.get("error")
            mismatches.append(MismatchRecord(
                scenario_id=row[self.config.id_col],
                kind=kind,
                field=row["field"],
                actual=actual,
                expected=expected,
                difference=diff,
                pct_difference=pct_diff,
                error=error if isinstance(error, str) else None,
            ))

        return int(is_match.sum()), mismatches


def validate(
    csv_path: Optional[str] = None,
    include_reference: bool = True,
    output_dir: Optional[str] = None,
    config: Optional[ComparisonConfig] = None,
    engine_config=None,
    show_progress: bool = True,
) -> ComparisonResults:
    """
    Run the validation pipeline.

    Args:
        csv_path: Optional CSV of extra scenarios
        include_reference: Include the built-in reference scenarios
        output_dir: Directory to save results
        config: Comparison configuration
        engine_config: EngineConfig for the calculations
        show_progress: Show progress bar

    Returns:
        ComparisonResults
    """
    from .runners import check_determinism, run_engine
    from .scenarios import load_scenarios

    df = load_scenarios(csv_path=csv_path, include_reference=include_reference)
    print(f"Loaded {df['scenario_id'].nunique() if len(df) else 0:,} scenarios")

    print("\nRunning calculators...")
    results_df = run_engine(df, config=engine_config, show_progress=show_progress)
    unstable = check_determinism(df, config=engine_config)

    print("\nComparing results...")
    comparator = Comparator(config)
    results = comparator.compare(results_df, unstable_scenarios=unstable)

    print("\n" + results.detailed_report())

    if output_dir:
        results.save_report(Path(output_dir))

    return results
