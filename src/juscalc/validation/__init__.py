"""
Validation module: check the calculators against hand-verified scenarios.

- Reference scenarios ship with the package; more can be loaded from CSV
- Tolerance-based comparison with detailed mismatch reporting
- Every scenario is recomputed to confirm results are deterministic
"""

from .comparator import Comparator, ComparisonConfig, ComparisonResults, validate
from .runners import check_determinism, run_engine
from .scenarios import REFERENCE_SCENARIOS, load_scenarios

__all__ = [
    "Comparator",
    "ComparisonConfig",
    "ComparisonResults",
    "validate",
    "run_engine",
    "check_determinism",
    "load_scenarios",
    "REFERENCE_SCENARIOS",
]
