"""
CLI for running the validation pipeline.

Usage:
    python -m juscalc.validation.cli [options]
    juscalc-validate [options]  # if installed

Examples:
    # Built-in reference scenarios
    juscalc-validate

    # Reference scenarios plus a CSV of extra cases, saving the report
    juscalc-validate --csv-path cases.csv --output-dir reports/
"""

import argparse
import sys

from ..config import EngineConfig, REFERENCE_MINIMUM_WAGE
from .comparator import ComparisonConfig, validate


def main():
    parser = argparse.ArgumentParser(
        prog="juscalc-validate",
        description="Validate juscalc calculators against reference scenarios",
    )

    parser.add_argument(
        "--csv-path",
        type=str,
        help="CSV of extra scenarios (scenario_id, kind, inputs, field, expected)",
    )

    parser.add_argument(
        "--no-reference",
        action="store_true",
        help="Skip the built-in reference scenarios",
    )

    parser.add_argument(
        "--tolerance",
        type=float,
        default=0.01,
        help="Absolute tolerance (default: 0.01)",
    )

    parser.add_argument(
        "--minimum-wage",
        type=float,
        default=REFERENCE_MINIMUM_WAGE,
        help=f"Reference minimum wage (default: {REFERENCE_MINIMUM_WAGE:g})",
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        help="Directory to save results",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Hide the progress bar",
    )

    args = parser.parse_args()

    if args.no_reference and not args.csv_path:
        parser.error("--csv-path required with --no-reference")

    try:
        results = validate(
            csv_path=args.csv_path,
            include_reference=not args.no_reference,
            output_dir=args.output_dir,
            config=ComparisonConfig(tolerance=args.tolerance),
            engine_config=EngineConfig(reference_minimum_wage=args.minimum_wage),
            show_progress=not args.quiet,
        )
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not results.passed:
        print("\nValidation failed", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
