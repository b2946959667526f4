"""
Command-line interface for juscalc.

Usage:
    juscalc list
    juscalc compute severance_pay base_salary=3000 months_worked=12
    juscalc compute overtime base_salary=2200 overtime_hours=10 --json
    juscalc compute hazard_premium base_salary=3000 months=6 \\
        --save "Periculosidade" --history history.json --owner adv-1
    juscalc history list --history history.json --owner adv-1
    juscalc history delete ENTRY_ID --history history.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .catalog import CATEGORY_LABELS, TotalUnit, entries_by_category, get_entry
from .config import REFERENCE_MINIMUM_WAGE, EngineConfig
from .engine import coerce_input, compute
from .exceptions import HistoryEntryNotFoundError, UnknownCalculationError
from .history import JsonFileHistoryStore
from .presenter import format_currency, render_text


def parse_assignments(pairs):
    """["a=1", "b=x"] -> {"a": "1", "b": "x"}; values stay raw strings."""
    record = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected field=value, got {pair!r}")
        record[name.strip()] = value
    return record


def _cmd_list(args):
    for category, entries in entries_by_category().items():
        print(f"{CATEGORY_LABELS[category]} ({category.value})")
        if not entries:
            print("  (none)")
        for entry in entries:
            print(f"  {entry.kind.value:<30} {entry.label} - {entry.description}")
            if args.fields:
                for spec in entry.fields:
                    print(f"      {spec.name} ({spec.type.value}): {spec.label}")
    return 0


def _cmd_compute(args):
    entry = get_entry(args.kind)
    config = EngineConfig(reference_minimum_wage=args.minimum_wage)
    raw = parse_assignments(args.fields)
    result = compute(entry.kind, raw, config)

    if args.json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        print(render_text(result, entry.kind, title=entry.label))

    if args.save:
        if not args.history:
            print("Error: --history required with --save", file=sys.stderr)
            return 1
        store = JsonFileHistoryStore(args.history)
        saved = store.save(
            owner_id=args.owner,
            title=args.save,
            kind=entry.kind,
            input_record=coerce_input(entry.kind, raw, config),
            result_record=result,
            process_id=args.process_id,
        )
        print(f"Saved {saved.id} -> {args.history}", file=sys.stderr)
    return 0


def _cmd_history(args):
    store = JsonFileHistoryStore(args.history)
    if args.history_command == "list":
        for saved in store.list(args.owner, limit=args.limit):
            entry = get_entry(saved.calculation_kind)
            total = saved.result_record.get("total")
            shown = (
                format_currency(total)
                if isinstance(total, (int, float)) and entry.total_unit == TotalUnit.CURRENCY
                else total
            )
            print(
                f"{saved.id}  {saved.created_at:%Y-%m-%d %H:%M}  "
                f"{entry.label:<28} {saved.title}  {shown}"
            )
    elif args.history_command == "delete":
        store.delete(args.entry_id)
        print(f"Deleted {args.entry_id}", file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="juscalc",
        description="Legal and financial calculations (trabalhista, cível, família, previdenciário)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # List command
    list_parser = subparsers.add_parser("list", help="List available calculations")
    list_parser.add_argument(
        "--fields",
        action="store_true",
        help="Show the input fields of each calculation",
    )

    # Compute command
    compute_parser = subparsers.add_parser("compute", help="Run a calculation")
    compute_parser.add_argument("kind", help="Calculation kind, e.g. severance_pay")
    compute_parser.add_argument(
        "fields",
        nargs="*",
        help="Input fields as field=value",
    )
    compute_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw result record as JSON",
    )
    compute_parser.add_argument(
        "--minimum-wage",
        type=float,
        default=REFERENCE_MINIMUM_WAGE,
        help=f"Reference minimum wage (default: {REFERENCE_MINIMUM_WAGE:g})",
    )
    compute_parser.add_argument("--save", metavar="TITLE", help="Save the result under TITLE")
    compute_parser.add_argument("--history", type=Path, help="History JSON file")
    compute_parser.add_argument("--owner", default="local", help="Owner id (default: local)")
    compute_parser.add_argument("--process-id", help="Legal process the calculation belongs to")

    # History command
    history_parser = subparsers.add_parser("history", help="Saved calculations")
    history_sub = history_parser.add_subparsers(dest="history_command")
    history_list = history_sub.add_parser("list", help="List saved calculations")
    history_list.add_argument("--history", type=Path, required=True)
    history_list.add_argument("--owner", default="local")
    history_list.add_argument("--limit", type=int, default=20)
    history_delete = history_sub.add_parser("delete", help="Delete a saved calculation")
    history_delete.add_argument("entry_id")
    history_delete.add_argument("--history", type=Path, required=True)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None or (args.command == "history" and not args.history_command):
        parser.print_help()
        sys.exit(1)

    commands = {"list": _cmd_list, "compute": _cmd_compute, "history": _cmd_history}
    try:
        code = commands[args.command](args)
    except (UnknownCalculationError, HistoryEntryNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
