#!/usr/bin/env python3
"""
Contract Catalyst — Entry Point
================================

Calculates the adjusted monthly value of a contract and prints it in figures
and in words.

Usage:
    python main.py                          # Sample contract: 50000, 2020 → 2023
    python main.py 12000 2021 2022          # Your own contract
    CONTRACT_CALC_CURRENT_YEAR=2024 python main.py 50000 2020 2023
"""

from __future__ import annotations

import argparse
import sys

from dotenv import load_dotenv

from contract_catalyst.clock import clock_from_settings
from contract_catalyst.config import configure_logging, load_settings
from contract_catalyst.models import CalculationReport
from contract_catalyst.pipeline import ContractCalculationPipeline

load_dotenv()


# ─── Sample Contract ────────────────────────────────────────────────

SAMPLE_INPUT = {
    "contract_value": "50000",
    "issue_year": "2020",
    "renewal_year": "2023",
}


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72

_LABELS = {
    "contract_value": "Contract Value",
    "issue_year": "Issue Year",
    "renewal_year": "Renewal Year",
}


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(report: CalculationReport, raw: dict) -> int:
    """Pretty-print the calculation report with ANSI color codes.

    Returns:
        0 if the input was valid, 1 if rejected.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  ADJUSTED MONTHLY VALUE{_RESET}")
    print(f"{'=' * _WIDTH}")
    for field, label in _LABELS.items():
        print(f"  {label + ':':<16}{raw.get(field)}")
    print(f"  {'Current Year:':<16}{_DIM}{report.current_year}{_RESET}")
    print(f"{'─' * _WIDTH}")

    if report.is_valid and report.display is not None:
        display = report.display
        print(f"  {_GREEN}{_BOLD}{display.currency_display}{_RESET}")
        print(f"  {display.words_display}")
        print(f"  {_DIM}{display.note}{_RESET}")
        print(f"{'=' * _WIDTH}\n")
        return 0

    print(f"\n  {_RED}{_BOLD}INVALID INPUT ({len(report.errors)}){_RESET}")
    for error in report.errors:
        print(f"    {_RED}[{error.code.value}]{_RESET} {_LABELS[error.field]}: {error.message}")
    print(f"{'=' * _WIDTH}\n")
    return 1


# ─── Main ────────────────────────────────────────────────────────────


def parse_args(argv: list[str]) -> dict:
    parser = argparse.ArgumentParser(
        description="Calculate a contract's adjusted monthly value in figures and words.",
    )
    parser.add_argument("contract_value", nargs="?", help="Contract face value, e.g. 50000")
    parser.add_argument("issue_year", nargs="?", help="Year the contract was issued")
    parser.add_argument("renewal_year", nargs="?", help="Year the contract renews")
    args = parser.parse_args(argv)

    values = [args.contract_value, args.issue_year, args.renewal_year]
    if all(v is None for v in values):
        return dict(SAMPLE_INPUT)
    return dict(zip(_LABELS, values))


def main(argv: list[str] | None = None) -> int:
    """Run the pipeline on the command-line contract and print the report."""
    settings = load_settings()
    configure_logging(settings)

    raw = parse_args(sys.argv[1:] if argv is None else argv)
    pipeline = ContractCalculationPipeline(clock=clock_from_settings(settings.pinned_year))
    report = pipeline.run(raw)
    return print_report(report, raw)


if __name__ == "__main__":
    sys.exit(main())
