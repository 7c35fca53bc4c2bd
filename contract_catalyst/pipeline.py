"""
Main calculation pipeline — orchestrates the full workflow.

Flow:
  ┌───────────┐
  │ Raw input │   ← Three untyped form values
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Validator │   ← Every field rule, one pass, current year injected
  └─────┬─────┘
        │ (valid only)
  ┌─────▼──────┐
  │ Calculator │   ← Fixed business formula, no rounding
  └─────┬──────┘
        │
  ┌─────▼─────┐
  │ Renderer  │   ← 3-decimal display + words, read back and checked
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Report   │   ← Typed errors or a full result, never a mix
  └───────────┘

The year clock is read exactly once per run. Invalid input never reaches the
calculator. Internal contract breaches (InvalidDurationError,
NegativeValueError, WordsMismatchError) propagate to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from .calculator import calculate
from .clock import YearClock, system_year
from .exceptions import WordsMismatchError
from .models import CalculationReport, RawContractInput, ResultDisplay
from .number_to_words import format_currency, format_decimal, round_to_thousandths, to_words
from .validators import validate
from .word_to_number import words_to_amount

logger = logging.getLogger(__name__)


class ContractCalculationPipeline:
    """Orchestrates validation, calculation and rendering.

    Usage:
        pipeline = ContractCalculationPipeline()
        report = pipeline.run({"contractValue": "50000", "issueYear": "2020", "renewalYear": "2023"})
        if report.is_valid:
            print(report.display.decimal_display, report.display.words_display)
        else:
            for field, message in report.messages.items():
                print(field, message)
    """

    def __init__(self, clock: YearClock | None = None):
        self.clock = clock or system_year

    def run(self, raw: Union[RawContractInput, Mapping[str, Any]]) -> CalculationReport:
        """Execute the full pipeline on one form submission.

        Args:
            raw: The raw form values (snake_case or camelCase keys).

        Returns:
            CalculationReport with either field errors or the rendered result.
        """
        current_year = self.clock()

        # ── Step 1: Validate ────────────────────────────────────────
        logger.info("Validating contract input (current year %d)...", current_year)
        validation = validate(raw, current_year)

        if not validation.is_valid:
            logger.warning(
                "Contract input rejected: %s",
                ", ".join(f"{e.field}={e.code.value}" for e in validation.errors),
            )
            return CalculationReport(
                is_valid=False,
                current_year=current_year,
                errors=validation.errors,
            )

        contract = validation.unwrap()

        # ── Step 2: Calculate ───────────────────────────────────────
        logger.info("Calculating adjusted monthly value...")
        result = calculate(contract)

        # ── Step 3: Render ──────────────────────────────────────────
        display = render(result)

        return CalculationReport(
            is_valid=True,
            current_year=current_year,
            contract=contract,
            result=result,
            display=display,
        )


def render(result: float) -> ResultDisplay:
    """Build every display string for a calculated value.

    The words are parsed back and compared with the rounded figure before
    anything is returned.

    Raises:
        NegativeValueError: If the value is negative.
        WordsMismatchError: If the words do not read back to the figure.
    """
    words = to_words(result)
    rounded = round_to_thousandths(result)

    read_back = words_to_amount(words)
    if read_back != rounded:
        raise WordsMismatchError(
            f"Words {words!r} read back as {read_back}, expected {rounded}",
            details={"words": words, "read_back": str(read_back), "expected": str(rounded)},
        )

    return ResultDisplay(
        value=result,
        rounded=format(rounded, "f"),
        decimal_display=format_decimal(result),
        currency_display=format_currency(result),
        words_display=words,
    )
