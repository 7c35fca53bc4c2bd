"""
Deterministic input validation for the contract form.

Each field validator:
  - Takes one raw value (plus current_year where it matters)
  - Returns (coerced_value_or_None, list of FieldError)
  - Is independently testable

validate() runs every check in a single pass and never stops at the first
problem, so the form can highlight every bad input at once. The current year
is always passed in; nothing here reads the system clock.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Mapping, Union

from .models import (
    MIN_YEAR,
    ContractInput,
    ErrorCode,
    FieldError,
    RawContractInput,
    ValidationResult,
)

_REQUIRED_MESSAGES: dict[str, str] = {
    "contract_value": "Contract value is required.",
    "issue_year": "Issue year is required.",
    "renewal_year": "Renewal year is required.",
}

RawInput = Union[RawContractInput, Mapping[str, Any]]


# ─── Orchestrator ────────────────────────────────────────────────────


def validate(raw: RawInput, current_year: int) -> ValidationResult:
    """Validate raw form input against every rule and collect all findings."""
    if not isinstance(raw, RawContractInput):
        raw = RawContractInput.model_validate(dict(raw))

    errors: list[FieldError] = []

    contract_value, found = validate_contract_value(raw.contract_value)
    errors.extend(found)

    issue_year, found = validate_issue_year(raw.issue_year, current_year)
    errors.extend(found)

    renewal_year, found = validate_renewal_year(raw.renewal_year)
    errors.extend(found)

    errors.extend(validate_term(issue_year, renewal_year))

    if errors:
        return ValidationResult.invalid(errors)

    assert contract_value is not None
    assert issue_year is not None
    assert renewal_year is not None

    return ValidationResult.valid(
        ContractInput(
            contract_value=contract_value,
            issue_year=issue_year,
            renewal_year=renewal_year,
        )
    )


# ─── Coercion ────────────────────────────────────────────────────────


def coerce_number(value: Any) -> float | None:
    """Coerce a form value to a float. None means "absent or not a number".

    Blank text counts as absent. Booleans are not numbers here, even though
    Python says otherwise. Text follows form-field rules rather than Python
    literal rules: no digit-group underscores, and "Infinity" is the only
    spelling of infinity. An integer too large for a float is infinite.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value or "_" in value:
            return None
        unsigned = value.lstrip("+-")
        if unsigned.lower() in ("inf", "infinity") and unsigned != "Infinity":
            return None
    if not isinstance(value, (str, int, float, Decimal)):
        return None
    try:
        number = float(value)
    except OverflowError:
        # Only ints overflow here; Decimal and text saturate to infinity
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


# ─── Individual Validators ───────────────────────────────────────────


def validate_contract_value(value: Any) -> tuple[float | None, list[FieldError]]:
    """The face value must be a finite number strictly greater than zero."""
    number = coerce_number(value)
    if number is None:
        return None, [_missing("contract_value", value)]

    if not math.isfinite(number) or number <= 0:
        return None, [
            FieldError(
                code=ErrorCode.NON_POSITIVE_VALUE,
                field="contract_value",
                message="Contract value must be a positive number.",
                details={"value": str(value)},
            )
        ]

    return number, []


def validate_issue_year(
    value: Any, current_year: int
) -> tuple[int | None, list[FieldError]]:
    """Issue year must be a whole year in [1900, current_year]."""
    year, errors = _coerce_year("issue_year", value)
    if year is None:
        return None, errors

    if year > current_year:
        return year, [
            FieldError(
                code=ErrorCode.YEAR_OUT_OF_RANGE,
                field="issue_year",
                message="Year cannot be in the future.",
                details={"year": year, "current_year": current_year},
            )
        ]

    return year, []


def validate_renewal_year(value: Any) -> tuple[int | None, list[FieldError]]:
    """Renewal year must be a whole year from 1900 on. No upper bound."""
    return _coerce_year("renewal_year", value)


def validate_term(
    issue_year: int | None, renewal_year: int | None
) -> list[FieldError]:
    """Renewal must come strictly after issue.

    Runs whenever both years are whole numbers, even if one of them is out of
    range, and always reports against renewal_year.
    """
    if issue_year is None or renewal_year is None:
        return []

    if renewal_year <= issue_year:
        return [
            FieldError(
                code=ErrorCode.RENEWAL_NOT_AFTER_ISSUE,
                field="renewal_year",
                message="Renewal year must be after the issue year.",
                details={"issue_year": issue_year, "renewal_year": renewal_year},
            )
        ]

    return []


# ─── Helpers ─────────────────────────────────────────────────────────


def _coerce_year(field: str, value: Any) -> tuple[int | None, list[FieldError]]:
    """Shared year rules: numeric, whole, not before 1900.

    A year below 1900 is still returned so the cross-field term check can run.
    Integers are taken as they are, however large; a float could not hold them.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        year = value
    else:
        number = coerce_number(value)
        if number is None:
            return None, [_missing(field, value)]

        if not number.is_integer():
            return None, [
                FieldError(
                    code=ErrorCode.YEAR_OUT_OF_RANGE,
                    field=field,
                    message="Year must be a whole number.",
                    details={"value": str(value)},
                )
            ]

        year = int(number)

    if year < MIN_YEAR:
        return year, [
            FieldError(
                code=ErrorCode.YEAR_OUT_OF_RANGE,
                field=field,
                message=f"Year must be {MIN_YEAR} or later.",
                details={"year": year, "min_year": MIN_YEAR},
            )
        ]

    return year, []


def _missing(field: str, value: Any) -> FieldError:
    return FieldError(
        code=ErrorCode.MISSING_FIELD,
        field=field,
        message=_REQUIRED_MESSAGES[field],
        details={"value": None if value is None else str(value)},
    )
