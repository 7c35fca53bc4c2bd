"""
Pydantic models for contract data — strict typing at every boundary.

Raw input is deliberately loose (whatever a form field hands us). Everything
after validation is typed, and a ContractInput can only be built from numbers
that already satisfy the field-level rules.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ContractInputError

MIN_YEAR = 1900

# Third display line of the result card. Its business meaning was
# never documented; it is carried through verbatim.
NOT_APPLICABLE = "Not Applicable"


# ─── Error Codes ────────────────────────────────────────────────────


class ErrorCode(str, Enum):
    """Machine-readable failure categories."""

    # User input: recoverable, reported per field
    MISSING_FIELD = "MISSING_FIELD"
    NON_POSITIVE_VALUE = "NON_POSITIVE_VALUE"
    YEAR_OUT_OF_RANGE = "YEAR_OUT_OF_RANGE"
    RENEWAL_NOT_AFTER_ISSUE = "RENEWAL_NOT_AFTER_ISSUE"

    # Caller contract breaches: raised, never reported as field errors
    INVALID_DURATION = "INVALID_DURATION"
    NEGATIVE_VALUE = "NEGATIVE_VALUE"
    WORDS_MISMATCH = "WORDS_MISMATCH"


# ─── Field Error ────────────────────────────────────────────────────


class FieldError(BaseModel):
    """A single violated input constraint, attached to the field to highlight."""

    code: ErrorCode
    field: str  # snake_case field name, e.g. "renewal_year"
    message: str  # Human-readable, shown next to the input
    details: dict = Field(default_factory=dict)


# ─── Input Models ───────────────────────────────────────────────────


class RawContractInput(BaseModel):
    """What the presentation layer hands us: three untyped form values.

    Every field is optional and untyped. Coercion and range checks happen in
    the validator so that all problems can be reported together.
    """

    model_config = ConfigDict(populate_by_name=True)

    contract_value: Any = Field(default=None, alias="contractValue")
    issue_year: Any = Field(default=None, alias="issueYear")
    renewal_year: Any = Field(default=None, alias="renewalYear")


class ContractInput(BaseModel):
    """A validated contract: positive face value and two calendar years."""

    contract_value: float = Field(gt=0)
    issue_year: int = Field(ge=MIN_YEAR)
    renewal_year: int = Field(ge=MIN_YEAR)

    @property
    def term_months(self) -> int:
        return (self.renewal_year - self.issue_year) * 12


# ─── Validation Result ──────────────────────────────────────────────


class ValidationResult(BaseModel):
    """Either a clean ContractInput or the full list of field errors. Never both."""

    contract: Optional[ContractInput] = None
    errors: list[FieldError] = Field(default_factory=list)

    @classmethod
    def valid(cls, contract: ContractInput) -> ValidationResult:
        return cls(contract=contract)

    @classmethod
    def invalid(cls, errors: list[FieldError]) -> ValidationResult:
        return cls(errors=errors)

    @property
    def is_valid(self) -> bool:
        return self.contract is not None and not self.errors

    @property
    def messages(self) -> dict[str, str]:
        """Field name → message, first violation per field (form display order)."""
        out: dict[str, str] = {}
        for error in self.errors:
            out.setdefault(error.field, error.message)
        return out

    def unwrap(self) -> ContractInput:
        """Return the contract or raise ContractInputError with every field error."""
        if self.contract is None or self.errors:
            raise ContractInputError(self.errors)
        return self.contract


# ─── Output Models ──────────────────────────────────────────────────


class ResultDisplay(BaseModel):
    """Every string the result card shows, derived from one calculated value."""

    value: float
    rounded: str  # Fixed 3-decimal, no separators: "1532.361"
    decimal_display: str  # "1,532.361"
    currency_display: str  # "$1,532.361"
    words_display: str
    note: str = NOT_APPLICABLE

    def clipboard_text(self) -> str:
        """The three lines copied to the clipboard by the presentation layer."""
        return "\n".join([
            f"Adjusted Monthly Value: {self.currency_display}",
            f"In Words: {self.words_display}",
            self.note,
        ])


class CalculationReport(BaseModel):
    """The final output of the calculation pipeline."""

    is_valid: bool
    current_year: int
    errors: list[FieldError] = Field(default_factory=list)
    contract: Optional[ContractInput] = None
    result: Optional[float] = None
    display: Optional[ResultDisplay] = None

    @property
    def messages(self) -> dict[str, str]:
        out: dict[str, str] = {}
        for error in self.errors:
            out.setdefault(error.field, error.message)
        return out
