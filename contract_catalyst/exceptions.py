"""
Custom exception hierarchy for contract calculation.

User-input problems are NOT exceptions. They are collected as FieldErrors
by the validator so every problem can be shown at once. The exceptions here
signal a broken caller contract (the validator was skipped, or a renderer
produced text that does not read back to its own number).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import FieldError


class ContractCalculatorError(Exception):
    """Base exception for all contract calculator failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ContractInputError(ContractCalculatorError):
    """Raised when an invalid ValidationResult is unwrapped."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        summary = "; ".join(f"{e.field}: {e.message}" for e in errors)
        super().__init__(
            "INVALID_INPUT",
            f"Contract input is invalid ({summary})",
            {"fields": sorted({e.field for e in errors})},
        )


class InvalidDurationError(ContractCalculatorError):
    """The contract term is zero or negative months long."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_DURATION", message, details)


class NegativeValueError(ContractCalculatorError):
    """A negative amount has no words form."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NEGATIVE_VALUE", message, details)


class WordsMismatchError(ContractCalculatorError):
    """The written-out amount does not read back to the rounded figure."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("WORDS_MISMATCH", message, details)
