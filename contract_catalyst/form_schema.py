"""
Declarative description of the contract form.

The presentation layer renders inputs from this schema; the core never deals
with widgets.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .models import MIN_YEAR


class FieldSpec(BaseModel):
    """One form input: how to label it and which rule it is checked against."""

    name: str  # snake_case, as used in FieldError.field
    alias: str  # camelCase, as posted by the form
    label: str
    icon: str  # Icon identifier for the presentation layer
    placeholder: str
    step: Optional[str] = None
    rule: str


def build_form_schema(current_year: int) -> list[FieldSpec]:
    """Return the three contract inputs in display order."""
    return [
        FieldSpec(
            name="contract_value",
            alias="contractValue",
            label="Contract Value",
            icon="DollarSign",
            placeholder="e.g., 50000",
            step="0.01",
            rule="Required. A positive number.",
        ),
        FieldSpec(
            name="issue_year",
            alias="issueYear",
            label="Issue Year",
            icon="Calendar",
            placeholder=f"e.g., {current_year - 2}",
            rule=f"Required. A whole year from {MIN_YEAR} to {current_year}.",
        ),
        FieldSpec(
            name="renewal_year",
            alias="renewalYear",
            label="Renewal Year",
            icon="CalendarClock",
            placeholder=f"e.g., {current_year + 1}",
            rule=f"Required. A whole year from {MIN_YEAR} on, after the issue year.",
        ),
    ]
