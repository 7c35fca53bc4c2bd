"""
Adjusted monthly value — the business formula.

    months = (renewal_year - issue_year) * 12
    v1     = contract_value / months
    v2     = v1 * 10.33
    result = (v2 / 100) + v1

The operations run in exactly this order on floats. Folding the constants
(e.g. v1 * 1.1033) changes the last bits of the result.
No rounding happens here; that is the renderer's job.
"""

from __future__ import annotations

import logging
import math

from .exceptions import InvalidDurationError
from .models import ContractInput

logger = logging.getLogger(__name__)

ADJUSTMENT_FACTOR = 10.33  # Percent


def calculate(contract: ContractInput) -> float:
    """Return the adjusted monthly value for a validated contract.

    Raises:
        InvalidDurationError: If the term is not at least one year. The
            validator rules this out; reaching it means validation was skipped.
    """
    months = contract.term_months
    if months <= 0:
        raise InvalidDurationError(
            f"Contract term must be positive, got {months} month(s) "
            f"({contract.issue_year} → {contract.renewal_year}).",
            details={
                "issue_year": contract.issue_year,
                "renewal_year": contract.renewal_year,
                "months": months,
            },
        )

    try:
        divisor = float(months)
    except OverflowError:
        # Renewal year has no upper bound; an unrepresentable term is infinite
        divisor = math.inf

    v1 = contract.contract_value / divisor
    v2 = v1 * ADJUSTMENT_FACTOR
    result = (v2 / 100) + v1

    logger.debug("Calculated %r over %d months → %r", contract.contract_value, months, result)
    return result
