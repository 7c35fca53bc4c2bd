"""Pytest configuration — ensures the project root is importable and pins the clock."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from contract_catalyst.clock import FixedYearClock  # noqa: E402
from contract_catalyst.pipeline import ContractCalculationPipeline  # noqa: E402

TEST_YEAR = 2025


@pytest.fixture
def current_year() -> int:
    """The year every test treats as "now". Never read from the system clock."""
    return TEST_YEAR


@pytest.fixture
def pipeline() -> ContractCalculationPipeline:
    return ContractCalculationPipeline(clock=FixedYearClock(TEST_YEAR))
