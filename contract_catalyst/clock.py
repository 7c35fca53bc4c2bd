"""
Injectable year clock.

The validator never reads the system time. Whoever runs it asks a YearClock
for the current year once and passes the number in, so tests (and pinned
deployments) get the same answer every time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

YearClock = Callable[[], int]


def system_year() -> int:
    """The current calendar year from the local system clock."""
    return date.today().year


@dataclass(frozen=True)
class FixedYearClock:
    """A clock that always reports the same year."""

    year: int

    def __call__(self) -> int:
        return self.year


def clock_from_settings(pinned_year: Optional[int]) -> YearClock:
    """Use the pinned year if configured, otherwise the system calendar."""
    if pinned_year is None:
        return system_year
    return FixedYearClock(pinned_year)
