"""
Runtime configuration from environment variables.

Entry points call load_dotenv() first, so a local .env file works the same
as exported variables.

    CONTRACT_CALC_LOG_LEVEL      logging level name (default INFO)
    CONTRACT_CALC_CURRENT_YEAR   pin the year clock, e.g. for reproducible runs
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .models import MIN_YEAR

LOG_LEVEL_VAR = "CONTRACT_CALC_LOG_LEVEL"
CURRENT_YEAR_VAR = "CONTRACT_CALC_CURRENT_YEAR"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    pinned_year: Optional[int] = None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment.

    Raises:
        ValueError: If a variable is set to something unusable.
    """
    env = os.environ if environ is None else environ

    log_level = env.get(LOG_LEVEL_VAR, "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"{LOG_LEVEL_VAR}={log_level!r} is not a logging level")

    pinned_year: Optional[int] = None
    raw_year = env.get(CURRENT_YEAR_VAR, "").strip()
    if raw_year:
        try:
            pinned_year = int(raw_year)
        except ValueError:
            raise ValueError(f"{CURRENT_YEAR_VAR}={raw_year!r} is not a year") from None
        if pinned_year < MIN_YEAR:
            raise ValueError(f"{CURRENT_YEAR_VAR} must be {MIN_YEAR} or later, got {pinned_year}")

    return Settings(log_level=log_level, pinned_year=pinned_year)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
