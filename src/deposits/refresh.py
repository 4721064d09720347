# This module provides the simulated "refresh data" wait used by the dashboard.
# The wait has no data effect; it only keeps the refresh affordance busy for a fixed time.
# The sleep function is injectable so tests and previews can skip the real delay.

from __future__ import annotations

import logging
import time
from collections.abc import Callable

LOGGER = logging.getLogger("deposits")

DEFAULT_REFRESH_DELAY_SECONDS = 1.5


def simulate_refresh(
    *,
    delay_seconds: float = DEFAULT_REFRESH_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    if delay_seconds < 0:
        raise ValueError(f"delay_seconds must be >= 0, got: {delay_seconds}")

    LOGGER.info("refresh started delay_seconds=%s", delay_seconds)
    sleep(delay_seconds)
    LOGGER.info("refresh finished")
