# This test file validates the simulated refresh wait.
# It exists so the delay hook is honored and the configured duration reaches the sleeper.

from __future__ import annotations

import pytest

from src.deposits.refresh import DEFAULT_REFRESH_DELAY_SECONDS, simulate_refresh


def test_simulate_refresh_uses_injected_sleep() -> None:
    calls: list[float] = []

    simulate_refresh(sleep=calls.append)

    assert calls == [DEFAULT_REFRESH_DELAY_SECONDS]
    assert DEFAULT_REFRESH_DELAY_SECONDS == 1.5


def test_simulate_refresh_custom_delay() -> None:
    calls: list[float] = []

    simulate_refresh(delay_seconds=0.0, sleep=calls.append)

    assert calls == [0.0]


def test_negative_delay_raises() -> None:
    with pytest.raises(ValueError):
        simulate_refresh(delay_seconds=-1.0, sleep=lambda _: None)
