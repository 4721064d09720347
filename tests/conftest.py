"""
Shared test configuration.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.deposits.records import InstitutionRecord, seed_records  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure settings resolve and dashboard overrides from the shell do not leak in."""

    defaults = {
        "PROJECT_NAME": "test-project",
        "ENV": "test",
        "LOG_LEVEL": "INFO",
    }

    for key, value in defaults.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)

    for key in list(os.environ):
        if key.startswith("DASHBOARD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def seed() -> tuple[InstitutionRecord, ...]:
    return seed_records()
