# This test file runs the Streamlit page headlessly and drives a few interactions.
# It exists so widget wiring, callbacks, and rendering stay connected end to end.
# Refresh runs with a zero delay so the full wait-and-rerun cycle stays fast.

from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[2] / "src" / "dashboard" / "app.py"


@pytest.fixture
def app() -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    return at


def test_page_renders_seed_summary(app: AppTest) -> None:
    assert not app.exception
    assert app.title[0].value == "Aave vs Banks"
    assert [metric.value for metric in app.metric] == ["$67.921B", "#38", "6"]


def test_valid_update_changes_protocol_card_and_clears_input(app: AppTest) -> None:
    app.text_input(key="deposits_input").input("75.5")
    app.button(key="apply_deposits").click().run()

    assert not app.exception
    assert app.metric[0].value == "$75.500B"
    assert app.metric[1].value == "#38"
    assert app.text_input(key="deposits_input").value == ""


def test_invalid_update_is_ignored(app: AppTest) -> None:
    app.text_input(key="deposits_input").input("abc")
    app.button(key="apply_deposits").click().run()

    assert not app.exception
    assert app.metric[0].value == "$67.921B"
    assert app.text_input(key="deposits_input").value == "abc"


def test_sort_header_toggles_indicator(app: AppTest) -> None:
    app.button(key="sort_deposits").click().run()
    assert app.button(key="sort_deposits").label == "Deposits ↑"

    app.button(key="sort_deposits").click().run()
    assert app.button(key="sort_deposits").label == "Deposits ↓"
    assert app.button(key="sort_rank").label == "Rank ↕"


def test_rank_window_filter_narrows_table_but_not_summary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_RANK_WINDOW_MIN", "40")
    monkeypatch.setenv("DASHBOARD_RANK_WINDOW_MAX", "40")
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()

    at.selectbox(key="filter_mode").select_index(1).run()

    assert not at.exception
    assert "Showing 1 institutions" in [caption.value for caption in at.caption]
    assert [metric.value for metric in at.metric] == ["$67.921B", "#38", "6"]


def test_refresh_cycle_clears_flag_and_keeps_data(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_REFRESH_DELAY_SECONDS", "0")
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()

    at.button(key="refresh_data").click().run()

    assert not at.exception
    assert at.session_state["deposits_dashboard_state"].is_refreshing is False
    assert at.button(key="refresh_data").disabled is False
    assert [metric.value for metric in at.metric] == ["$67.921B", "#38", "6"]
