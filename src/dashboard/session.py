# This file adapts the immutable dashboard state to Streamlit's session storage.
# It exists so widget callbacks stay one-liners that swap state snapshots.
# Callbacks run before the next script pass, so every render sees a consistent snapshot.
# The simulated refresh is driven from here because it spans a render and a rerun.

from __future__ import annotations

import streamlit as st

from src.deposits.refresh import simulate_refresh
from src.deposits.state import (
    DashboardState,
    apply_deposits_input,
    finish_refresh,
    initial_state,
    start_refresh,
    with_filter_mode,
    with_sort_click,
)

STATE_KEY = "deposits_dashboard_state"
FILTER_MODE_KEY = "filter_mode"
DEPOSITS_INPUT_KEY = "deposits_input"


def get_state() -> DashboardState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = initial_state()
    return st.session_state[STATE_KEY]


def set_state(state: DashboardState) -> None:
    st.session_state[STATE_KEY] = state


def on_sort_click(clicked_field: str) -> None:
    set_state(with_sort_click(get_state(), clicked_field))


def on_filter_change() -> None:
    set_state(with_filter_mode(get_state(), st.session_state[FILTER_MODE_KEY]))


def on_apply_deposits(protocol_name: str) -> None:
    raw_text = st.session_state.get(DEPOSITS_INPUT_KEY, "")
    state, applied = apply_deposits_input(get_state(), raw_text, protocol_name=protocol_name)
    if applied:
        set_state(state)
        st.session_state[DEPOSITS_INPUT_KEY] = ""


def on_refresh_click() -> None:
    set_state(start_refresh(get_state()))


def run_pending_refresh(*, delay_seconds: float) -> bool:
    """Run the simulated wait if a refresh was requested; True when one ran."""

    if not get_state().is_refreshing:
        return False
    try:
        simulate_refresh(delay_seconds=delay_seconds)
    finally:
        set_state(finish_refresh(get_state()))
    return True
