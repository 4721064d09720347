# This module models the dashboard session as one explicit, immutable state snapshot.
# It exists so UI callbacks only swap snapshots and never mutate records or view settings in place.
# Every transition is a pure function, which keeps the Streamlit layer a thin adapter.
# Refresh transitions only flip the busy flag and leave records and view parameters alone.

from __future__ import annotations

from dataclasses import dataclass, field, replace

from src.deposits.input_parsing import parse_deposits_input
from src.deposits.records import InstitutionRecord, seed_records, update_deposits, validate_collection
from src.deposits.view_pipeline import FILTER_MODES, ViewParameters, toggle_sort


@dataclass(frozen=True)
class DashboardState:
    records: tuple[InstitutionRecord, ...]
    params: ViewParameters = field(default_factory=ViewParameters)
    is_refreshing: bool = False


def initial_state() -> DashboardState:
    records = seed_records()
    validate_collection(records)
    return DashboardState(records=records)


def with_sort_click(state: DashboardState, clicked_field: str) -> DashboardState:
    return replace(state, params=toggle_sort(state.params, clicked_field))


def with_filter_mode(state: DashboardState, filter_mode: str) -> DashboardState:
    if filter_mode not in FILTER_MODES:
        raise ValueError(f"Unsupported filter mode '{filter_mode}'")
    if filter_mode == state.params.filter_mode:
        return state
    return replace(state, params=replace(state.params, filter_mode=filter_mode))


def apply_deposits_input(
    state: DashboardState,
    raw_text: str | None,
    *,
    protocol_name: str,
) -> tuple[DashboardState, bool]:
    """Apply the text field to the protocol record.

    Returns the new state and whether the input was consumed. Rejected input
    returns the same state object.
    """

    value = parse_deposits_input(raw_text)
    if value is None:
        return state, False
    records = update_deposits(state.records, target_name=protocol_name, new_value=value)
    return replace(state, records=records), True


def start_refresh(state: DashboardState) -> DashboardState:
    if state.is_refreshing:
        return state
    return replace(state, is_refreshing=True)


def finish_refresh(state: DashboardState) -> DashboardState:
    if not state.is_refreshing:
        return state
    return replace(state, is_refreshing=False)
