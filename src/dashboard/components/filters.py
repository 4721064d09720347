# This file renders the control bar shared by the whole page.
# It captures the filter mode, the protocol deposits edit, and the refresh action in one place.
# Widgets report changes through session callbacks so the rendered page always reflects the latest snapshot.

from __future__ import annotations

import streamlit as st

from src.dashboard.dashboard_config import DashboardConfig
from src.dashboard.session import (
    DEPOSITS_INPUT_KEY,
    FILTER_MODE_KEY,
    on_apply_deposits,
    on_filter_change,
    on_refresh_click,
)
from src.dashboard.ui_text import (
    DEPOSITS_INPUT_LABEL,
    DEPOSITS_INPUT_PLACEHOLDER,
    FILTER_ALL_LABEL,
    FILTER_LABEL,
    FILTER_RANK_WINDOW_LABEL,
    REFRESH_BUTTON_LABEL,
    UPDATE_BUTTON_LABEL,
)
from src.deposits.state import DashboardState
from src.deposits.view_pipeline import FILTER_ALL, FILTER_MODES, FILTER_RANK_WINDOW


def filter_mode_labels(config: DashboardConfig) -> dict[str, str]:
    return {
        FILTER_ALL: FILTER_ALL_LABEL,
        FILTER_RANK_WINDOW: FILTER_RANK_WINDOW_LABEL.format(
            protocol=config.protocol_name, window=config.rank_window.as_text
        ),
    }


def render_controls(
    *,
    config: DashboardConfig,
    state: DashboardState,
    tooltips: dict[str, str],
) -> None:
    filter_col, input_col, update_col, refresh_col = st.columns([2, 2, 1, 1], vertical_alignment="bottom")

    labels = filter_mode_labels(config)
    filter_col.selectbox(
        FILTER_LABEL,
        options=list(FILTER_MODES),
        index=FILTER_MODES.index(state.params.filter_mode),
        format_func=labels.__getitem__,
        key=FILTER_MODE_KEY,
        on_change=on_filter_change,
        help=tooltips["filter_mode"],
    )

    input_col.text_input(
        DEPOSITS_INPUT_LABEL.format(protocol=config.protocol_name),
        key=DEPOSITS_INPUT_KEY,
        placeholder=DEPOSITS_INPUT_PLACEHOLDER.format(protocol=config.protocol_name),
        help=tooltips["deposits_input"],
    )
    update_col.button(
        UPDATE_BUTTON_LABEL,
        key="apply_deposits",
        on_click=on_apply_deposits,
        args=(config.protocol_name,),
    )
    refresh_col.button(
        REFRESH_BUTTON_LABEL,
        key="refresh_data",
        icon=":material/refresh:",
        disabled=state.is_refreshing,
        on_click=on_refresh_click,
        help=tooltips["refresh_button"],
    )
