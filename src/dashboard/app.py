# This file is the Streamlit entrypoint for the protocol-vs-banks deposits dashboard.
# It exists to wire configuration, session state, and the leaderboard page together in one app.
# Every interaction swaps the session snapshot and the page is rebuilt from it on the next pass.
# The refresh button runs a fixed simulated wait and never changes the data.

from __future__ import annotations

import logging

import streamlit as st

from src.common.logging import configure_logging
from src.dashboard.components.filters import render_controls
from src.dashboard.dashboard_config import load_dashboard_config
from src.dashboard.page_views import rankings
from src.dashboard.session import get_state, run_pending_refresh
from src.dashboard.tooltips import TOOLTIPS
from src.dashboard.ui_text import APP_SUBTITLE, APP_TITLE, REFRESHING_MESSAGE, SOURCE_LINK_LABEL
from src.deposits.summary import compute_summary
from src.deposits.view_pipeline import build_view

LOGGER = logging.getLogger("dashboard")


def main() -> None:
    configure_logging()
    config = load_dashboard_config()
    title = APP_TITLE.format(protocol=config.protocol_name)
    st.set_page_config(page_title=title, layout="wide")

    state = get_state()

    st.title(title)
    st.caption(APP_SUBTITLE.format(protocol=config.protocol_name))
    st.markdown(f"[{SOURCE_LINK_LABEL}]({config.source_url})")

    render_controls(config=config, state=state, tooltips=TOOLTIPS)

    view = build_view(
        state.records,
        state.params,
        rank_window=config.rank_window,
        chart_top_n=config.chart_top_n,
        label_max_chars=config.chart_label_max_chars,
    )
    summary = compute_summary(state.records, protocol_name=config.protocol_name)
    LOGGER.debug(
        "view rebuilt sort=%s:%s filter=%s rows=%d",
        state.params.sort_field,
        state.params.sort_direction,
        state.params.filter_mode,
        len(view.rows),
    )

    rankings.render(
        view=view,
        params=state.params,
        summary=summary,
        config=config,
        tooltips=TOOLTIPS,
    )

    if state.is_refreshing:
        with st.spinner(REFRESHING_MESSAGE):
            run_pending_refresh(delay_seconds=config.refresh_delay_seconds)
        st.rerun()


if __name__ == "__main__":
    main()
