# This file renders the leaderboard page: table, top-N chart, and headline cards.
# It exists so the app entrypoint only wires state and configuration together.
# The table and chart read the derived view; the cards read the unfiltered summary.

from __future__ import annotations

import streamlit as st

from src.dashboard.components.charts import render_top_comparison_chart
from src.dashboard.components.summary_cards import render_summary_cards
from src.dashboard.components.tables import render_rankings_table
from src.dashboard.dashboard_config import DashboardConfig
from src.dashboard.formatting import format_count, format_deposits, format_rank
from src.dashboard.ui_text import CHART_CAPTION, CHART_TITLE, EMPTY_CHART
from src.deposits.summary import SummaryStats
from src.deposits.view_pipeline import DashboardView, ViewParameters, chart_points_to_frame


def render(
    *,
    view: DashboardView,
    params: ViewParameters,
    summary: SummaryStats,
    config: DashboardConfig,
    tooltips: dict[str, str],
) -> None:
    table_col, chart_col = st.columns([2, 1])

    with table_col:
        render_rankings_table(
            view.table_rows,
            params=params,
            help_text=tooltips["rankings_table"],
        )

    with chart_col:
        render_top_comparison_chart(
            chart_points_to_frame(view.chart),
            title=CHART_TITLE.format(count=config.chart_top_n),
            caption=CHART_CAPTION,
            empty_message=EMPTY_CHART,
            help_text=tooltips["top_comparison_chart"],
        )

    render_summary_cards(
        protocol_name=config.protocol_name,
        protocol_deposits=format_deposits(summary.protocol_deposits),
        protocol_rank=format_rank(summary.protocol_rank),
        institution_count=format_count(summary.institution_count),
        tooltips=tooltips,
    )
