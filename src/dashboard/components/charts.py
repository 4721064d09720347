# This file renders the top-N deposits bar chart.
# It exists so chart logic handles empty datasets and protocol highlighting in one place.
# Bars keep the order of the current table view instead of re-sorting by value.
# The chart uses Altair because it integrates cleanly with Streamlit.

from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from src.dashboard.formatting import format_deposits

PROTOCOL_BAR_COLOR = "#a855f7"
INSTITUTION_BAR_COLOR = "#6366f1"


def render_top_comparison_chart(
    dataframe: pd.DataFrame,
    *,
    title: str,
    caption: str,
    empty_message: str,
    help_text: str,
) -> None:
    st.subheader(title, help=help_text)
    st.caption(caption)
    if dataframe.empty:
        st.info(empty_message)
        return

    frame = dataframe.assign(deposits_display=dataframe["value"].map(format_deposits))
    chart = (
        alt.Chart(frame)
        .mark_bar(cornerRadiusTopLeft=4, cornerRadiusTopRight=4)
        .encode(
            x=alt.X("label:N", sort=None, title=None, axis=alt.Axis(labelAngle=-45)),
            y=alt.Y("value:Q", title="Deposits (US$ billions)"),
            color=alt.condition(
                alt.datum.highlight,
                alt.value(PROTOCOL_BAR_COLOR),
                alt.value(INSTITUTION_BAR_COLOR),
            ),
            tooltip=[
                alt.Tooltip("label:N", title="Institution"),
                alt.Tooltip("deposits_display:N", title="Deposits"),
            ],
        )
        .properties(height=320)
    )
    st.altair_chart(chart)
