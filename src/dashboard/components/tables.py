# This file wraps the leaderboard table and its sortable column headers.
# It exists so the empty state, header indicators, and protocol highlighting stay consistent.
# The helper accepts already-ordered table rows and only handles presentation.

from __future__ import annotations

import pandas as pd
import streamlit as st

from src.dashboard.formatting import format_rank, sort_indicator
from src.dashboard.session import on_sort_click
from src.dashboard.ui_text import (
    DEPOSITS_HEADER,
    EMPTY_TABLE,
    NAME_HEADER,
    PROTOCOL_BADGE,
    RANK_HEADER,
    TABLE_CAPTION,
    TABLE_TITLE,
    TYPE_HEADER,
)
from src.deposits.records import CATEGORY_PROTOCOL
from src.deposits.view_pipeline import (
    SORT_FIELD_DEPOSITS,
    SORT_FIELD_RANK,
    TableRow,
    ViewParameters,
    table_rows_to_frame,
)

PROTOCOL_ROW_STYLE = "background-color: rgba(168, 85, 247, 0.2)"


def build_display_frame(table_rows: tuple[TableRow, ...]) -> pd.DataFrame:
    """Shape table rows into the columns shown to readers."""

    frame = table_rows_to_frame(table_rows)
    is_protocol = frame["category"] == CATEGORY_PROTOCOL
    return pd.DataFrame(
        {
            RANK_HEADER: frame["rank"].map(format_rank),
            NAME_HEADER: frame["name"].where(~is_protocol, frame["name"] + f"  [{PROTOCOL_BADGE}]"),
            DEPOSITS_HEADER: "$" + frame["deposits"] + "B",
            TYPE_HEADER: frame["type_label"],
        }
    )


def protocol_row_mask(table_rows: tuple[TableRow, ...]) -> list[bool]:
    return [row.category == CATEGORY_PROTOCOL for row in table_rows]


def render_sort_headers(params: ViewParameters) -> None:
    rank_col, name_col, deposits_col = st.columns([1, 3, 2], vertical_alignment="center")
    rank_col.button(
        f"{RANK_HEADER} {sort_indicator(SORT_FIELD_RANK, params)}",
        key="sort_rank",
        on_click=on_sort_click,
        args=(SORT_FIELD_RANK,),
    )
    name_col.markdown(f"**{NAME_HEADER}**")
    deposits_col.button(
        f"{DEPOSITS_HEADER} {sort_indicator(SORT_FIELD_DEPOSITS, params)}",
        key="sort_deposits",
        on_click=on_sort_click,
        args=(SORT_FIELD_DEPOSITS,),
    )


def render_rankings_table(
    table_rows: tuple[TableRow, ...],
    *,
    params: ViewParameters,
    help_text: str,
    height: int = 320,
) -> None:
    st.subheader(TABLE_TITLE, help=help_text)
    st.caption(TABLE_CAPTION.format(count=len(table_rows)))
    render_sort_headers(params)

    dataframe = build_display_frame(table_rows)
    if dataframe.empty:
        st.info(EMPTY_TABLE)
        return

    mask = protocol_row_mask(table_rows)
    styled = dataframe.style.apply(
        lambda row: [PROTOCOL_ROW_STYLE if mask[row.name] else "" for _ in row],
        axis=1,
    )
    st.dataframe(styled, hide_index=True, height=height)
