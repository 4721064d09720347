# This file renders the three headline cards under the leaderboard.
# It exists so the cards share one visual and tooltip pattern.
# The function expects display-ready strings and does not compute anything.

from __future__ import annotations

import streamlit as st

from src.dashboard.ui_text import (
    INSTITUTION_COUNT_CARD,
    PROTOCOL_DEPOSITS_CARD,
    PROTOCOL_RANK_CARD,
)


def render_summary_cards(
    *,
    protocol_name: str,
    protocol_deposits: str,
    protocol_rank: str,
    institution_count: str,
    tooltips: dict[str, str],
) -> None:
    col1, col2, col3 = st.columns(3)

    col1.metric(
        PROTOCOL_DEPOSITS_CARD.format(protocol=protocol_name),
        protocol_deposits,
        help=tooltips["protocol_deposits_card"],
    )
    col2.metric(
        PROTOCOL_RANK_CARD,
        protocol_rank,
        help=tooltips["protocol_rank_card"],
    )
    col3.metric(
        INSTITUTION_COUNT_CARD,
        institution_count,
        help=tooltips["institution_count_card"],
    )
