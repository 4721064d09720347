# This test file validates display strings used by the table, chart tooltips, and cards.
# It exists so currency, rank, and sort indicator output stay consistent.

from __future__ import annotations

from src.dashboard.formatting import format_count, format_deposits, format_rank, sort_indicator
from src.deposits.view_pipeline import (
    SORT_DESCENDING,
    SORT_FIELD_DEPOSITS,
    SORT_FIELD_RANK,
    ViewParameters,
)


def test_format_deposits() -> None:
    assert format_deposits(69.014) == "$69.014B"
    assert format_deposits(75.5) == "$75.500B"
    assert format_deposits(None) == "-"


def test_format_rank_and_count() -> None:
    assert format_rank(38) == "#38"
    assert format_rank(None) == "-"
    assert format_count(6) == "6"
    assert format_count(1234) == "1,234"
    assert format_count(None) == "0"


def test_sort_indicator() -> None:
    params = ViewParameters()

    assert sort_indicator(SORT_FIELD_RANK, params) == "↑"
    assert sort_indicator(SORT_FIELD_DEPOSITS, params) == "↕"

    params = ViewParameters(sort_field=SORT_FIELD_DEPOSITS, sort_direction=SORT_DESCENDING)
    assert sort_indicator(SORT_FIELD_DEPOSITS, params) == "↓"
