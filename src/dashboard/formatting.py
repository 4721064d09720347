# This file collects small formatting helpers used across dashboard components.
# It exists so the table, chart tooltips, and metric cards present numbers consistently.
# The functions intentionally return simple strings that Streamlit can display directly.

from __future__ import annotations

from src.deposits.view_pipeline import SORT_ASCENDING, ViewParameters, format_fixed


def format_deposits(value: float | int | None) -> str:
    if value is None:
        return "-"
    return f"${format_fixed(float(value))}B"


def format_rank(value: int | None) -> str:
    if value is None:
        return "-"
    return f"#{int(value)}"


def format_count(value: int | float | None) -> str:
    if value is None:
        return "0"
    return f"{int(value):,}"


def sort_indicator(field: str, params: ViewParameters) -> str:
    if params.sort_field != field:
        return "↕"
    return "↑" if params.sort_direction == SORT_ASCENDING else "↓"
