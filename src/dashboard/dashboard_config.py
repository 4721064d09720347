# This file defines runtime configuration for the deposits dashboard.
# It exists so the protocol name, rank window, chart size, and refresh delay can be tuned through environment variables.
# Keeping these values centralized avoids hard-coded behavior scattered across the app.
# The dataclass also makes the view inputs explicit and easy to test.

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from src.deposits.records import PROTOCOL_NAME
from src.deposits.view_pipeline import RankWindow

DEFAULT_SOURCE_URL = "https://www.federalreserve.gov/releases/lbr/current/"


@dataclass(frozen=True)
class DashboardConfig:
    protocol_name: str
    rank_window_min: int
    rank_window_max: int
    chart_top_n: int
    chart_label_max_chars: int
    refresh_delay_seconds: float
    source_url: str

    def __post_init__(self) -> None:
        if not self.protocol_name:
            raise ValueError("protocol_name must be non-empty")
        if self.rank_window_min > self.rank_window_max:
            raise ValueError(
                f"DASHBOARD_RANK_WINDOW_MIN ({self.rank_window_min}) must be <= "
                f"DASHBOARD_RANK_WINDOW_MAX ({self.rank_window_max})"
            )
        if self.chart_top_n < 1:
            raise ValueError("DASHBOARD_CHART_TOP_N must be >= 1")
        if self.chart_label_max_chars < 1:
            raise ValueError("DASHBOARD_CHART_LABEL_MAX_CHARS must be >= 1")
        if self.refresh_delay_seconds < 0:
            raise ValueError("DASHBOARD_REFRESH_DELAY_SECONDS must be >= 0")

    @property
    def rank_window(self) -> RankWindow:
        return RankWindow(lower=self.rank_window_min, upper=self.rank_window_max)


def load_dashboard_config(*, load_env: bool = True) -> DashboardConfig:
    if load_env:
        load_dotenv()

    return DashboardConfig(
        protocol_name=os.getenv("DASHBOARD_PROTOCOL_NAME", PROTOCOL_NAME),
        rank_window_min=int(os.getenv("DASHBOARD_RANK_WINDOW_MIN", "35")),
        rank_window_max=int(os.getenv("DASHBOARD_RANK_WINDOW_MAX", "45")),
        chart_top_n=int(os.getenv("DASHBOARD_CHART_TOP_N", "5")),
        chart_label_max_chars=int(os.getenv("DASHBOARD_CHART_LABEL_MAX_CHARS", "15")),
        refresh_delay_seconds=float(os.getenv("DASHBOARD_REFRESH_DELAY_SECONDS", "1.5")),
        source_url=os.getenv("DASHBOARD_SOURCE_URL", DEFAULT_SOURCE_URL),
    )
