# This file defines tooltip text for controls, metrics, and charts.
# It exists so readers can interpret the comparison without knowing how the data was captured.
# A single dictionary keeps explanations consistent between components and tests.

from __future__ import annotations

TOOLTIPS: dict[str, str] = {
    "filter_mode": "Show every institution, or only those ranked inside the window around the protocol.",
    "deposits_input": "Enter a positive number in US$ billions. Invalid entries are ignored.",
    "refresh_button": "Re-reads the leaderboard snapshot. The figures are a fixed capture and do not change.",
    "rankings_table": "Rank is the position at capture time and is not recalculated after deposit edits.",
    "top_comparison_chart": "The first five institutions in the current table order; the protocol bar is highlighted.",
    "protocol_deposits_card": "Total deposits currently recorded for the protocol, in US$ billions.",
    "protocol_rank_card": "The protocol's rank among U.S. banks at capture time.",
    "institution_count_card": "Number of traditional banks in the full leaderboard, ignoring filters.",
}
