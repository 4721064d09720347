# This file stores copy blocks for headings, control labels, and empty-state messages.
# It exists so wording stays consistent across the dashboard components.
# Templates take the configured protocol name so a different protocol needs no copy edits.

from __future__ import annotations

APP_TITLE = "{protocol} vs Banks"
APP_SUBTITLE = "{protocol} breaks into the top 40 U.S. banks by size"
SOURCE_LINK_LABEL = "Source: Federal Reserve Data"

FILTER_LABEL = "Institutions shown"
FILTER_ALL_LABEL = "Show All Banks"
FILTER_RANK_WINDOW_LABEL = "Near {protocol} (Ranks {window})"

DEPOSITS_INPUT_LABEL = "Update {protocol} deposits"
DEPOSITS_INPUT_PLACEHOLDER = "Update {protocol} deposits (B)"
UPDATE_BUTTON_LABEL = "Update"
REFRESH_BUTTON_LABEL = "Refresh Data"
REFRESHING_MESSAGE = "Refreshing data..."

TABLE_TITLE = "Bank Rankings by Deposits"
TABLE_CAPTION = "Showing {count} institutions"
RANK_HEADER = "Rank"
NAME_HEADER = "Name"
DEPOSITS_HEADER = "Deposits"
TYPE_HEADER = "Type"
PROTOCOL_BADGE = "DeFi"

CHART_TITLE = "Top {count} Comparison"
CHART_CAPTION = "Deposit amounts in billions"

PROTOCOL_DEPOSITS_CARD = "{protocol} Total Deposits"
PROTOCOL_RANK_CARD = "Current Rank"
INSTITUTION_COUNT_CARD = "Traditional Banks"

EMPTY_TABLE = "No institutions match the current filter."
EMPTY_CHART = "No institutions available to chart for the current filter."
