# This package contains the Streamlit dashboard comparing the protocol's deposits against U.S. banks.
# It exists so readers can sort, filter, and adjust the leaderboard without touching the domain code.
# The modules separate session handling, UI components, and page rendering to keep maintenance straightforward.

__all__ = ["app"]
