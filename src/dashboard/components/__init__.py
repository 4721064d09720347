# This package groups reusable Streamlit components used by the dashboard page.
# It exists to keep visual patterns and interaction logic consistent across sections.
# Sharing these helpers keeps the page module focused on layout.

__all__ = ["filters", "summary_cards", "tables", "charts"]
