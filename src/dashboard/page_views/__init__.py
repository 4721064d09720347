# This package contains page-level renderers for the dashboard.
# Each module composes shared components into one narrative section.

__all__ = ["rankings"]
