"""
Package marker for source code under `src.deposits`.
It groups the record store, view pipeline, and session state transitions behind a stable import path.
Nothing in this package imports Streamlit, so every module can be exercised directly from tests.
"""
