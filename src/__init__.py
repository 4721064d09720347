"""
Package marker for source code under `src`.
`src.deposits` holds the record store and view logic; `src.dashboard` holds the Streamlit UI.
Shared settings and logging live in `src.common`.
"""
