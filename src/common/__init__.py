"""Shared settings and logging."""
